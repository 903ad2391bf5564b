import time

import pytest

from utility_dashboard.infrastructure.memory import SEED_ACCOUNTS, InMemoryAccountRepository
from utility_dashboard.modules.accounts import (
    AccountFilter,
    AccountService,
    AccountType,
    DuplicateAccountError,
    EnergyAccount,
    balance_tone,
    filter_accounts,
    format_balance,
)


def test_seed_accounts_have_unique_ids():
    ids = [account.id for account in SEED_ACCOUNTS]
    assert ids == [f"A-000{n}" for n in range(1, 10)]
    assert len(set(ids)) == len(ids)


def test_repository_rejects_duplicate_ids():
    account = SEED_ACCOUNTS[0]
    with pytest.raises(DuplicateAccountError):
        InMemoryAccountRepository([account, account])


def test_filter_all_is_identity():
    assert filter_accounts(SEED_ACCOUNTS, AccountFilter.ALL) == list(SEED_ACCOUNTS)
    assert filter_accounts([], "ALL") == []


@pytest.mark.parametrize("tag", [AccountFilter.ELECTRICITY, AccountFilter.GAS])
def test_filter_by_type_returns_matching_subset_in_order(tag):
    filtered = filter_accounts(SEED_ACCOUNTS, tag)
    assert filtered
    assert all(account.type.value == tag.value for account in filtered)
    assert all(account in SEED_ACCOUNTS for account in filtered)
    positions = [SEED_ACCOUNTS.index(account) for account in filtered]
    assert positions == sorted(positions)


def test_filter_partitions_the_list():
    electricity = filter_accounts(SEED_ACCOUNTS, "ELECTRICITY")
    gas = filter_accounts(SEED_ACCOUNTS, "GAS")
    assert len(electricity) + len(gas) == len(SEED_ACCOUNTS)
    assert [account.id for account in gas] == ["A-0002", "A-0005", "A-0007", "A-0009"]


def test_filter_rejects_unknown_tag():
    with pytest.raises(ValueError):
        filter_accounts(SEED_ACCOUNTS, "WATER")


@pytest.mark.parametrize(
    ("balance", "tone", "display"),
    [
        (-40, "negative", "$-40.00"),
        (0, "neutral", "$0.00"),
        (120, "positive", "$120.00"),
        (12.5, "positive", "$12.50"),
    ],
)
def test_balance_presentation(balance, tone, display):
    assert balance_tone(balance) == tone
    assert format_balance(balance) == display


def test_account_payload_round_trip_keeps_type_enum():
    account = EnergyAccount.from_payload(
        {"id": "A-0100", "type": "GAS", "address": "1 Test St", "balance": -3}
    )
    assert account.type is AccountType.GAS
    assert account.to_payload()["type"] == "GAS"


async def test_service_lists_accounts_in_seed_order():
    service = AccountService(InMemoryAccountRepository())
    accounts = await service.list_accounts()
    assert list(accounts) == list(SEED_ACCOUNTS)


async def test_service_waits_for_configured_latency():
    service = AccountService(InMemoryAccountRepository(), latency=0.05)
    started = time.monotonic()
    await service.list_accounts()
    assert time.monotonic() - started >= 0.04

