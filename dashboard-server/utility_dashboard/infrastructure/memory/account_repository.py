"""In-memory implementation of the account repository."""

from __future__ import annotations

from typing import Iterable, Sequence

from utility_dashboard.modules.accounts.exceptions import DuplicateAccountError
from utility_dashboard.modules.accounts.models import AccountType, EnergyAccount
from utility_dashboard.modules.accounts.repository import AccountRepository

SEED_ACCOUNTS: tuple[EnergyAccount, ...] = (
    EnergyAccount(
        id="A-0001",
        type=AccountType.ELECTRICITY,
        balance=30,
        address="1 Greville Ct, Thomastown, 3076, Victoria",
    ),
    EnergyAccount(
        id="A-0002",
        type=AccountType.GAS,
        balance=0,
        address="74 Taltarni Rd, Yawong Hills, 3478, Victoria",
    ),
    EnergyAccount(
        id="A-0003",
        type=AccountType.ELECTRICITY,
        balance=-40,
        address="44 William Road, Cresswell Downs, 0862, Northern Territory",
    ),
    EnergyAccount(
        id="A-0004",
        type=AccountType.ELECTRICITY,
        balance=50,
        address="87 Carolina Park Road, Forresters Beach, 2260, New South Wales",
    ),
    EnergyAccount(
        id="A-0005",
        type=AccountType.GAS,
        balance=25,
        address="12 Sunset Blvd, Redcliffe, 4020, Queensland",
    ),
    EnergyAccount(
        id="A-0006",
        type=AccountType.ELECTRICITY,
        balance=-15,
        address="3 Ocean View Dr, Torquay, 3228, Victoria",
    ),
    EnergyAccount(
        id="A-0007",
        type=AccountType.GAS,
        balance=0,
        address="150 Greenway Cres, Mawson Lakes, 5095, South Australia",
    ),
    EnergyAccount(
        id="A-0008",
        type=AccountType.ELECTRICITY,
        balance=120,
        address="88 Harbour St, Sydney, 2000, New South Wales",
    ),
    EnergyAccount(
        id="A-0009",
        type=AccountType.GAS,
        balance=-60,
        address="22 Boulder Rd, Kalgoorlie, 6430, Western Australia",
    ),
)


class InMemoryAccountRepository(AccountRepository):
    """Account repository over a fixed tuple of records.

    The records are frozen dataclasses held in a tuple, so concurrent requests share
    them without any locking.
    """

    def __init__(self, accounts: Iterable[EnergyAccount] = SEED_ACCOUNTS) -> None:
        self._accounts = tuple(accounts)
        ids = [account.id for account in self._accounts]
        if len(ids) != len(set(ids)):
            raise DuplicateAccountError("Account ids must be unique")

    async def list_accounts(self) -> Sequence[EnergyAccount]:
        return self._accounts
