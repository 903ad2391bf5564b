"""Account listing endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from utility_dashboard.interfaces.http.deps import get_account_service
from utility_dashboard.modules.accounts import AccountService
from utility_dashboard.schemas import AccountResponse

router = APIRouter()


@router.get(
    "/getAccounts",
    response_model=list[AccountResponse],
    summary="Retrieves all utility accounts",
    description="Returns a list of all electricity and gas accounts with their details",
    responses={500: {"description": "Server error"}},
)
async def get_accounts(service: AccountService = Depends(get_account_service)) -> list[AccountResponse]:
    accounts = await service.list_accounts()
    return [AccountResponse.model_validate(account) for account in accounts]
