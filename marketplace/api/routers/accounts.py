"""Accounts API router: POST /accounts (signup hook), GET /accounts/me."""

from typing import Annotated

from fastapi import APIRouter, Depends

from marketplace.api.dependencies import get_account_service, get_auth_context
from marketplace.application.account_service import AccountService
from marketplace.domain.schemas.account import AccountRegisterRequest, AccountResponse
from marketplace.security.auth_context import AuthContext

router = APIRouter()


@router.post("", response_model=AccountResponse, status_code=201)
async def register_account(
    body: AccountRegisterRequest,
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    """Create the caller's account. Repeating the call returns the stored account unchanged."""
    account = await accounts.register(auth.account_id, str(body.email))
    return AccountResponse.from_domain(account)


@router.get("/me", response_model=AccountResponse)
async def get_my_account(
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    accounts: Annotated[AccountService, Depends(get_account_service)],
):
    account = await accounts.get(auth.account_id)
    return AccountResponse.from_domain(account)
