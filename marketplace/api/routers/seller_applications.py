"""Seller applications API router: apply, current status, own history."""

from typing import Annotated, List

from fastapi import APIRouter, Depends

from marketplace.api.dependencies import (
    get_auth_context,
    get_rbac,
    get_seller_application_service,
)
from marketplace.application.seller_application_service import SellerApplicationService
from marketplace.domain.schemas.seller_application import (
    SellerApplicationRequest,
    SellerApplicationResponse,
    SellerStatusResponse,
)
from marketplace.security.auth_context import AuthContext
from marketplace.security.rbac import RBACService

router = APIRouter()


@router.post("", response_model=SellerStatusResponse, status_code=201)
async def apply_for_seller(
    body: SellerApplicationRequest,
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    rbac: Annotated[RBACService, Depends(get_rbac)],
    service: Annotated[SellerApplicationService, Depends(get_seller_application_service)],
):
    """Apply for seller status. 409 if already pending, already a seller, or in cooldown."""
    rbac.check_permission(auth.role, "apply")
    return await service.apply(auth.account_id, body.to_details())


@router.get("/status", response_model=SellerStatusResponse)
async def get_seller_status(
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[SellerApplicationService, Depends(get_seller_application_service)],
):
    return await service.get_status(auth.account_id)


@router.get("/mine", response_model=List[SellerApplicationResponse])
async def list_my_applications(
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    rbac: Annotated[RBACService, Depends(get_rbac)],
    service: Annotated[SellerApplicationService, Depends(get_seller_application_service)],
):
    rbac.check_permission(auth.role, "view_own")
    applications = await service.list_applications(account_id=auth.account_id)
    return [SellerApplicationResponse.from_domain(a) for a in applications]
