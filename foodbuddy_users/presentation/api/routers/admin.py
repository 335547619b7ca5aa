from fastapi import APIRouter, Depends

from ....application.services.account_service import AccountService
from ....core.dependencies import get_account_service
from ..schemas.common import OperationResponse
from ..schemas.user_schemas import CheckBanResponse, ListUsersResponse
from .user_router import serialize_profile

router = APIRouter(prefix="/api/admin", tags=["Administration"])


@router.get("/users", response_model=ListUsersResponse)
def list_users(account_service: AccountService = Depends(get_account_service)) -> ListUsersResponse:
    users = account_service.list_users()
    return ListUsersResponse(
        message="Users retrieved",
        users=[serialize_profile(user) for user in users],
    )


@router.get("/users/{user_id}/ban", response_model=CheckBanResponse)
def check_ban(
    user_id: str,
    account_service: AccountService = Depends(get_account_service),
) -> CheckBanResponse:
    banned = account_service.check_ban(user_id)
    return CheckBanResponse(message="Ban status retrieved", user_id=user_id, is_banned=banned)


@router.post("/users/{user_id}/ban", response_model=OperationResponse)
def ban_user(
    user_id: str,
    account_service: AccountService = Depends(get_account_service),
) -> OperationResponse:
    account_service.ban_user(user_id)
    return OperationResponse(message="User banned successfully")


@router.delete("/users/{user_id}/ban", response_model=OperationResponse)
def unban_user(
    user_id: str,
    account_service: AccountService = Depends(get_account_service),
) -> OperationResponse:
    account_service.unban_user(user_id)
    return OperationResponse(message="User unbanned successfully")
