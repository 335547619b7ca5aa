"""API router for user signup, login, verification and profiles."""

from fastapi import APIRouter, Depends, status

from ....application.services.account_service import AccountService, ProfileUpdate
from ....core.dependencies import get_account_service
from ....domain.models import User
from ..dependencies import require_bearer_token
from ..schemas.common import OperationResponse
from ..schemas.user_schemas import (
    GetProfileResponse,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    ResendVerificationRequest,
    SignupRequest,
    SignupResponse,
    UpdateProfileRequest,
    UpdateProfileResponse,
    VerifyEmailRequest,
)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(
    request: SignupRequest,
    account_service: AccountService = Depends(get_account_service),
) -> SignupResponse:
    user = account_service.signup(
        email=request.email,
        password=request.password,
        name=request.name,
        phone_number=request.phone_number,
    )
    return SignupResponse(
        message="Registration successful. Please check your email for verification.",
        user_id=user.id,
    )


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    account_service: AccountService = Depends(get_account_service),
) -> LoginResponse:
    result = account_service.login(request.email, request.password)
    return LoginResponse(
        message="Login successful",
        user_id=result.user.id,
        access_token=result.access_token,
        token_type=result.token_type,
    )


@router.post("/verify-email", response_model=OperationResponse)
def verify_email(
    request: VerifyEmailRequest,
    account_service: AccountService = Depends(get_account_service),
) -> OperationResponse:
    account_service.verify_email(request.email, request.code)
    return OperationResponse(message="Email successfully verified")


@router.post("/resend-verification", response_model=OperationResponse)
def resend_verification(
    request: ResendVerificationRequest,
    account_service: AccountService = Depends(get_account_service),
) -> OperationResponse:
    account_service.resend_verification_code(request.email)
    return OperationResponse(message="Verification code sent")


@router.get("/me", response_model=GetProfileResponse)
def get_profile_by_token(
    token: str = Depends(require_bearer_token),
    account_service: AccountService = Depends(get_account_service),
) -> GetProfileResponse:
    """Resolve the bearer token to a profile; unverified users are refused."""
    user = account_service.get_profile_by_token(token)
    return GetProfileResponse(message="Profile retrieved", profile=serialize_profile(user))


@router.get("/{user_id}", response_model=GetProfileResponse)
def get_profile(
    user_id: str,
    account_service: AccountService = Depends(get_account_service),
) -> GetProfileResponse:
    user = account_service.get_profile(user_id)
    return GetProfileResponse(message="Profile retrieved", profile=serialize_profile(user))


@router.patch("/{user_id}", response_model=UpdateProfileResponse)
def update_profile(
    user_id: str,
    request: UpdateProfileRequest,
    account_service: AccountService = Depends(get_account_service),
) -> UpdateProfileResponse:
    user = account_service.update_profile(
        user_id,
        ProfileUpdate(name=request.name, phone_number=request.phone_number),
    )
    return UpdateProfileResponse(message="Profile updated successfully", profile=serialize_profile(user))


def serialize_profile(user: User) -> ProfileResponse:
    return ProfileResponse(
        user_id=user.id,
        email=user.email,
        name=user.name,
        reputation=user.reputation,
        phone_number=user.phone_number,
        is_verified=user.is_verified,
        is_banned=user.is_banned,
    )
