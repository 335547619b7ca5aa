"""Pydantic schemas for user API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .common import MAX_PHONE_NUMBER, OperationResponse, SubmittedEmail


class SignupRequest(BaseModel):
    """Request schema for user signup."""

    email: SubmittedEmail
    password: str = Field(min_length=1)
    name: str = ""
    phone_number: int = Field(default=0, ge=0, le=MAX_PHONE_NUMBER)


class SignupResponse(OperationResponse):
    """Response schema for user signup."""

    user_id: str


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: SubmittedEmail
    password: str


class LoginResponse(OperationResponse):
    """Response schema for user login."""

    user_id: str
    access_token: str
    token_type: str = "bearer"


class VerifyEmailRequest(BaseModel):
    """Request schema for email verification."""

    email: SubmittedEmail
    code: str


class ResendVerificationRequest(BaseModel):
    """Request schema to resend the verification code."""

    email: SubmittedEmail


class ProfileResponse(BaseModel):
    """Public view of a user record."""

    user_id: str
    email: str
    name: str
    reputation: int
    phone_number: int
    is_verified: bool
    is_banned: bool


class GetProfileResponse(OperationResponse):
    profile: ProfileResponse


class UpdateProfileRequest(BaseModel):
    """Partial update; omitted or null fields are left untouched."""

    name: Optional[str] = None
    phone_number: Optional[int] = Field(default=None, ge=0, le=MAX_PHONE_NUMBER)


class UpdateProfileResponse(OperationResponse):
    profile: ProfileResponse


class ListUsersResponse(OperationResponse):
    users: List[ProfileResponse]


class CheckBanResponse(OperationResponse):
    user_id: str
    is_banned: bool
