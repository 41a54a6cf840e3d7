# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Auth endpoints – signup, login, password reset, token refresh, profile.

The handlers here are thin: validation is done by the request schemas and
every decision lives in :mod:`auth.service`.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from auth import service
from auth.schemas import (
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupRequest,
    UserInfo,
)
from core.ownership import resolve_account
from core.security import TokenClaims, get_current_claims
from database import get_db

router = APIRouter(prefix="/api/auth", tags=["auth"])

# Returned whether or not the email is registered
_RESET_REQUESTED = "If the email exists, a password reset code has been sent"


# ---------------------------------------------------------------------------
# POST /api/auth/signup
# ---------------------------------------------------------------------------


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(body: SignupRequest, db: Session = Depends(get_db)):
    """Register an account.  409 if the email is already in use."""
    user = service.signup(
        db,
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        password=body.password,
        role=body.role,
        phone_number=body.phone_number,
        address=body.address,
    )
    return AuthResponse(
        message="User created successfully",
        user=UserInfo.model_validate(user),
    )


# ---------------------------------------------------------------------------
# POST /api/auth/login
# ---------------------------------------------------------------------------


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    """Authenticate and return a signed bearer token."""
    user, token = service.login(db, body.email, body.password)
    return AuthResponse(
        message="Login successful",
        user=UserInfo.model_validate(user),
        token=token,
    )


# ---------------------------------------------------------------------------
# POST /api/auth/forgot-password  /  POST /api/auth/reset-password
# ---------------------------------------------------------------------------


@router.post("/forgot-password", response_model=AuthResponse)
def forgot_password(body: ForgotPasswordRequest, db: Session = Depends(get_db)):
    service.issue_reset_code(db, body.email)
    return AuthResponse(message=_RESET_REQUESTED)


@router.post("/reset-password", response_model=AuthResponse)
def reset_password(body: ResetPasswordRequest, db: Session = Depends(get_db)):
    service.reset_password(db, body.email, body.otp, body.new_password)
    return AuthResponse(message="Password reset successfully")


# ---------------------------------------------------------------------------
# POST /api/auth/refresh-token
# ---------------------------------------------------------------------------


@router.post("/refresh-token", response_model=AuthResponse)
def refresh_token(
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    """Swap a still-valid token for a fresh one built from the current account."""
    token = service.refresh_token(db, claims)
    return AuthResponse(message="Token refreshed successfully", token=token)


# ---------------------------------------------------------------------------
# /api/auth/me
# ---------------------------------------------------------------------------


@router.get("/me", response_model=AuthResponse)
def me(
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    """Return the authenticated account's public profile (no secrets)."""
    user = resolve_account(db, claims)
    return AuthResponse(message="User retrieved successfully", user=UserInfo.model_validate(user))


@router.put("/change-password", response_model=AuthResponse)
def change_password(
    body: ChangePasswordRequest,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    """
    Change the authenticated account's password.  The old password is
    re-verified, so a stolen (not yet expired) token alone cannot do this.
    """
    user = resolve_account(db, claims)
    service.change_password(db, user, body.old_password, body.new_password)
    return AuthResponse(message="Password changed successfully")


@router.delete("/me", response_model=AuthResponse)
def deactivate(
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    """Deactivate (soft-delete) the authenticated account."""
    user = resolve_account(db, claims)
    service.deactivate(db, user)
    return AuthResponse(message="Account deactivated")
