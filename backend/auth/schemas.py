# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the auth endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from core.schemas import CamelModel, Envelope


# -- Requests --------------------------------------------------------------


class SignupRequest(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    role: str = "Farmer"
    phone_number: Optional[str] = None
    address: Optional[str] = None


class LoginRequest(CamelModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class ForgotPasswordRequest(CamelModel):
    email: str = Field(min_length=1)


class ResetPasswordRequest(CamelModel):
    email: str = Field(min_length=1)
    otp: str = Field(min_length=1)
    new_password: str = Field(min_length=1)


class ChangePasswordRequest(CamelModel):
    old_password: str
    new_password: str = Field(min_length=1)


# -- Responses -------------------------------------------------------------
# No credential material (hash, reset code) is ever part of a response.


class UserInfo(CamelModel):
    user_id: str
    first_name: str
    last_name: str
    email: str
    role: str
    phone_number: Optional[str] = None
    address: Optional[str] = None
    active: bool
    created_at: datetime
    updated_at: datetime


class AuthResponse(Envelope):
    user: Optional[UserInfo] = None
    token: Optional[str] = None
