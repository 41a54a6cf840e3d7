# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Typed failures raised by the token service, the ownership guard and the
account lifecycle.

Every error is an ``HTTPException`` carrying its own status code and a
generic client-facing message, so handlers simply let them propagate and
FastAPI renders ``{"detail": "<message>"}``.  Internal detail (which check
failed, which ids were involved) goes to the server log, never the client.
"""

from fastapi import HTTPException, status


class ServiceError(HTTPException):
    """Base class.  Subclasses set ``status_code`` and ``message``."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "internal server error"
    headers = None

    def __init__(self, message: str | None = None):
        super().__init__(
            status_code=type(self).status_code,
            detail=message or type(self).message,
            headers=type(self).headers,
        )


# -- 401 ---------------------------------------------------------------------


class Unauthenticated(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "user not authenticated"
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidToken(Unauthenticated):
    message = "invalid or expired token"


class AccountInactiveOrMissing(Unauthenticated):
    message = "user not found or inactive"


class InvalidCredentials(ServiceError):
    # Same message for unknown email, disabled account and wrong password
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "invalid email or password"


# -- 403 / 404 / 409 -----------------------------------------------------------


class AccessDenied(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "access denied"


class ResourceNotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "resource not found"


class AccountNotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "user not found"


class DuplicateIdentity(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    message = "user with this email already exists"


# -- 400 ---------------------------------------------------------------------


class InvalidOrExpiredCode(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "invalid or expired reset code"


class LinkedAccountNotFound(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "linked user not found"


class IncorrectPassword(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "old password is incorrect"
