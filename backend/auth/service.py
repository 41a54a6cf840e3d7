# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Account lifecycle: signup, login, token refresh, password change, the
one-time-code reset flow and deactivation.

Security notes
--------------
* Login raises the *same* error whether the email is unknown, the account
  is disabled or the password is wrong (no user enumeration).
* Reset-code requests never reveal whether the email is registered; the
  router answers identically either way.
* Plaintext passwords and reset codes are never logged.
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.config import settings
from core.errors import (
    AccountInactiveOrMissing,
    DuplicateIdentity,
    IncorrectPassword,
    InvalidCredentials,
    InvalidOrExpiredCode,
)
from core.logger import logger
from core.security import TokenClaims, hash_password, issue_token, verify_password
from models.user import User
from repositories.stores import accounts


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# ---------------------------------------------------------------------------
# Signup / login / refresh
# ---------------------------------------------------------------------------


def signup(
    db: Session,
    *,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
    role: str = "Farmer",
    phone_number: Optional[str] = None,
    address: Optional[str] = None,
) -> User:
    """Create an account.  Raises DuplicateIdentity if the email is taken."""
    if accounts.get_by_identity(db, email) is not None:
        raise DuplicateIdentity()

    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        password_hash=hash_password(password),
        role=role,
        phone_number=phone_number,
        address=address,
        active=True,
    )
    try:
        accounts.create(db, user)
    except IntegrityError:
        # Lost a race against a concurrent signup for the same email
        db.rollback()
        raise DuplicateIdentity()

    logger.info("Account %s created (role=%s)", user.user_id, user.role)
    return user


def login(db: Session, email: str, password: str) -> tuple[User, str]:
    """Verify credentials and return ``(account, token)``."""
    user = accounts.get_by_identity(db, email)

    # Unified failure path – no information leaks about which check failed
    if not user or not user.active or not verify_password(password, user.password_hash):
        logger.info("Failed login attempt for %s", email)
        raise InvalidCredentials()

    return user, issue_token(user)


def refresh_token(db: Session, claims: TokenClaims) -> str:
    """
    Issue a fresh token from the *current* account row, so role changes
    made since the old token was minted take effect.
    """
    user = accounts.get_by_id(db, claims.user_id)
    if user is None or not user.active:
        raise AccountInactiveOrMissing()
    return issue_token(user)


# ---------------------------------------------------------------------------
# Password change / reset
# ---------------------------------------------------------------------------


def change_password(db: Session, user: User, old_password: str, new_password: str) -> None:
    """Replace the password hash after re-verifying the old password."""
    if not verify_password(old_password, user.password_hash):
        raise IncorrectPassword()

    user.password_hash = hash_password(new_password)
    accounts.update(db, user)
    logger.info("Account %s changed its password", user.user_id)


def issue_reset_code(db: Session, email: str, now: Optional[datetime] = None) -> Optional[str]:
    """
    Store a fresh 6-digit code on the account and return it, or return None
    when no live account has this email.  A new code replaces any earlier one.
    """
    user = accounts.get_by_identity(db, email)
    if user is None:
        return None

    now = now or _utcnow()
    code = f"{100000 + secrets.randbelow(900000)}"
    user.otp_code = code
    user.otp_expires_at = now + timedelta(minutes=settings.reset_code_ttl_minutes)
    user.otp_attempts = 0
    accounts.update(db, user)

    # TODO: deliver the code by email/SMS once an outbound channel is configured
    logger.info("Password reset code issued for account %s", user.user_id)
    return code


def reset_password(
    db: Session,
    email: str,
    code: str,
    new_password: str,
    now: Optional[datetime] = None,
) -> None:
    """
    Replace the password hash if *code* matches the outstanding reset code
    and has not expired.  The code is single-use, and it is discarded once
    ``reset_code_max_attempts`` wrong guesses have been made against it.
    """
    now = now or _utcnow()
    user = accounts.get_by_identity(db, email)

    if user is None or not user.otp_code or user.otp_expires_at is None:
        logger.info("Password reset rejected for %s: no outstanding code", email)
        raise InvalidOrExpiredCode()

    if not secrets.compare_digest(user.otp_code.encode(), code.encode()):
        user.otp_attempts = (user.otp_attempts or 0) + 1
        if user.otp_attempts >= settings.reset_code_max_attempts:
            user.otp_code = None
            user.otp_expires_at = None
            logger.warning(
                "Reset code for account %s discarded after %d wrong attempts",
                user.user_id,
                user.otp_attempts,
            )
        else:
            logger.info("Password reset rejected for %s: code mismatch", email)
        accounts.update(db, user)
        raise InvalidOrExpiredCode()

    if now > _as_utc(user.otp_expires_at):
        logger.info("Password reset rejected for %s: code expired", email)
        raise InvalidOrExpiredCode()

    user.password_hash = hash_password(new_password)
    user.otp_code = None
    user.otp_expires_at = None
    user.otp_attempts = 0
    accounts.update(db, user)
    logger.info("Account %s reset its password", user.user_id)


# ---------------------------------------------------------------------------
# Deactivation
# ---------------------------------------------------------------------------


def deactivate(db: Session, user: User) -> None:
    """
    Disable and soft-delete the account.  Outstanding tokens keep a valid
    signature but every guarded route stops resolving the account.
    """
    user.active = False
    accounts.soft_delete(db, user)
    logger.info("Account %s deactivated", user.user_id)
