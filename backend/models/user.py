# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Account ORM model."""

import uuid

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, text

from database import AuditColumns, Base


class User(AuditColumns, Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Public identifier – referenced by farms.user_id and employees.user_id
    user_id = Column(
        String(36),
        unique=True,
        nullable=False,
        default=lambda: str(uuid.uuid4()),
    )
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    # Case-sensitive; uniqueness only applies to live rows (see __table_args__)
    email = Column(String(255), nullable=False)
    # passlib hash string – the salt is embedded in it
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="Farmer")
    phone_number = Column(String(32), nullable=True)
    address = Column(String(255), nullable=True)
    active = Column(Boolean, nullable=False, default=True)

    # Password-reset one-time code
    otp_code = Column(String(6), nullable=True)
    otp_expires_at = Column(DateTime(timezone=True), nullable=True)
    # Wrong guesses against the outstanding code
    otp_attempts = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index(
            "uq_users_email_live",
            "email",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )
