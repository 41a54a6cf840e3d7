# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Farm ORM model – root of the ownership chain."""

import uuid

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text

from database import AuditColumns, Base


class Farm(AuditColumns, Base):
    __tablename__ = "farms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    farm_id = Column(
        String(36),
        unique=True,
        nullable=False,
        default=lambda: str(uuid.uuid4()),
    )
    # Owning account.  Set once at creation; no handler ever rewrites it.
    user_id = Column(
        String(36),
        ForeignKey("users.user_id"),
        nullable=False,
        index=True,
    )
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String(255), nullable=False)
    size = Column(Float, nullable=False)                               # acres / hectares
    farm_type = Column(String(32), nullable=False, default="Mixed")    # Crop, Livestock, Mixed
    status = Column(String(32), nullable=False, default="Active")      # Active, Inactive, Suspended
