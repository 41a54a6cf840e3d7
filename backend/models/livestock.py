# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Livestock ORM model – one row per herd/flock, not per animal."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from database import AuditColumns, Base


class Livestock(AuditColumns, Base):
    __tablename__ = "livestock"

    id = Column(Integer, primary_key=True, autoincrement=True)
    livestock_id = Column(
        String(36),
        unique=True,
        nullable=False,
        default=lambda: str(uuid.uuid4()),
    )
    farm_id = Column(
        String(36),
        ForeignKey("farms.farm_id"),
        nullable=False,
        index=True,
    )
    type = Column(String(64), nullable=False)      # Cattle, Poultry, Sheep, Goat …
    count = Column(Integer, nullable=False)
    acquisition_date = Column(DateTime(timezone=True), nullable=True)
    # Healthy, Sick, Under Treatment, Deceased
    health_status = Column(String(32), nullable=False, default="Healthy")
    notes = Column(Text, nullable=True)
