# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Crop ORM model."""

import uuid

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text

from database import AuditColumns, Base


class Crop(AuditColumns, Base):
    __tablename__ = "crops"

    id = Column(Integer, primary_key=True, autoincrement=True)
    crop_id = Column(
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
    name = Column(String(255), nullable=False)
    planting_date = Column(DateTime(timezone=True), nullable=True)
    harvest_date = Column(DateTime(timezone=True), nullable=True)
    quantity = Column(Float, nullable=False)                          # kg or number of plants
    status = Column(String(32), nullable=False, default="Growing")   # Growing, Harvested, Failed
    notes = Column(Text, nullable=True)
