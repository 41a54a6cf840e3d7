# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the livestock endpoints."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from core.schemas import CamelModel, Envelope, UpdateModel


class LivestockCreate(CamelModel):
    type: str = Field(min_length=1)
    count: int = Field(gt=0)
    acquisition_date: Optional[datetime] = None
    health_status: str = "Healthy"
    notes: Optional[str] = None


class LivestockUpdate(UpdateModel):
    clearable = frozenset({"acquisition_date", "notes"})

    type: Optional[str] = Field(None, min_length=1)
    count: Optional[int] = Field(None, gt=0)
    acquisition_date: Optional[datetime] = None
    health_status: Optional[str] = None
    notes: Optional[str] = None


class LivestockOut(CamelModel):
    livestock_id: str
    farm_id: str
    type: str
    count: int
    acquisition_date: Optional[datetime] = None
    health_status: str
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class LivestockResponse(Envelope):
    livestock: Optional[LivestockOut] = None
    livestocks: Optional[List[LivestockOut]] = None
