# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the crop endpoints."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from core.schemas import CamelModel, Envelope, UpdateModel


class CropCreate(CamelModel):
    name: str = Field(min_length=1)
    planting_date: Optional[datetime] = None
    harvest_date: Optional[datetime] = None
    quantity: float = Field(gt=0)
    status: str = "Growing"
    notes: Optional[str] = None


class CropUpdate(UpdateModel):
    clearable = frozenset({"planting_date", "harvest_date", "notes"})

    name: Optional[str] = Field(None, min_length=1)
    planting_date: Optional[datetime] = None
    harvest_date: Optional[datetime] = None
    quantity: Optional[float] = Field(None, gt=0)
    status: Optional[str] = None
    notes: Optional[str] = None


class CropOut(CamelModel):
    crop_id: str
    farm_id: str
    name: str
    planting_date: Optional[datetime] = None
    harvest_date: Optional[datetime] = None
    quantity: float
    status: str
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CropResponse(Envelope):
    crop: Optional[CropOut] = None
    crops: Optional[List[CropOut]] = None
