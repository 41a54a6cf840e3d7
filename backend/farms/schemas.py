# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the farm endpoints."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from core.schemas import CamelModel, Envelope, UpdateModel


# -- Requests --------------------------------------------------------------
# The owning account is always the caller; it is never accepted from the body.


class FarmCreate(CamelModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    location: str = Field(min_length=1)
    size: float = Field(gt=0)
    farm_type: str = "Mixed"
    status: str = "Active"


class FarmUpdate(UpdateModel):
    clearable = frozenset({"description"})

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    location: Optional[str] = Field(None, min_length=1)
    size: Optional[float] = Field(None, gt=0)
    farm_type: Optional[str] = None
    status: Optional[str] = None


# -- Responses -------------------------------------------------------------


class FarmOut(CamelModel):
    farm_id: str
    user_id: str
    name: str
    description: Optional[str] = None
    location: str
    size: float
    farm_type: str
    status: str
    created_at: datetime
    updated_at: datetime


class FarmResponse(Envelope):
    farm: Optional[FarmOut] = None
    farms: Optional[List[FarmOut]] = None
