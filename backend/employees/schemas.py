# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the employee endpoints."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from core.schemas import CamelModel, Envelope, UpdateModel


# -- Requests --------------------------------------------------------------
# ``userId`` optionally links the employee to an existing login account
# (by its public userId).  The link has no bearing on ownership.


class EmployeeCreate(CamelModel):
    user_id: Optional[str] = None
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    position: str = Field(min_length=1)
    salary: Optional[float] = Field(None, ge=0)
    hire_date: Optional[datetime] = None
    contact_info: Optional[str] = None
    status: str = "Active"


class EmployeeUpdate(UpdateModel):
    clearable = frozenset({"user_id", "salary", "hire_date", "contact_info"})

    user_id: Optional[str] = None
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    position: Optional[str] = Field(None, min_length=1)
    salary: Optional[float] = Field(None, ge=0)
    hire_date: Optional[datetime] = None
    contact_info: Optional[str] = None
    status: Optional[str] = None


# -- Responses -------------------------------------------------------------


class EmployeeOut(CamelModel):
    employee_id: str
    farm_id: str
    user_id: Optional[str] = None
    first_name: str
    last_name: str
    position: str
    salary: Optional[float] = None
    hire_date: Optional[datetime] = None
    contact_info: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime


class EmployeeResponse(Envelope):
    employee: Optional[EmployeeOut] = None
    employees: Optional[List[EmployeeOut]] = None
