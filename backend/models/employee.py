# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Employee ORM model."""

import uuid

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String

from database import AuditColumns, Base


class Employee(AuditColumns, Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(
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
    # Optional link to a login account.  Not an ownership relation: the
    # employee record always belongs to the farm's owner.
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    position = Column(String(100), nullable=False)
    salary = Column(Float, nullable=True)
    hire_date = Column(DateTime(timezone=True), nullable=True)
    contact_info = Column(String(255), nullable=True)
    status = Column(String(32), nullable=False, default="Active")    # Active, Inactive, Terminated
