# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Employee endpoints.  Ownership works exactly like crops and livestock; the
optional ``userId`` link is validated against live accounts but is never
consulted for authorization.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.errors import LinkedAccountNotFound
from core.ownership import EMPLOYEE, authorize, authorize_farm
from core.security import TokenClaims, get_current_claims
from database import get_db
from employees.schemas import EmployeeCreate, EmployeeOut, EmployeeResponse, EmployeeUpdate
from models.employee import Employee
from repositories.stores import accounts, employees

router = APIRouter(prefix="/api/employees", tags=["employees"])


def _check_linked_account(db: Session, user_id: Optional[str]) -> None:
    if user_id and accounts.get_by_key(db, user_id) is None:
        raise LinkedAccountNotFound()


@router.post("/", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    body: EmployeeCreate,
    farm_id: str = Query(..., alias="farmId", min_length=1),
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    _, farm = authorize_farm(db, claims, farm_id)
    _check_linked_account(db, body.user_id)

    employee = Employee(farm_id=farm.farm_id, **body.model_dump(exclude={"user_id"}))
    employee.user_id = body.user_id or None
    employees.create(db, employee)
    return EmployeeResponse(
        message="Employee created successfully",
        employee=EmployeeOut.model_validate(employee),
    )


@router.get("/", response_model=EmployeeResponse)
def list_employees(
    farm_id: str = Query(..., alias="farmId", min_length=1),
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    _, farm = authorize_farm(db, claims, farm_id)
    rows = employees.list_by_parent(db, farm.farm_id)
    return EmployeeResponse(
        message="Employees retrieved successfully",
        employees=[EmployeeOut.model_validate(e) for e in rows],
    )


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    employee = authorize(db, claims, EMPLOYEE, employee_id)
    return EmployeeResponse(
        message="Employee retrieved successfully",
        employee=EmployeeOut.model_validate(employee),
    )


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: str,
    body: EmployeeUpdate,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    employee = authorize(db, claims, EMPLOYEE, employee_id)
    _check_linked_account(db, body.user_id)

    body.apply_to(employee)
    # null or empty string unlinks
    employee.user_id = employee.user_id or None
    employees.update(db, employee)
    return EmployeeResponse(
        message="Employee updated successfully",
        employee=EmployeeOut.model_validate(employee),
    )


@router.delete("/{employee_id}", response_model=EmployeeResponse)
def delete_employee(
    employee_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    employee = authorize(db, claims, EMPLOYEE, employee_id)
    employees.soft_delete(db, employee)
    return EmployeeResponse(message="Employee deleted successfully")
