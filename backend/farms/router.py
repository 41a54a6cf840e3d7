# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Farm endpoints.

Security invariants enforced by every handler
---------------------------------------------
* A bearer token is required on every endpoint (``get_current_claims``).
* Single-farm operations go through ``authorize(…, FARM, …)``, which loads
  the row and asserts that ``farm.user_id`` is the caller's account.  A
  guessed farm id belonging to someone else is rejected with 403.
* ``user_id`` is set from the caller on create and is never updatable.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.ownership import FARM, authorize, resolve_account
from core.security import TokenClaims, get_current_claims
from database import get_db
from farms.schemas import FarmCreate, FarmOut, FarmResponse, FarmUpdate
from models.farm import Farm
from repositories.stores import farms

router = APIRouter(prefix="/api/farms", tags=["farms"])


@router.post("/", response_model=FarmResponse, status_code=status.HTTP_201_CREATED)
def create_farm(
    body: FarmCreate,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    account = resolve_account(db, claims)
    farm = farms.create(db, Farm(user_id=account.user_id, **body.model_dump()))
    return FarmResponse(message="Farm created successfully", farm=FarmOut.model_validate(farm))


@router.get("/", response_model=FarmResponse)
def list_farms(
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    """Return every live farm owned by the caller."""
    account = resolve_account(db, claims)
    rows = farms.list_by_parent(db, account.user_id)
    return FarmResponse(
        message="Farms retrieved successfully",
        farms=[FarmOut.model_validate(f) for f in rows],
    )


@router.get("/{farm_id}", response_model=FarmResponse)
def get_farm(
    farm_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    farm = authorize(db, claims, FARM, farm_id)
    return FarmResponse(message="Farm retrieved successfully", farm=FarmOut.model_validate(farm))


@router.put("/{farm_id}", response_model=FarmResponse)
def update_farm(
    farm_id: str,
    body: FarmUpdate,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    farm = authorize(db, claims, FARM, farm_id)
    body.apply_to(farm)
    farms.update(db, farm)
    return FarmResponse(message="Farm updated successfully", farm=FarmOut.model_validate(farm))


@router.delete("/{farm_id}", response_model=FarmResponse)
def delete_farm(
    farm_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    """Soft delete.  Rows under the farm become unreachable (403)."""
    farm = authorize(db, claims, FARM, farm_id)
    farms.soft_delete(db, farm)
    return FarmResponse(message="Farm deleted successfully")
