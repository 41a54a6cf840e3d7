# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Livestock endpoints – same ownership rules as crops."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.ownership import LIVESTOCK, authorize, authorize_farm
from core.security import TokenClaims, get_current_claims
from database import get_db
from livestock.schemas import LivestockCreate, LivestockOut, LivestockResponse, LivestockUpdate
from models.livestock import Livestock
from repositories.stores import livestock as herds

router = APIRouter(prefix="/api/livestock", tags=["livestock"])


@router.post("/", response_model=LivestockResponse, status_code=status.HTTP_201_CREATED)
def create_livestock(
    body: LivestockCreate,
    farm_id: str = Query(..., alias="farmId", min_length=1),
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    _, farm = authorize_farm(db, claims, farm_id)
    herd = herds.create(db, Livestock(farm_id=farm.farm_id, **body.model_dump()))
    return LivestockResponse(
        message="Livestock created successfully",
        livestock=LivestockOut.model_validate(herd),
    )


@router.get("/", response_model=LivestockResponse)
def list_livestock(
    farm_id: str = Query(..., alias="farmId", min_length=1),
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    _, farm = authorize_farm(db, claims, farm_id)
    rows = herds.list_by_parent(db, farm.farm_id)
    return LivestockResponse(
        message="Livestock retrieved successfully",
        livestocks=[LivestockOut.model_validate(h) for h in rows],
    )


@router.get("/{livestock_id}", response_model=LivestockResponse)
def get_livestock(
    livestock_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    herd = authorize(db, claims, LIVESTOCK, livestock_id)
    return LivestockResponse(
        message="Livestock retrieved successfully",
        livestock=LivestockOut.model_validate(herd),
    )


@router.put("/{livestock_id}", response_model=LivestockResponse)
def update_livestock(
    livestock_id: str,
    body: LivestockUpdate,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    herd = authorize(db, claims, LIVESTOCK, livestock_id)
    body.apply_to(herd)
    herds.update(db, herd)
    return LivestockResponse(
        message="Livestock updated successfully",
        livestock=LivestockOut.model_validate(herd),
    )


@router.delete("/{livestock_id}", response_model=LivestockResponse)
def delete_livestock(
    livestock_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    herd = authorize(db, claims, LIVESTOCK, livestock_id)
    herds.soft_delete(db, herd)
    return LivestockResponse(message="Livestock deleted successfully")
