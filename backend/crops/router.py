# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Crop endpoints.  Create and list are scoped by the ``farmId`` query
parameter and checked with ``authorize_farm``; single-crop operations walk
crop → farm → account through ``authorize(…, CROP, …)``.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.ownership import CROP, authorize, authorize_farm
from core.security import TokenClaims, get_current_claims
from crops.schemas import CropCreate, CropOut, CropResponse, CropUpdate
from database import get_db
from models.crop import Crop
from repositories.stores import crops

router = APIRouter(prefix="/api/crops", tags=["crops"])


@router.post("/", response_model=CropResponse, status_code=status.HTTP_201_CREATED)
def create_crop(
    body: CropCreate,
    farm_id: str = Query(..., alias="farmId", min_length=1),
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    _, farm = authorize_farm(db, claims, farm_id)
    crop = crops.create(db, Crop(farm_id=farm.farm_id, **body.model_dump()))
    return CropResponse(message="Crop created successfully", crop=CropOut.model_validate(crop))


@router.get("/", response_model=CropResponse)
def list_crops(
    farm_id: str = Query(..., alias="farmId", min_length=1),
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    _, farm = authorize_farm(db, claims, farm_id)
    rows = crops.list_by_parent(db, farm.farm_id)
    return CropResponse(
        message="Crops retrieved successfully",
        crops=[CropOut.model_validate(c) for c in rows],
    )


@router.get("/{crop_id}", response_model=CropResponse)
def get_crop(
    crop_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    crop = authorize(db, claims, CROP, crop_id)
    return CropResponse(message="Crop retrieved successfully", crop=CropOut.model_validate(crop))


@router.put("/{crop_id}", response_model=CropResponse)
def update_crop(
    crop_id: str,
    body: CropUpdate,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    crop = authorize(db, claims, CROP, crop_id)
    body.apply_to(crop)
    crops.update(db, crop)
    return CropResponse(message="Crop updated successfully", crop=CropOut.model_validate(crop))


@router.delete("/{crop_id}", response_model=CropResponse)
def delete_crop(
    crop_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db),
):
    crop = authorize(db, claims, CROP, crop_id)
    crops.soft_delete(db, crop)
    return CropResponse(message="Crop deleted successfully")
