from fastapi import APIRouter

from schemas import DimensionEditRequest, DimensionEditResult, DimensionLimits, DimensionLimitsRequest
from services.dimension_service import apply_edit, compute_limits

router = APIRouter(prefix="/api/dimensions", tags=["dimensions"])


@router.post("/limits", response_model=DimensionLimits)
async def read_limits(payload: DimensionLimitsRequest) -> DimensionLimits:
    return compute_limits(payload.dimensions, payload.changing)


@router.post("/validate", response_model=DimensionEditResult)
async def validate_edit(payload: DimensionEditRequest) -> DimensionEditResult:
    return apply_edit(payload.dimensions, payload.errors, payload.dimension, payload.value)
