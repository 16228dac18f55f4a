from fastapi import APIRouter, Query

from constants import DEFAULT_DIMENSION_MM, MAX_DIMENSION_MM, MIN_DIMENSION_MM
from schemas import DimensionTriple, PreviewResponse
from services.preview_service import build_preview

router = APIRouter(prefix="/api/preview", tags=["preview"])


@router.get("", response_model=PreviewResponse)
async def read_preview(
    width: float = Query(DEFAULT_DIMENSION_MM, ge=MIN_DIMENSION_MM, le=MAX_DIMENSION_MM),
    height: float = Query(DEFAULT_DIMENSION_MM, ge=MIN_DIMENSION_MM, le=MAX_DIMENSION_MM),
    depth: float = Query(DEFAULT_DIMENSION_MM, ge=MIN_DIMENSION_MM, le=MAX_DIMENSION_MM),
) -> PreviewResponse:
    return build_preview(DimensionTriple(width=width, height=height, depth=depth))
