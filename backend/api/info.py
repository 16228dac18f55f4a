from fastapi import APIRouter

from schemas import FormInfoResponse
from services.info_service import get_form_info

router = APIRouter(prefix="/api", tags=["info"])


@router.get("/info", response_model=FormInfoResponse)
async def read_info() -> FormInfoResponse:
    return get_form_info()
