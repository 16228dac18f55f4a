from fastapi import APIRouter, Depends

from dependencies import get_notifier
from schemas import OrderRecord, SubmissionResult
from services.notification.notifier import Notifier
from services.orders_service import submit_order

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=SubmissionResult)
async def create_order(
    payload: OrderRecord,
    notifier: Notifier = Depends(get_notifier),
) -> SubmissionResult:
    return await submit_order(payload, notifier)
