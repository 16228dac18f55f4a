import logging

from schemas import OrderRecord, SubmissionResult
from services.notification.notifier import Notifier

logger = logging.getLogger("crate-orders")

SUBMITTED_TITLE = "Order Submitted"
SUBMITTED_MESSAGE = "Check your inbox for order details"
FAILED_TITLE = "Error"
FAILED_MESSAGE = "Failed to submit order. Please try again."


def _failure() -> SubmissionResult:
    return SubmissionResult(success=False, title=FAILED_TITLE, message=FAILED_MESSAGE)


async def submit_order(order: OrderRecord, notifier: Notifier) -> SubmissionResult:
    """Hand the order to the notifier once and fold its outcome into a toast result."""
    try:
        result = await notifier.notify(order)
    except Exception as exc:
        logger.exception("Order notification failed for %s: %s", order.businessName, exc)
        return _failure()
    if not result.success:
        logger.warning(
            "Order notification rejected for %s: %s", order.businessName, result.message
        )
        return _failure()
    logger.info(
        "Order submitted for %s: %s crate(s) %sx%sx%s mm",
        order.businessName,
        order.quantity,
        order.width,
        order.height,
        order.depth,
    )
    return SubmissionResult(success=True, title=SUBMITTED_TITLE, message=SUBMITTED_MESSAGE)
