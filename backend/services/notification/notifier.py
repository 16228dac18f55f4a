import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from config import Settings, require_setting
from schemas import OrderRecord

from .composer import build_order_email
from .messages import EMAIL_FAILED, EMAIL_SENT
from .transport import send_email

logger = logging.getLogger("crate-orders")


@dataclass(frozen=True)
class NotificationResult:
    success: bool
    message: str


class Notifier(Protocol):
    async def notify(self, order: OrderRecord) -> NotificationResult:
        ...


class EmailNotifier:
    """Sends the order summary to the configured mailbox; never raises."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def notify(self, order: OrderRecord) -> NotificationResult:
        try:
            message = build_order_email(
                order,
                sender=require_setting(self._settings.smtp_from, "SMTP_FROM"),
                recipient=require_setting(self._settings.smtp_to, "SMTP_TO"),
            )
            await asyncio.to_thread(send_email, message, self._settings)
        except Exception as exc:
            logger.exception("Error sending email: %s", exc)
            return NotificationResult(False, EMAIL_FAILED)
        logger.info("Order email sent for %s", order.businessName)
        return NotificationResult(True, EMAIL_SENT)
