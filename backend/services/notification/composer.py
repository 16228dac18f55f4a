import html
from email.message import EmailMessage
from typing import Dict

from schemas import OrderRecord
from services.formatting import format_long_date, format_number, format_weight

from .messages import ORDER_HTML, ORDER_SUBJECT, ORDER_TEXT


def format_dimensions(order: OrderRecord) -> str:
    return " × ".join(
        f"{format_number(value)}mm" for value in (order.width, order.height, order.depth)
    )


def order_fields(order: OrderRecord) -> Dict[str, str]:
    return {
        "name": order.name,
        "business_name": order.businessName,
        "delivery_address": order.deliveryAddress,
        "dimensions": format_dimensions(order),
        "quantity": str(order.quantity),
        "weight": format_number(order.weight),
        "total_weight": format_weight(order.total_weight),
        "date_required": format_long_date(order.dateRequired),
    }


def render_text(order: OrderRecord) -> str:
    return ORDER_TEXT.format(**order_fields(order))


def render_html(order: OrderRecord) -> str:
    escaped = {key: html.escape(value) for key, value in order_fields(order).items()}
    return ORDER_HTML.format(**escaped)


def build_order_email(order: OrderRecord, sender: str, recipient: str) -> EmailMessage:
    message = EmailMessage()
    message["Subject"] = ORDER_SUBJECT.format(business_name=order.businessName)
    message["From"] = sender
    message["To"] = recipient
    message.set_content(render_text(order))
    message.add_alternative(render_html(order), subtype="html")
    return message
