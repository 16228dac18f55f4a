import smtplib
from email.message import EmailMessage

from config import Settings, require_setting

SMTPS_PORT = 465


def _open_connection(settings: Settings) -> smtplib.SMTP:
    host = require_setting(settings.smtp_host, "SMTP_HOST")
    if settings.smtp_port == SMTPS_PORT:
        return smtplib.SMTP_SSL(
            host, settings.smtp_port, timeout=settings.smtp_timeout_seconds
        )
    return smtplib.SMTP(host, settings.smtp_port, timeout=settings.smtp_timeout_seconds)


def send_email(message: EmailMessage, settings: Settings) -> None:
    with _open_connection(settings) as client:
        if settings.smtp_port != SMTPS_PORT:
            client.ehlo()
            if client.has_extn("starttls"):
                client.starttls()
                client.ehlo()
        if settings.smtp_user:
            client.login(settings.smtp_user, settings.smtp_pass or "")
        client.send_message(message)
