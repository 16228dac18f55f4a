from config import settings
from services.notification.notifier import EmailNotifier, Notifier


def get_notifier() -> Notifier:
    return EmailNotifier(settings)
