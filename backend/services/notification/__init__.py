"""
Order notification split by responsibility: message text, composition and SMTP delivery.
External callers should import EmailNotifier and Notifier from services.notification.notifier.
"""
