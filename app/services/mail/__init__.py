"""Mail service package."""

from app.services.mail.mail_service import EmailVar, MailService, get_mail_service

__all__ = [
    "EmailVar",
    "MailService",
    "get_mail_service",
]
