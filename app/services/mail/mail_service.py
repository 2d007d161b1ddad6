"""Transactional email through the Mailgun HTTP API."""

from dataclasses import dataclass

import httpx

from app.services.mail.mail_config import mailgun_settings
from app.utils.constants import (
    MAILGUN_API_BASE,
    VERIFICATION_EMAIL_SUBJECT,
    VERIFICATION_EMAIL_TEMPLATE,
)
from app.utils.logger import logger


@dataclass
class EmailVar:
    """Template substitution sent as a ``v:<key>`` form field."""

    key: str
    value: str


class MailService:
    """Sends template emails; every failure is reported as ``False``."""

    def __init__(
        self,
        api_key: str,
        domain: str,
        from_email: str,
        from_name: str = "Nuber Eats",
        client: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.domain = domain
        self.from_email = from_email
        self.from_name = from_name
        self._client = client

    @property
    def messages_url(self) -> str:
        return f"{MAILGUN_API_BASE}/{self.domain}/messages"

    def _build_form(
        self,
        subject: str,
        template: str,
        email_vars: list[EmailVar],
        to: str,
    ) -> list[tuple[str, tuple[None, str]]]:
        # (None, value) tuples make httpx send plain multipart fields
        fields = [
            ("from", f"{self.from_name} <{self.from_email}>"),
            ("to", to),
            ("subject", subject),
            ("template", template),
        ]
        fields.extend((f"v:{var.key}", var.value) for var in email_vars)
        return [(name, (None, value)) for name, value in fields]

    async def send_email(
        self,
        subject: str,
        template: str,
        email_vars: list[EmailVar],
        to: str,
    ) -> bool:
        """POST one message to Mailgun. No retry."""
        try:
            form = self._build_form(subject, template, email_vars, to)
            auth = ("api", self.api_key)
            if self._client is not None:
                response = await self._client.post(self.messages_url, files=form, auth=auth)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(self.messages_url, files=form, auth=auth)
            response.raise_for_status()

            logger.info(f"Mailgun email '{template}' sent to {to}")
            return True

        except httpx.HTTPStatusError as e:
            logger.error(
                f"Mailgun rejected email to {to}: {e.response.status_code} {e.response.text}"
            )
            return False
        except Exception as e:
            logger.error(f"Error sending email to {to}: {str(e)}")
            return False

    async def send_verification_email(self, email: str, code: str) -> bool:
        return await self.send_email(
            VERIFICATION_EMAIL_SUBJECT,
            VERIFICATION_EMAIL_TEMPLATE,
            [EmailVar("code", code), EmailVar("username", email)],
            to=email,
        )


_mail_service: MailService | None = None


def get_mail_service() -> MailService:
    """Get or create the process-wide MailService built from settings."""
    global _mail_service
    if _mail_service is None:
        _mail_service = MailService(
            api_key=mailgun_settings.API_KEY,
            domain=mailgun_settings.DOMAIN_NAME,
            from_email=mailgun_settings.FROM_EMAIL,
            from_name=mailgun_settings.SEND_FROM_NAME,
        )
    return _mail_service
