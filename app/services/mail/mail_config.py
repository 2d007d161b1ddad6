"""Mail service configuration."""

from pydantic_settings import BaseSettings


class MailgunSettings(BaseSettings):
    """Mailgun HTTP API credentials, read from MAILGUN_* variables."""

    API_KEY: str = ""
    DOMAIN_NAME: str = ""
    FROM_EMAIL: str = ""
    SEND_FROM_NAME: str = "Nuber Eats"

    class Config:
        env_prefix = "MAILGUN_"
        env_file = ".env"
        extra = "ignore"


mailgun_settings = MailgunSettings()
