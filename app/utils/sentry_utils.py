"""Sentry error tracking utilities."""

import os

from app.utils.environment import is_debug, get_environment

_sentry_initialized = False


def configure_sentry(dsn_env_var: str = "SENTRY_DSN") -> bool:
    """Initialize Sentry for error tracking.

    Only initializes outside local mode and when the DSN variable is set.

    Returns:
        True if Sentry was initialized, False otherwise
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    if is_debug():
        return False

    dsn = os.getenv(dsn_env_var)
    if not dsn:
        return False

    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

    sentry_sdk.init(
        dsn=dsn,
        environment=get_environment(),
        traces_sample_rate=0.2,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            SqlalchemyIntegration(),
        ],
        send_default_pii=False,
    )

    _sentry_initialized = True
    return True


def capture_exception(exception: Exception) -> None:
    """Send an exception to Sentry when it is initialized."""
    if not _sentry_initialized:
        return

    import sentry_sdk
    sentry_sdk.capture_exception(exception)


def set_user_context(user_id: int | str, email: str | None = None) -> None:
    """Attach the resolved user to Sentry events of the current scope."""
    if not _sentry_initialized:
        return

    import sentry_sdk
    sentry_sdk.set_user({"id": str(user_id), "email": email})
