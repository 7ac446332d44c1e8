"""Single shared admin password check."""

import hmac
import os

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_ADMIN_PASSWORD = "admin123"


def admin_password() -> str:
    return os.getenv("ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD)


def verify_admin_password(password: str) -> bool:
    ok = hmac.compare_digest(password.encode("utf-8"), admin_password().encode("utf-8"))
    if not ok:
        logger.warning("Rejected admin login attempt")
    return ok
