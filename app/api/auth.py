import hmac
import logging
from typing import Optional
from fastapi import Depends, Header

from app.config import Settings, settings
from app.domain.errors import AuthorizationError

logger = logging.getLogger("api.auth")

SECRET_HEADER = "x-vapi-secret"

def get_settings() -> Settings:
    """Settings dependency (overridden in tests)."""
    return settings

def authenticate(got: Optional[str], s: Settings) -> None:
    """
    Compare the x-vapi-secret header against the configured shared secret.
    No secret configured -> everything is accepted.
    """
    expected = s.shared_secret
    if not expected:
        return
    if got is None or not hmac.compare_digest(got.encode("utf-8"), expected.encode("utf-8")):
        logger.warning(f"[Auth] rejected request: bad or missing {SECRET_HEADER} header")
        raise AuthorizationError()

def require_shared_secret(
    x_vapi_secret: Optional[str] = Header(None, alias=SECRET_HEADER),
    s: Settings = Depends(get_settings),
) -> None:
    """FastAPI dependency wrapper around authenticate()."""
    authenticate(x_vapi_secret, s)
