import os
import logging
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, field_validator


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def _timeout_from(raw: Optional[str]) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0.0
    if not timeout > 0:
        logger.warning("supabase-proxy: invalid SUPABASE_TIMEOUT %r, using %s seconds.", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout


class ProxyConfig(BaseModel):
    """Settings for the Supabase proxy, built once at startup."""

    supabase_url: Optional[str] = None
    supabase_key: Optional[SecretStr] = None
    allowed_origin: str = "*"
    request_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @field_validator("supabase_url")
    @classmethod
    def _strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        if value:
            return value.rstrip("/")
        return value or None

    @property
    def is_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key and self.supabase_key.get_secret_value())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ProxyConfig":
        if environ is None:
            # Load environment variables from .env file
            load_dotenv()
            environ = os.environ

        config = cls(
            supabase_url=environ.get("SUPABASE_URL") or None,
            supabase_key=environ.get("SUPABASE_SERVICE_ROLE_KEY") or None,
            allowed_origin=environ.get("ALLOWED_ORIGIN") or "*",
            request_timeout=_timeout_from(environ.get("SUPABASE_TIMEOUT")),
        )
        if not config.is_configured:
            logger.warning(
                "supabase-proxy: SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is missing in environment variables."
            )
        return config
