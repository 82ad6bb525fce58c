# =============================================================================
# core/config.py  —  Gateway Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the Gong credentials and base URL from the process environment and
#   packs them into one immutable GatewayConfig object.
#
#   main.py calls load_dotenv() first, so values in a local .env file are
#   visible here through os.environ just like real environment variables.
#
# ENVIRONMENT VARIABLES:
#   GONG_ACCESS_KEY         (fallback: ACCESS_KEY)
#   GONG_ACCESS_KEY_SECRET  (fallback: ACCESS_KEY_SECRET)
#   GONG_API_BASE_URL       default https://api.gong.io
#   LOG_LEVEL               default INFO
#
# The config is built once at startup and handed to the HTTP client and the
# MCP server factory explicitly.  Nothing reads os.environ after that.
# =============================================================================

import base64
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.gong.io"


@dataclass(frozen=True)
class GatewayConfig:
    """Static settings for the lifetime of the process."""

    access_key: Optional[str] = None
    access_key_secret: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"

    @property
    def has_credentials(self) -> bool:
        return bool(self.access_key and self.access_key_secret)

    def authorization_header(self) -> Optional[str]:
        """Return the Basic auth value, or None when a secret is missing."""
        if not self.has_credentials:
            return None
        token = f"{self.access_key}:{self.access_key_secret}".encode("utf-8")
        return "Basic " + base64.b64encode(token).decode("ascii")


def _first_set(environ: Mapping[str, str], *names: str) -> Optional[str]:
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


def load_config(environ: Optional[Mapping[str, str]] = None) -> GatewayConfig:
    """Build a GatewayConfig from the environment.

    Missing credentials are not fatal: a warning is logged and requests go out
    without an Authorization header, so Gong answers them with 401.
    """
    env = os.environ if environ is None else environ

    config = GatewayConfig(
        access_key=_first_set(env, "GONG_ACCESS_KEY", "ACCESS_KEY"),
        access_key_secret=_first_set(env, "GONG_ACCESS_KEY_SECRET", "ACCESS_KEY_SECRET"),
        base_url=(env.get("GONG_API_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )

    if not config.has_credentials:
        logger.warning(
            "GONG_ACCESS_KEY and GONG_ACCESS_KEY_SECRET environment variables "
            "are not set. API calls will likely fail."
        )
    return config
