# =============================================================================
# stripe_tax/config.py  —  Process-wide settings, read once at startup
# =============================================================================
#
# ENVIRONMENT VARIABLES (loaded from .env when present):
#   STRIPE_API_KEY   Fallback key used when a tool call carries no apiKey.
#   LOG_LEVEL        Logging level for the server (default: INFO).
#   MCP_SERVER_NAME  Server identity advertised over MCP.
#
# Settings are frozen and injected into the CredentialResolver.  Nothing
# else in the package reads os.environ.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_SERVER_NAME = "Stripe Tax API Manager"


@dataclass(frozen=True)
class Settings:
    """Configuration for one server process."""

    stripe_api_key: Optional[str] = None
    log_level: str = "INFO"
    server_name: str = DEFAULT_SERVER_NAME


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load .env (without overriding real env vars) and build Settings."""
    load_dotenv(env_file)

    return Settings(
        stripe_api_key=os.getenv("STRIPE_API_KEY") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        server_name=os.getenv("MCP_SERVER_NAME", DEFAULT_SERVER_NAME),
    )
