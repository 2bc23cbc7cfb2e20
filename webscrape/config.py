"""Centralised settings for the webscrape client.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

The pipeline functions in :mod:`webscrape.remote` never read these values
themselves; callers (the CLI, tests) pass them in explicitly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import httpx
from dotenv import load_dotenv

from webscrape.remote.models import DepthPolicy

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

DEFAULT_API_URL = "http://localhost:8080"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


def _env_depth_policy(name: str, default: DepthPolicy) -> DepthPolicy:
    raw = (os.environ.get(name) or "").strip().lower()
    if not raw:
        return default
    try:
        return DepthPolicy(raw)
    except ValueError:
        allowed = ", ".join(p.value for p in DepthPolicy)
        logging.warning(
            "Invalid %s: %r (expected one of: %s); using %r",
            name, raw, allowed, default.value,
        )
        return default


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Backend
    # ------------------------------------------------------------------
    api_url: str = field(
        default_factory=lambda: (
            os.environ.get("SCRAPER_API_URL")
            or os.environ.get("VITE_API_URL")
            or DEFAULT_API_URL
        )
    )
    mode: str = field(
        default_factory=lambda: os.environ.get("SCRAPER_MODE", "development")
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Pipeline policy
    # ------------------------------------------------------------------
    probe_liveness: bool = field(
        default_factory=lambda: _env_bool("SCRAPER_PROBE_LIVENESS", True)
    )
    depth_policy: DepthPolicy = field(
        default_factory=lambda: _env_depth_policy(
            "SCRAPER_DEPTH_POLICY", DepthPolicy.STRICT
        )
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "WARNING").upper()
    )

    def http_client(self) -> httpx.Client:
        """Return a new :class:`httpx.Client` using the configured timeout.

        The caller owns the client and should close it (``with`` block).
        """
        return httpx.Client(timeout=self.request_timeout, follow_redirects=True)


# Module-level singleton — import this everywhere:
#   from webscrape.config import settings
settings = Settings()
