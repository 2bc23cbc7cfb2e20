"""Timed backend health check for status pages and the ``health`` command."""

from __future__ import annotations

import logging
import time

import httpx
from pydantic_core import from_json

from webscrape.remote.models import HealthReport

logger = logging.getLogger(__name__)


def wake_instructions(base_url: str, mode: str) -> str:
    """Explain how the user can wake a sleeping backend."""
    if mode == "production":
        return (
            f"Open the backend URL ({base_url}) in a browser and poll the /health "
            "endpoint until it responds. Hosted environments may take several "
            "seconds to wake."
        )
    return (
        f"On your local machine open the backend URL ({base_url}). If you are "
        "developing locally, start the backend: cd backend && go run main.go"
    )


def check_health(
    client: httpx.Client,
    base_url: str,
    mode: str = "development",
) -> HealthReport:
    """Call ``GET {base_url}/health`` once and time it.

    The health payload is passed through unexamined.  Failures are reported
    in :attr:`HealthReport.error`; this function does not raise for them.
    """
    instructions = wake_instructions(base_url, mode)
    started = time.monotonic()

    def report(health, error):
        duration_ms = int((time.monotonic() - started) * 1000)
        return HealthReport(
            health=health,
            error=error,
            duration_ms=duration_ms,
            env=mode,
            wake_instructions=instructions,
        )

    try:
        response = client.get(f"{base_url.rstrip('/')}/health")
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Health check against %s failed: %s", base_url, exc)
        return report(None, f"Backend service is not available, {exc}")

    if not response.is_success:
        logger.warning("Health check returned HTTP %s", response.status_code)
        return report(None, "Backend service is not available")

    try:
        health = from_json(response.content)
    except ValueError as exc:
        logger.warning("Health check returned a non-JSON body: %s", exc)
        return report(None, f"Backend service is not available, {exc}")

    return report(health, None)
