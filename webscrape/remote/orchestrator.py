"""Remote scrape pipeline: liveness probe → scrape call → decode.

Every network, HTTP-status and decode problem is returned as a
:class:`ScrapeFailure`; :func:`run` and :func:`submit` do not raise for them.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError
from pydantic_core import from_json

from webscrape.remote.models import (
    DepthPolicy,
    ErrorKind,
    InputError,
    ScrapeFailure,
    ScrapeOutcome,
    ScrapeRequest,
    ScrapeResult,
    ScrapeSuccess,
)
from webscrape.remote.validator import RawDepth, validate

logger = logging.getLogger(__name__)

BACKEND_UNAVAILABLE_MESSAGE = (
    "Backend is not responding or is sleeping. "
    "Visit the health page to wake it up."
)
INVALID_RESPONSE_MESSAGE = "Could not parse response from server"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _endpoint(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def _backend_is_alive(client: httpx.Client, base_url: str) -> bool:
    """Issue ``GET {base_url}/health``; ``True`` only for a 2xx answer."""
    try:
        response = client.get(_endpoint(base_url, "health"))
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Backend health check failed: %s", exc)
        return False
    if not response.is_success:
        logger.warning(
            "Backend health check returned HTTP %s", response.status_code
        )
        return False
    return True


def extract_error_message(response: httpx.Response) -> str:
    """Best-effort human-readable message from a failed backend response.

    Prefers a non-empty string ``message`` field, then ``error``, from a JSON
    object body.  Anything else (empty body, HTML, malformed or too deeply
    nested JSON) falls back
    to the status line, e.g. ``"HTTP 502: Bad Gateway"``.
    """
    try:
        body = from_json(response.content)
    except ValueError:
        body = None

    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value

    return f"HTTP {response.status_code}: {response.reason_phrase}"


def _decode_result(text: str) -> Optional[ScrapeResult]:
    try:
        return ScrapeResult.model_validate_json(text)
    except ValidationError as exc:
        logger.warning("Failed to parse scrape response: %s", exc)
        return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def run(
    request: ScrapeRequest,
    client: httpx.Client,
    base_url: str,
    probe_liveness: bool = True,
) -> ScrapeOutcome:
    """Scrape ``request.url`` through the backend at *base_url*.

    Steps run strictly in order and the first failure ends the pipeline:

    1. optional ``GET /health`` probe → ``BACKEND_UNAVAILABLE``
    2. ``GET /scrape?url=…&depth=…`` → ``NETWORK_ERROR`` on transport
       failure, ``BACKEND_REQUEST_FAILED`` on a non-2xx status
    3. JSON decode into :class:`ScrapeResult` → ``INVALID_RESPONSE_BODY``

    Args:
        request: A validated request (see :func:`validate`).
        client: The HTTP client to issue requests with; owned by the caller.
        base_url: Backend root, e.g. ``"http://localhost:8080"``.
        probe_liveness: Whether to check ``/health`` before scraping.
    """

    def failure(kind: ErrorKind, message: str) -> ScrapeFailure:
        return ScrapeFailure(
            url=request.url, depth=request.depth, error_kind=kind, message=message
        )

    if probe_liveness and not _backend_is_alive(client, base_url):
        return failure(ErrorKind.BACKEND_UNAVAILABLE, BACKEND_UNAVAILABLE_MESSAGE)

    logger.info("Scraping %s (depth %d) via %s", request.url, request.depth, base_url)
    try:
        response = client.get(
            _endpoint(base_url, "scrape"),
            params={"url": request.url, "depth": request.depth},
        )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Scrape request for %s failed: %s", request.url, exc)
        return failure(ErrorKind.NETWORK_ERROR, f"Network error: {exc}")

    if not response.is_success:
        message = extract_error_message(response)
        logger.warning(
            "Backend request failed with HTTP %s: %s", response.status_code, message
        )
        return failure(ErrorKind.BACKEND_REQUEST_FAILED, message)

    result = _decode_result(response.text)
    if result is None:
        return failure(ErrorKind.INVALID_RESPONSE_BODY, INVALID_RESPONSE_MESSAGE)

    return ScrapeSuccess(url=request.url, depth=request.depth, result=result)


def submit(
    raw_url: str,
    raw_depth: RawDepth,
    client: httpx.Client,
    base_url: str,
    probe_liveness: bool = True,
    policy: DepthPolicy = DepthPolicy.STRICT,
) -> ScrapeOutcome:
    """Validate a raw submission and, if it is valid, :func:`run` it.

    A rejected submission becomes a ``VALIDATION_ERROR`` failure carrying
    the raw values; no request is sent.
    """
    validated = validate(raw_url, raw_depth, policy=policy)
    if isinstance(validated, InputError):
        return ScrapeFailure(
            url=raw_url,
            depth=raw_depth,
            error_kind=ErrorKind.VALIDATION_ERROR,
            message=validated.message,
        )
    return run(validated, client, base_url, probe_liveness=probe_liveness)
