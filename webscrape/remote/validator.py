"""Input validation: turns raw form values into a :class:`ScrapeRequest`."""

from __future__ import annotations

from typing import Optional, Union
from urllib.parse import urlsplit

from webscrape.remote.models import DepthPolicy, InputError, ScrapeRequest

MIN_DEPTH = 1
MAX_DEPTH = 3
DEFAULT_DEPTH = 1

RawDepth = Union[str, int, float, None]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _is_absolute_url(url: str) -> bool:
    """Return ``True`` if *url* has both a scheme and a network location."""
    if any(ch.isspace() for ch in url):
        return False
    try:
        parts = urlsplit(url)
        # Accessing .port raises for malformed ports such as ``:abc``.
        parts.port
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.hostname)


def _parse_depth(raw: RawDepth) -> Optional[int]:
    """Return *raw* as an integer, ``DEFAULT_DEPTH`` when blank, or ``None``
    when it is not an integral number."""
    if raw is None:
        return DEFAULT_DEPTH
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return DEFAULT_DEPTH
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            return None
        return int(value) if value.is_integer() else None
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate(
    raw_url: str,
    raw_depth: RawDepth = None,
    policy: DepthPolicy = DepthPolicy.STRICT,
) -> Union[ScrapeRequest, InputError]:
    """Validate a raw ``(url, depth)`` submission.

    Blank or missing depth resolves to ``1``.  A depth that is not a number
    is rejected under :attr:`DepthPolicy.STRICT` and replaced by ``1`` under
    :attr:`DepthPolicy.FALLBACK`.  A numeric depth outside ``[1, 3]`` is
    rejected under either policy.

    Returns:
        A :class:`ScrapeRequest` on success, otherwise an :class:`InputError`
        naming the offending field.
    """
    url = (raw_url or "").strip()
    if not url:
        return InputError(field="url", reason="required", message="URL is required")
    if not _is_absolute_url(url):
        return InputError(field="url", reason="invalid", message="Please enter a valid URL")

    depth = _parse_depth(raw_depth)
    if depth is None:
        if policy is DepthPolicy.STRICT:
            return InputError(
                field="depth",
                reason="not a number",
                message="Depth must be a number",
            )
        depth = DEFAULT_DEPTH

    if not MIN_DEPTH <= depth <= MAX_DEPTH:
        return InputError(
            field="depth",
            reason="out of range",
            message=f"Depth must be between {MIN_DEPTH} and {MAX_DEPTH}",
        )

    return ScrapeRequest(url=url, depth=depth)
