"""Data models for the remote scrape pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class DepthPolicy(str, Enum):
    """How the validator treats a depth value that is not a number."""

    STRICT = "strict"
    FALLBACK = "fallback"


class ErrorKind(str, Enum):
    VALIDATION_ERROR = "ValidationError"
    BACKEND_UNAVAILABLE = "BackendUnavailable"
    NETWORK_ERROR = "NetworkError"
    BACKEND_REQUEST_FAILED = "BackendRequestFailed"
    INVALID_RESPONSE_BODY = "InvalidResponseBody"


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScrapeRequest:
    """A validated submission: an absolute URL and a depth in ``[1, 3]``."""

    url: str
    depth: int


@dataclass(frozen=True)
class InputError:
    """Why a raw submission was rejected by :func:`validate`."""

    field: str
    reason: str
    message: str


# ---------------------------------------------------------------------------
# Backend payload
# ---------------------------------------------------------------------------

class Link(BaseModel):
    model_config = ConfigDict(extra="allow")

    text: str = ""
    href: str


class ScrapeResult(BaseModel):
    """The JSON document returned by ``GET /scrape``.

    Field names follow the wire format through aliases; unknown keys are
    kept so the payload reaches the caller unmodified.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: str
    markdown: str
    links: List[Link]
    raw_html: Optional[str] = Field(default=None, alias="rawHtml")
    warnings: Optional[List[str]] = None
    fetched_at: str = Field(alias="fetchedAt")

    def to_payload(self) -> dict[str, Any]:
        """Return the wire-shaped dict, omitting optional fields the backend left out."""
        return self.model_dump(by_alias=True, exclude_unset=True)


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScrapeSuccess:
    url: str
    depth: int
    result: ScrapeResult

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class ScrapeFailure:
    """A categorised failure.

    ``url`` and ``depth`` echo what was submitted so a caller can re-render
    its form.  After a validation failure ``depth`` is the raw input value.
    """

    url: str
    depth: Any
    error_kind: ErrorKind
    message: str

    @property
    def success(self) -> bool:
        return False


ScrapeOutcome = Union[ScrapeSuccess, ScrapeFailure]


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HealthReport:
    """Result of a single timed ``GET /health`` call."""

    health: Any
    error: Optional[str]
    duration_ms: int
    env: str
    wake_instructions: str

    @property
    def ok(self) -> bool:
        return self.error is None
