"""Remote scrape pipeline — validation, orchestration and health checks."""

from webscrape.remote.health import check_health, wake_instructions
from webscrape.remote.models import (
    DepthPolicy,
    ErrorKind,
    HealthReport,
    InputError,
    Link,
    ScrapeFailure,
    ScrapeOutcome,
    ScrapeRequest,
    ScrapeResult,
    ScrapeSuccess,
)
from webscrape.remote.orchestrator import extract_error_message, run, submit
from webscrape.remote.validator import validate

__all__ = [
    "validate",
    "run",
    "submit",
    "extract_error_message",
    "check_health",
    "wake_instructions",
    "DepthPolicy",
    "ErrorKind",
    "HealthReport",
    "InputError",
    "Link",
    "ScrapeFailure",
    "ScrapeOutcome",
    "ScrapeRequest",
    "ScrapeResult",
    "ScrapeSuccess",
]
