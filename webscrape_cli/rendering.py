"""Utilities for rendering scrape outcomes and health reports in the CLI."""

from __future__ import annotations

import json
from typing import List

from webscrape.remote.models import HealthReport, ScrapeFailure, ScrapeOutcome, ScrapeSuccess


def render_outcome(outcome: ScrapeOutcome, as_json: bool = False) -> str:
    """Render a scrape outcome as human-readable text, or as JSON.

    The JSON form of a success is the backend payload itself; a failure is
    rendered as ``{"url", "depth", "errorKind", "message"}``.
    """
    if isinstance(outcome, ScrapeFailure):
        if as_json:
            return json.dumps(
                {
                    "url": outcome.url,
                    "depth": outcome.depth,
                    "errorKind": outcome.error_kind.value,
                    "message": outcome.message,
                },
                indent=2,
            )
        return f"❌ {outcome.error_kind.value}: {outcome.message}"

    if as_json:
        return json.dumps(outcome.result.to_payload(), indent=2)
    return _render_success(outcome)


def _render_success(outcome: ScrapeSuccess) -> str:
    result = outcome.result
    lines: List[str] = [
        f"[scrape] URL     : {outcome.url}  (depth={outcome.depth})",
        f"[scrape] Title   : {result.title or '(none)'}",
        f"[scrape] Fetched : {result.fetched_at}",
        f"[scrape] Links   : {len(result.links)}",
    ]
    for warning in result.warnings or []:
        lines.append(f"⚠️  {warning}")
    lines.append("")
    lines.append(result.markdown)
    return "\n".join(lines)


def render_health(report: HealthReport) -> str:
    """Render a health report; instructions are only shown when unhealthy."""
    lines: List[str] = []
    if report.ok:
        lines.append(f"✅ Backend healthy ({report.duration_ms} ms, env={report.env})")
        lines.append(json.dumps(report.health, indent=2))
    else:
        lines.append(f"❌ {report.error} ({report.duration_ms} ms, env={report.env})")
        lines.append(report.wake_instructions)
    return "\n".join(lines)
