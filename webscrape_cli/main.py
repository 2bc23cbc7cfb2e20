"""webscrape CLI — submit URLs to the remote scraping service.

Usage:
    python webscrape_cli/main.py --help

Commands:
    scrape    validate a URL/depth, call the backend, print the outcome
    health    time a single backend health check
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from webscrape.xxx import ...`
# works when the CLI is invoked as `python webscrape_cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from webscrape_cli.rendering import render_health, render_outcome
from webscrape.config import settings
from webscrape.remote import DepthPolicy, check_health, submit

app = typer.Typer(
    name="webscrape",
    help="Client for the remote web scraping service.",
    no_args_is_help=True,
)

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at INFO level."),
) -> None:
    """Configure logging for every command."""
    level = logging.INFO if verbose else settings.log_level
    logging.basicConfig(level=level, format=_LOG_FORMAT)


# ---------------------------------------------------------------------------
# Scrape
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: str = typer.Argument(..., help="URL to scrape."),
    depth: Optional[str] = typer.Option(None, help="Crawl depth, 1 to 3 (default 1)."),
    probe: Optional[bool] = typer.Option(
        None, "--probe/--no-probe", help="Check /health before scraping."
    ),
    policy: Optional[DepthPolicy] = typer.Option(
        None, case_sensitive=False, help="Non-numeric depth handling: strict | fallback."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON."),
    api_url: Optional[str] = typer.Option(None, help="Backend base URL."),
) -> None:
    """Scrape a URL through the backend and print the result."""
    base_url = api_url or settings.api_url
    probe_liveness = settings.probe_liveness if probe is None else probe

    if not as_json:
        typer.echo(f"[scrape] Submitting {url!r} to {base_url} …")
    with settings.http_client() as client:
        outcome = submit(
            url,
            depth,
            client,
            base_url,
            probe_liveness=probe_liveness,
            policy=policy or settings.depth_policy,
        )

    typer.echo(render_outcome(outcome, as_json=as_json))
    if not outcome.success:
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.command("health")
def health(
    api_url: Optional[str] = typer.Option(None, help="Backend base URL."),
    mode: Optional[str] = typer.Option(None, help="Runtime mode: development | production."),
) -> None:
    """Check whether the backend is awake."""
    base_url = api_url or settings.api_url
    with settings.http_client() as client:
        report = check_health(client, base_url, mode=mode or settings.mode)

    typer.echo(render_health(report))
    if not report.ok:
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
