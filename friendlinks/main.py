"""Command line entry points: check the friends list, build and deploy the page."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import NoReturn

import typer

from friendlinks.checks.http_check import run_http
from friendlinks.config import settings
from friendlinks.deploy import DeployConfig, DeployError, Deployer
from friendlinks.render import render_html, write_html
from friendlinks.reporting import report
from friendlinks.runner import iter_results
from friendlinks.sources import FriendsFileError, load_friends, visible

logger = logging.getLogger(__name__)

app = typer.Typer(name="friendlinks", help="Health-check, render and deploy a friends link list")


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


@app.command()
def check(
    file: Path = typer.Option(Path(settings.FRIENDS_FILE), "--file", "-f", help="Friends file"),
    batch_size: int = typer.Option(
        settings.CHECK_BATCH_SIZE, "--batch-size", min=1, help="Sites checked concurrently"
    ),
    timeout_ms: int = typer.Option(
        settings.CHECK_TIMEOUT_MS, "--timeout-ms", min=1, help="Per-request timeout"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Check every visible site once; exit 1 on any error or timeout."""
    _configure_logging(verbose)

    try:
        friends = load_friends(file)
    except FriendsFileError as exc:
        _fail(str(exc))

    endpoints = visible(friends.endpoints())
    typer.echo(f"Checking {len(endpoints)} sites...\n")

    probe = partial(run_http, timeout_ms=timeout_ms, user_agent=settings.CHECK_USER_AGENT)
    healthy = report(iter_results(endpoints, batch_size=batch_size, probe=probe), echo=typer.echo)
    if not healthy:
        raise typer.Exit(code=1)


@app.command()
def build(
    file: Path = typer.Option(Path(settings.FRIENDS_FILE), "--file", "-f", help="Friends file"),
    footer: Path = typer.Option(Path(settings.FRIENDS_FOOTER_FILE), "--footer", help="Footer HTML"),
    output: Path = typer.Option(Path(settings.FRIENDS_OUTPUT_FILE), "--output", "-o"),
    deploy: bool = typer.Option(False, "--deploy", help="Upload and clear the site cache"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render the friends page and optionally deploy it."""
    _configure_logging(verbose)

    try:
        friends = load_friends(file)
    except FriendsFileError as exc:
        _fail(str(exc))

    footer_html = footer.read_text(encoding="utf-8") if footer.exists() else ""
    if not footer.exists():
        logger.warning("Footer %s not found, rendering without it", footer)

    write_html(output, render_html(friends, footer_html))
    typer.echo(f"Written to {output}")

    if not deploy:
        return

    if not settings.DEPLOY_REMOTE_PATH or not settings.DEPLOY_CACHE_URL:
        _fail("DEPLOY_REMOTE_PATH and DEPLOY_CACHE_URL must be set to deploy")

    deployer = Deployer(
        DeployConfig(
            remote_path=settings.DEPLOY_REMOTE_PATH,
            cache_url=settings.DEPLOY_CACHE_URL,
            timeout_s=settings.DEPLOY_TIMEOUT_SECONDS,
        )
    )
    try:
        deployer.deploy(output)
    except DeployError as exc:
        _fail(str(exc))


if __name__ == "__main__":
    app()
