"""site-archiver CLI — archive a website from its sitemap index.

Usage:
    site-archiver run --config config.yaml
    CONFIG_FILE=config.json python -m site_archiver run
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer

from site_archiver.exceptions import ArchiveError
from site_archiver.services.archive_service import run_archive
from site_archiver.services.config_service import config_service
from site_archiver.utils.log_utils import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="site-archiver",
    help="Mirror a website's sitemap into catalogued HTML and PDF files.",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """site-archiver command group."""


@app.command("run")
def run(
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Config file (YAML or JSON). Defaults to $CONFIG_FILE."
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level. Defaults to $LOG_LEVEL or INFO."
    ),
) -> None:
    """Run a full archive pass."""
    setup_logging(log_level or config_service.log_level)

    try:
        archive_config = config_service.load_archive_config(config)
        summary = asyncio.run(run_archive(archive_config))
    except ArchiveError as e:
        typer.echo(f"[run] Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(
        f"[run] Archived {summary.pages_archived}/{summary.urls_found} URLs "
        f"from {summary.leaf_sitemaps} sitemaps into {archive_config.save_dir_root}"
    )


if __name__ == "__main__":
    app()
