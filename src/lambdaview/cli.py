"""CLI entry point for lambdaview."""

from __future__ import annotations

import logging
import os
from typing import Annotated

import typer

from lambdaview.aws import CloudWatchLogSource, LambdaDirectory, create_clients
from lambdaview.config import get_log_file, load_config
from lambdaview.filters import filter_entities
from lambdaview.merger import LogMerger
from lambdaview.selection import SelectionController
from lambdaview.sources import SourceUnavailable
from lambdaview.viewport import ViewportController

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


def _configure_logging(default_level: str) -> None:
    """Log to a file so the terminal UI is left alone.

    LAMBDAVIEW_LOG_LEVEL overrides the configured level.
    """
    level_name = os.getenv("LAMBDAVIEW_LOG_LEVEL", default_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        filename=get_log_file(),
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def run(
    name_filter: Annotated[
        str | None, typer.Argument(metavar="FILTER", help="Only show functions whose name contains this text")
    ] = None,
) -> None:
    """Browse Lambda functions, their configuration and recent logs."""
    config = load_config()
    _configure_logging(config.log_level)

    try:
        lambda_client, logs_client = create_clients(config)
        directory = LambdaDirectory(lambda_client)
        functions = filter_entities(directory.list_entities(), name_filter)
    except SourceUnavailable as e:
        logger.error("Startup failed: %s", e)  # noqa: TRY400
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    logger.info("Loaded %d functions (filter: %r)", len(functions), name_filter)

    log_viewport = ViewportController()
    selection = SelectionController(directory, LogMerger(CloudWatchLogSource(logs_client)), log_viewport)

    from lambdaview.app import LambdaViewApp  # noqa: PLC0415

    LambdaViewApp(functions, selection, log_viewport, config=config).run(mouse=False)


def main() -> None:
    """Entry point for the CLI."""
    app()
