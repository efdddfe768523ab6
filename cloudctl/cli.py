"""Command line interface for cloudctl."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from pydantic import ValidationError

from cloudctl import __version__
from cloudctl.api import CloudClient
from cloudctl.constants.defaults import REFRESH_INTERVAL_DEFAULT, THEME_DEFAULT
from cloudctl.constants.values import CLI_NAME, ENV_API_TOKEN, ENV_API_URL
from cloudctl.models.config import ConfigError, DashboardConfig, FilterContext
from cloudctl.models.contexts import Context, Contexts
from cloudctl.themes import theme_names
from cloudctl.utils.duration import parse_duration

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

app = typer.Typer(no_args_is_help=True, add_completion=False, help="cloud API command line client")


class TerminalInitError(Exception):
    """Raised when no interactive terminal is available for the dashboard."""


def _configure_logging(log_file: Path | None, debug: bool) -> None:
    # stdout belongs to the dashboard, so logs only ever go to a file
    if log_file is None:
        return
    logging.basicConfig(
        filename=str(log_file),
        level=logging.DEBUG if debug else logging.INFO,
        format=_LOG_FORMAT,
    )


def _load_context(config_file: Path | None) -> Context:
    path = config_file or Contexts.find_config_file()
    if path is None:
        logger.debug("No contexts file found, using default context")
        return Context()
    logger.debug("Loading contexts from %s", path)
    return Contexts.load(path).current()


def _refresh_interval(value: str) -> float:
    try:
        return parse_duration(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _ensure_terminal() -> None:
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise TerminalInitError("dashboard requires an interactive terminal")


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


@app.command()
def dashboard(
    partition: Annotated[
        str, typer.Option(help="show resources in partition [optional]")
    ] = "",
    tenant: Annotated[str, typer.Option(help="show resources of given tenant [optional]")] = "",
    purpose: Annotated[
        str, typer.Option(help="show resources of given purpose [optional]")
    ] = "",
    color_theme: Annotated[
        str,
        typer.Option(help=f"the dashboard's color theme [{'|'.join(theme_names())}]"),
    ] = THEME_DEFAULT,
    initial_tab: Annotated[
        str | None,
        typer.Option(help="the tab to show when starting the dashboard [optional]"),
    ] = None,
    refresh_interval: Annotated[
        str,
        typer.Option(help="refresh interval, e.g. 500ms, 3s, 1m30s"),
    ] = f"{REFRESH_INTERVAL_DEFAULT:g}s",
    api_url: Annotated[
        str | None, typer.Option(envvar=ENV_API_URL, help="cloud API url")
    ] = None,
    api_token: Annotated[
        str | None, typer.Option(envvar=ENV_API_TOKEN, help="cloud API token")
    ] = None,
    config: Annotated[
        Path | None, typer.Option(help="contexts file, searched in ./, ~/.cloudctl, /etc/cloudctl")
    ] = None,
    log_file: Annotated[Path | None, typer.Option(help="write logs to this file")] = None,
    debug: Annotated[bool, typer.Option(help="debug logging, needs --log-file")] = False,
) -> None:
    """Shows a live dashboard with the most important cloud information."""
    from cloudctl.app import CloudDashboardApp

    _configure_logging(log_file, debug)
    try:
        context = _load_context(config)
        dashboard_config = DashboardConfig(
            filters=FilterContext(tenant=tenant, partition=partition, purpose=purpose),
            color_theme=color_theme,
            initial_tab=initial_tab,
            refresh_interval=_refresh_interval(refresh_interval),
        )
        client = CloudClient(api_url or context.api_url, token=api_token)
        try:
            dashboard_app = CloudDashboardApp(client, dashboard_config)
            _ensure_terminal()
        except Exception:
            asyncio.run(client.aclose())
            raise
    except (ConfigError, TerminalInitError) as exc:
        _fail(str(exc))
    except ValidationError as exc:
        _fail("; ".join(error["msg"] for error in exc.errors()))

    logger.info("Starting dashboard against %s", api_url or context.api_url)
    dashboard_app.run()


@app.command()
def version() -> None:
    """Print the client version."""
    typer.echo(f"{CLI_NAME} {__version__}")


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["TerminalInitError", "app", "main"]
