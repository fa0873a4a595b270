"""Main CLI entry point for the confluence-session command.

This module provides the Typer application for inspecting a Confluence
server and publishing files as page attachments. Credentials come from the
environment (see src.confluence_session.auth); optional settings come from
.confluence-session/config.yaml.
"""

import logging
import mimetypes
import sys
from pathlib import Path
from typing import List, Optional

import typer

from src.cli.config import ConfigLoader
from src.cli.models import ExitCode, SessionConfig
from src.cli.output import OutputHandler
from src.confluence_session.auth import Authenticator
from src.confluence_session.errors import (
    APIUnreachableError,
    InvalidCredentialsError,
    SessionError,
)
from src.confluence_session.service import XmlRpcService
from src.confluence_session.session import ConfluenceSession, open_session

app = typer.Typer(
    name="confluence-session",
    help="""Inspect a Confluence server and publish files as page attachments.

EXAMPLES:
  confluence-session info
  confluence-session attachments TEAM "Build Results"
  confluence-session attach TEAM "Build Results" report.html coverage.xml

Credentials are read from CONFLUENCE_URL, CONFLUENCE_USER and
CONFLUENCE_API_TOKEN (a .env file is loaded if present).""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def _configure_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)8s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.handlers.clear()
    app_logger.addHandler(console_handler)


def _exit_code_for(error: Exception) -> ExitCode:
    if isinstance(error, InvalidCredentialsError):
        return ExitCode.AUTH_ERROR
    if isinstance(error, APIUnreachableError):
        return ExitCode.NETWORK_ERROR
    return ExitCode.GENERAL_ERROR


def _connect(config: SessionConfig) -> ConfluenceSession:
    """Log in with credentials from the environment."""
    creds = Authenticator().get_credentials()
    service = XmlRpcService.from_url(
        creds.url,
        namespace=config.api_namespace,
        timeout=config.timeout,
    )
    return open_session(service, creds.user, creds.api_token)


def _guess_content_type(path: Path, config: SessionConfig) -> str:
    if config.content_type:
        return config.content_type
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or DEFAULT_CONTENT_TYPE


def _fail(output: OutputHandler, error: Exception) -> None:
    """Report an error and exit with the matching code."""
    if isinstance(error, SessionError):
        logger.error(f"Command failed: {error}")
        output.error(str(error))
    else:
        logger.exception("Unexpected error")
        output.error(f"Unexpected error: {error}")
    raise typer.Exit(_exit_code_for(error))


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to YAML config file (default: .confluence-session/config.yaml)",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v info, -vv debug)",
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
) -> None:
    """Confluence session tool."""
    _configure_logging(verbose)
    ctx.obj = {
        "config_path": config or ConfigLoader.default_path(),
        "output": OutputHandler(verbosity=verbose, no_color=no_color),
    }


def _logout(session: ConfluenceSession, output: OutputHandler) -> None:
    """Invalidate the session token; a failed logout only warns."""
    try:
        session.logout()
    except SessionError as e:
        logger.warning(f"Logout failed: {e}")
        output.warning(f"Logout failed: {e}")


@app.command()
def info(ctx: typer.Context) -> None:
    """Show the server version and which remote API rules apply."""
    output: OutputHandler = ctx.obj["output"]
    try:
        config = ConfigLoader.load(ctx.obj["config_path"])
        with output.spinner("Connecting to Confluence..."):
            session = _connect(config)
        try:
            output.print_server_info(session.get_server_info(), session.is_version4())
        finally:
            _logout(session, output)
    except (SessionError, OSError) as e:
        _fail(output, e)


@app.command()
def attachments(
    ctx: typer.Context,
    space: str = typer.Argument(..., help="Space key"),
    page: str = typer.Argument(..., help="Page title"),
) -> None:
    """List the attachments of a page."""
    output: OutputHandler = ctx.obj["output"]
    try:
        config = ConfigLoader.load(ctx.obj["config_path"])
        with output.spinner("Connecting to Confluence..."):
            session = _connect(config)
        try:
            with output.spinner("Fetching attachments..."):
                summary = session.get_page_summary(space, page)
                found = session.get_attachments(summary.id)
            output.print_attachments(summary.title or page, found)
        finally:
            _logout(session, output)
    except (SessionError, OSError) as e:
        _fail(output, e)


@app.command()
def attach(
    ctx: typer.Context,
    space: str = typer.Argument(..., help="Space key"),
    page: str = typer.Argument(..., help="Page title"),
    files: List[Path] = typer.Argument(..., help="Files to attach"),
    comment: Optional[str] = typer.Option(None, "--comment", "-m", help="Attachment comment"),
    content_type: Optional[str] = typer.Option(
        None,
        "--content-type",
        help="Content type for all files (default: guessed from extension)",
    ),
) -> None:
    """Upload files as attachments to a page."""
    output: OutputHandler = ctx.obj["output"]
    uploaded = 0
    failed = 0
    try:
        config = ConfigLoader.load(ctx.obj["config_path"])
        if content_type:
            config.content_type = content_type
        upload_comment = comment if comment is not None else config.comment

        with output.spinner("Connecting to Confluence..."):
            session = _connect(config)
        try:
            with output.spinner("Resolving page..."):
                summary = session.get_page_summary(space, page)
            output.info(f"Attaching to '{summary.title or page}' (page {summary.id})")

            for path in files:
                file_type = _guess_content_type(path, config)
                output.debug(f"{path.name}: content type {file_type}")
                try:
                    with output.spinner(f"Uploading {path.name}..."):
                        result = session.add_attachment_from_path(
                            summary.id,
                            path,
                            file_type,
                            upload_comment,
                        )
                except OSError as e:
                    logger.error(f"Cannot read {path}: {e}")
                    output.error(f"Cannot read {path}: {e}")
                    failed += 1
                    continue
                output.success(f"Uploaded {result.file_name} ({result.file_size} bytes)")
                uploaded += 1
        finally:
            _logout(session, output)
    except (SessionError, OSError) as e:
        _fail(output, e)

    output.print_upload_summary(uploaded, failed)
    if failed:
        raise typer.Exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    app()
