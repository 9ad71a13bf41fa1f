"""Comandos de la CLI `elastic-email`."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import List, Optional, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from elastic_email.cli import doctor
from elastic_email.cli.ui_components import (
    build_lists_table,
    build_overview_table,
    build_send_panel,
    describe_file,
)
from elastic_email.client import ElasticEmailClient
from elastic_email.core.domain.models import FilePayload
from elastic_email.core.errors import ElasticEmailError

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Elastic Email API client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpx loguea cada request en INFO; solo interesa con --verbose.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_client() -> ElasticEmailClient:
    return ElasticEmailClient()


def _call(operation: Callable[[ElasticEmailClient], Awaitable[T]]) -> T:
    """Ejecuta una operación con un cliente efímero y traduce errores a exit 1."""

    async def _runner() -> T:
        async with build_client() as client:
            return await operation(client)

    try:
        return asyncio.run(_runner())
    except ElasticEmailError as exc:
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests (parameter names only)."),
) -> None:
    configure_logging(verbose)


@app.command()
def account() -> None:
    """Show the account overview."""

    overview = _call(lambda client: client.account.overview())
    _console.print(build_overview_table(overview))


@app.command()
def lists() -> None:
    """Show contact lists."""

    items = _call(lambda client: client.list.list())
    _console.print(build_lists_table(items))


@app.command()
def send(
    to: List[str] = typer.Option(..., "--to", help="Recipient (repeatable)."),
    subject: str = typer.Option(..., "--subject"),
    from_email: str = typer.Option(..., "--from"),
    body_text: Optional[str] = typer.Option(None, "--text"),
    body_html: Optional[str] = typer.Option(None, "--html"),
    attach: Optional[List[Path]] = typer.Option(None, "--attach", exists=True, dir_okay=False),
) -> None:
    """Send a simple email."""

    files = [FilePayload.from_path(p) for p in attach] if attach else None
    result = _call(
        lambda client: client.email.send(
            to=to,
            subject=subject,
            from_email=from_email,
            body_text=body_text,
            body_html=body_html,
            attachment_files=files,
        )
    )
    _console.print(build_send_panel(result))


@app.command()
def download(
    filename: str = typer.Argument(..., help="Stored file name."),
    output_dir: Path = typer.Option(Path("."), "--output-dir", "-o", file_okay=False),
) -> None:
    """Download a stored file."""

    payload = _call(lambda client: client.file.download(filename=filename))
    if payload is None:
        _console.print("[yellow]No file returned.[/yellow]")
        raise typer.Exit(code=1)
    try:
        target = payload.save(output_dir)
    except ValueError as exc:
        _console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    _console.print(f"[green]Saved[/green] {describe_file(payload)} -> {target}")


def run() -> None:
    app()
