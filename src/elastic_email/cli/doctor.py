"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from elastic_email.client import ElasticEmailClient
from elastic_email.core.config import ClientSettings, get_user_env_file, write_user_env_vars
from elastic_email.core.errors import ElasticEmailError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: ClientSettings) -> tuple[bool, str]:
    try:
        async with ElasticEmailClient(settings) as client:
            answer = await client.account.get_account_ability_to_send_email()
        return True, answer or "OK"
    except ElasticEmailError as exc:
        return False, str(exc)


def _mask(secret: str) -> str:
    if len(secret) <= 8:
        return "*" * len(secret)
    return f"{secret[:4]}…{secret[-4:]}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = ClientSettings()

    table = Table(title="Elastic Email Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.api_key:
        table.add_row("API key", "OK", _mask(settings.api_key))
    else:
        table.add_row("API key", "FAIL", "Set ELASTIC_EMAIL_API_KEY or run `doctor setup`")
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    # Connectivity
    ok_api = False
    if settings.api_key:
        ok_api, detail_api = asyncio.run(_check_api(settings))
        table.add_row("API access", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive API setup (stores config in the user config .env)."""

    api_key = typer.prompt("API key", hide_input=True, confirmation_prompt=False).strip()
    base_url = typer.prompt("API base URL", default=ClientSettings().base_url, show_default=True).strip()

    if not api_key:
        raise typer.BadParameter("api key is required")

    env_path = write_user_env_vars(
        {
            "ELASTIC_EMAIL_API_KEY": api_key,
            "ELASTIC_EMAIL_BASE_URL": base_url or None,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
