"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import HTTPXClientAdapter
from core.config import AppSettings, write_user_env_vars
from core.domain.errors import EndpointURLError, error_for_response
from core.endpoints import AuthenticationEndpoint
from core.services.api_client import TMDbAPIClient

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    client = TMDbAPIClient(HTTPXClientAdapter(settings=settings), settings)
    try:
        response = await client.get(AuthenticationEndpoint.validate_key())
    except (httpx.TransportError, httpx.InvalidURL, EndpointURLError) as exc:
        return False, str(exc)

    error = error_for_response(response)
    if error is not None:
        return False, str(error)
    return True, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="tmdb-kit Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base_url", "OK", settings.api_base_url)
    if settings.access_token:
        table.add_row("Credentials", "OK", "Bearer access token")
    elif settings.api_key:
        table.add_row("Credentials", "OK", "v3 api_key query parameter")
    else:
        table.add_row("Credentials", "MISSING", "Run `tmdb-kit doctor setup-token`")

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API authentication", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)


@app.command(name="setup-token")
def setup_token() -> None:
    """Store the TMDb API Read Access Token in the user config .env."""

    token = typer.prompt("TMDb access token", hide_input=True, confirmation_prompt=False).strip()
    if not token:
        raise typer.BadParameter("access token is required")

    env_path = write_user_env_vars({"TMDB_ACCESS_TOKEN": token})
    _console.print(f"[green]Saved TMDb config to:[/green] {env_path}")
