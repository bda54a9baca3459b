"""CLI (Typer).

Solo expone diagnósticos; el uso de la API es responsabilidad de la app que
consume `core`/`adapters`.
"""

from __future__ import annotations

import typer

from cli import doctor
from core.config import AppSettings
from core.logging import configure_logging

app = typer.Typer(no_args_is_help=True, help="TMDb HTTP client toolkit.")
app.add_typer(doctor.app, name="doctor")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging.")) -> None:
    configure_logging("DEBUG" if verbose else AppSettings().log_level)


def run() -> None:
    app()
