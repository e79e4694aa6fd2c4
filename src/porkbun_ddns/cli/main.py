"""Command-line entry point.

`porkbun-ddns CONFIG_FILE` loads the record file, resolves the public IP,
reads the published record and updates it when they differ. One line is
printed on stdout; fatal errors go to stderr with exit code 1.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from porkbun_ddns.adapters.http_client import build_client
from porkbun_ddns.adapters.porkbun import PorkbunClient
from porkbun_ddns.adapters.public_ip import CheckIPResolver
from porkbun_ddns.cli.ui_components import configure_logging, print_fatal, print_result
from porkbun_ddns.core.config import AppSettings, load_config
from porkbun_ddns.core.errors import DDNSError
from porkbun_ddns.core.services.ddns_pipeline import run_pipeline

app = typer.Typer(add_completion=False, help="Keep a Porkbun DNS record pointed at this host's public IP.")

_console = Console()
_err_console = Console(stderr=True)


@app.command()
def update(
    config_file: Path = typer.Argument(..., help="The path to the config file"),
) -> None:
    """Update the first configured record if the public IP changed."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(Text.assemble(("Error", "bold red"), f" [settings]: {exc}"), soft_wrap=True)
        raise typer.Exit(code=1) from exc

    configure_logging(_err_console, settings.log_level)

    try:
        config = load_config(config_file)
        with build_client(settings) as client:
            result = run_pipeline(
                config=config,
                resolver=CheckIPResolver(client, settings),
                provider=PorkbunClient(client, settings),
            )
    except DDNSError as exc:
        print_fatal(_err_console, exc)
        raise typer.Exit(code=1) from exc

    print_result(_console, result)


def run() -> None:
    app()
