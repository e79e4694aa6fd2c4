"""CLI output components (Rich).

Why separate:
- Keeps command logic apart from presentation.
- stdout carries exactly one outcome line; everything else (logs,
  diagnostics) goes to the stderr console.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from porkbun_ddns.core.domain.models import UpdateOutcome, UpdateResult
from porkbun_ddns.core.errors import DDNSError

_OUTCOME_STYLES: dict[UpdateOutcome, str] = {
    UpdateOutcome.UNCHANGED: "dim",
    UpdateOutcome.UPDATED: "green",
    UpdateOutcome.FAILED: "yellow",
}


def print_result(console: Console, result: UpdateResult) -> None:
    """Print the single outcome line.

    `Text` instead of a markup string: provider messages may contain brackets.
    """

    console.print(
        Text(result.message, style=_OUTCOME_STYLES[result.outcome]),
        soft_wrap=True,
        highlight=False,
    )


def print_fatal(console: Console, exc: DDNSError) -> None:
    console.print(
        Text.assemble(("Error", "bold red"), f" [{exc.step}]: {exc}"),
        soft_wrap=True,
        highlight=False,
    )


def configure_logging(console: Console, level: str) -> None:
    """Route the package logger through Rich on the given (stderr) console."""

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    pkg_logger = logging.getLogger("porkbun_ddns")
    for existing in list(pkg_logger.handlers):
        pkg_logger.removeHandler(existing)
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False
