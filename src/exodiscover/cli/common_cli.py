"""Shared helpers for click-based `exodiscover` commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click

from exodiscover.errors import InvalidParameterError

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_RUNTIME_ERROR = 2
EXIT_MISSING_DEPENDENCY = 3


class ExoCliError(click.ClickException):
    """Click exception with explicit exit-code control."""

    def __init__(self, message: str, *, exit_code: int = EXIT_INPUT_ERROR) -> None:
        super().__init__(message)
        self.exit_code = int(exit_code)


def invalid_parameter(exc: InvalidParameterError) -> ExoCliError:
    """Translate a domain validation error into a CLI error."""
    return ExoCliError(str(exc), exit_code=EXIT_INPUT_ERROR)


def dump_json_output(payload: dict[str, Any] | list[Any], out_path: Path | None) -> None:
    """Write JSON payload to file or stdout."""
    text = json.dumps(payload, sort_keys=True, indent=2)
    if out_path is None:
        click.echo(text)
        return
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text + "\n", encoding="utf-8")


def configure_logging(level: str) -> None:
    """Route library logs to stderr at ``level`` (e.g. "INFO")."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ExoCliError(f"Unknown log level {level!r}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
