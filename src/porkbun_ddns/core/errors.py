"""Error taxonomy.

Every fatal failure of the pipeline is a `DDNSError` carrying the step that
failed, so the CLI can report all of them through one path. A provider
rejecting an update is not an error: it is an `UpdateOutcome.FAILED` value.
"""

from __future__ import annotations

from pathlib import Path

STEP_LOAD_CONFIG = "load-config"
STEP_RESOLVE_IP = "resolve-ip"
STEP_READ_RECORD = "read-record"
STEP_UPDATE_RECORD = "update-record"


class DDNSError(Exception):
    """Base class for fatal pipeline failures."""

    def __init__(self, message: str, *, step: str) -> None:
        super().__init__(message)
        self.step = step


class ConfigReadError(DDNSError):
    """The configuration file could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"could not read config '{path}': {reason}", step=STEP_LOAD_CONFIG)
        self.path = path


class ConfigParseError(DDNSError):
    """The configuration file is not valid JSON or does not match the schema."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"invalid config '{path}': {reason}", step=STEP_LOAD_CONFIG)
        self.path = path


class NetworkError(DDNSError):
    """Transport failure, timeout or unexpected HTTP status."""


class ResponseShapeError(DDNSError):
    """A provider response did not match the expected schema."""
