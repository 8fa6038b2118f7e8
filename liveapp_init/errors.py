"""Exception hierarchy for ``liveapp init``.

Every fatal failure raised by the scaffolder derives from ``InitError`` and
also from the matching built-in exception, so callers can catch either the
project-specific class or the familiar ``OSError``/``ValueError`` family.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class InitError(Exception):
    """Base class for errors that abort an ``init`` run."""


class TemplateNotFoundError(InitError, FileNotFoundError):
    """Raised when the selected template directory does not exist."""

    def __init__(self, template_id: str, path: Path, available: Sequence[str] = ()) -> None:
        self.template_id = template_id
        self.path = path
        self.available = list(available)
        message = f"Template '{template_id}' not found at {path}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class DestinationExistsError(InitError, FileExistsError):
    """Raised when the project directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Destination already exists: {path}")


class ConfigParseError(InitError, ValueError):
    """Raised when ``package.json`` or ``manifest.json`` is not a JSON object."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse {path}: {reason}")
