"""Interactive question flow for a new Live App.

Asks, in a fixed order, for the display name, package details and
(optionally) the manifest presentation settings. Prompting is delegated to
``rich.prompt``; numeric questions use the small ``PromptBase`` subclasses
below so invalid answers are re-asked with a consistent message.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Optional, TextIO

from rich.console import Console
from rich.prompt import Confirm, InvalidResponse, Prompt, PromptBase
from rich.text import Text

from ..config import (
    DEFAULT_INITIAL_HEIGHT,
    DEFAULT_VERSION_NAME,
    NO_WIDTH,
    SIZING_MODES,
    SUPPORTED_BUNDLER,
    TOOLBAR_COLORS,
    ManifestOptions,
    PackageOptions,
)
from ..utils import console as default_console

NUMBER_ERROR = "Please enter a number."
NAME_ERROR = "Please enter a name."
WIDTH_NONE = "none"

_MANIFEST_DOCS = "https://corp.quip.com/dev/liveapps/documentation#app-manifest"
_SIZING_DOCS = "https://corp.quip.com/dev/liveapps/recipes#specifying-the-size-of-your-app"


# ---------------------------------------------------------------------------
# Name derivation
# ---------------------------------------------------------------------------


def default_display_name(dirname: str) -> str:
    """Derive a human-readable app name from a directory name.

    Punctuation becomes a space, the first letter of every word is upper-cased
    and surrounding whitespace is dropped.

    Examples::

        default_display_name("my cool app!") -> "My Cool App"
        default_display_name("todo_list-v2") -> "Todo_list V2"
    """
    spaced = re.sub(r"[^\w\s]", " ", dirname, flags=re.ASCII)
    titled = re.sub(r"(^|\s)(\w)", lambda m: m.group(0).upper(), spaced, flags=re.ASCII)
    return titled.strip()


def default_package_name(display_name: str) -> str:
    """Lower-case *display_name* and turn each whitespace run into one hyphen."""
    return re.sub(r"\s+", "-", display_name.lower())


# ---------------------------------------------------------------------------
# Numeric answers
# ---------------------------------------------------------------------------


def parse_number(value: str) -> int:
    """Parse a base-10 integer answer.

    Raises:
        ValueError: If *value* is not an integer.
    """
    text = value.strip()
    if not re.fullmatch(r"-?\d+", text, flags=re.ASCII):
        raise ValueError(f"not a base-10 integer: {value!r}")
    return int(text, 10)


def parse_width(value: str) -> int:
    """Parse an initial-width answer, mapping ``none`` to ``NO_WIDTH``."""
    if value.strip() == WIDTH_NONE:
        return NO_WIDTH
    return parse_number(value)


class NumberPrompt(PromptBase[int]):
    """Prompt that only accepts base-10 integers."""

    response_type = int
    validate_error_message = f"[prompt.invalid]{NUMBER_ERROR}"

    def parse(self, value: str) -> int:
        return parse_number(value)

    def process_response(self, value: str) -> int:
        try:
            return self.parse(value)
        except ValueError:
            raise InvalidResponse(self.validate_error_message)


class RequiredPrompt(PromptBase[str]):
    """Text prompt that re-asks until the answer is not blank."""

    response_type = str
    validate_error_message = f"[prompt.invalid]{NAME_ERROR}"

    def process_response(self, value: str) -> str:
        text = value.strip()
        if not text:
            raise InvalidResponse(self.validate_error_message)
        return text


class WidthPrompt(NumberPrompt):
    """Integer prompt that also accepts ``none`` for an unspecified width."""

    def parse(self, value: str) -> int:
        return parse_width(value)

    def render_default(self, default: Any) -> Text:
        if default == NO_WIDTH:
            return Text(f"({WIDTH_NONE})", "prompt.default")
        return super().render_default(default)


# ---------------------------------------------------------------------------
# Collector
# ---------------------------------------------------------------------------


class PromptCollector:
    """Collects ``PackageOptions`` and ``ManifestOptions`` interactively.

    Args:
        console: Console used for questions and validation messages.
        stream: Optional input stream; defaults to the terminal.
    """

    def __init__(self, console: Optional[Console] = None, stream: Optional[TextIO] = None) -> None:
        self.console = console or default_console
        self.stream = stream

    # -- Public API --------------------------------------------------------

    def collect(self, cwd: Path) -> tuple[PackageOptions, ManifestOptions]:
        """Run the full question flow for a project created under *cwd*."""
        self.console.print("Creating a new Quip Live App")

        manifest_name = self._ask_required(
            "What is the name of this app?\n"
            "(This is what users will see when inserting your app)\n",
            default=default_display_name(Path(cwd).name),
        )

        package_name = self._ask_required(
            "Choose a package name",
            default=default_package_name(manifest_name),
        ).lower()
        description = self._ask_text("What does this app do?\n", default="")
        typescript = self._ask_confirm("Use Typescript?", default=True)

        manifest_fields: dict[str, Any] = {"name": manifest_name}
        customize = self._ask_confirm(
            "Would you like to customize your manifest.json now?\n"
            f"(see: {_MANIFEST_DOCS})\n",
            default=True,
        )
        if customize:
            manifest_fields.update(self._collect_manifest_details())

        package = PackageOptions(
            name=package_name,
            description=description,
            typescript=typescript,
            bundler=SUPPORTED_BUNDLER,
        )
        manifest = ManifestOptions(**manifest_fields, description=package.description)
        return package, manifest

    # -- Manifest sub-flow -------------------------------------------------

    def _collect_manifest_details(self) -> dict[str, Any]:
        return {
            "version_name": self._ask_text(
                "Choose an initial version string", default=DEFAULT_VERSION_NAME
            ),
            "toolbar_color": self._ask_choice("Choose a toolbar color", TOOLBAR_COLORS),
            "disable_app_level_comments": self._ask_confirm(
                "Disable commenting at the app level?", default=False
            ),
            "sizing_mode": self._ask_choice(
                f"Choose a sizing mode\n(see: {_SIZING_DOCS})", SIZING_MODES
            ),
            "initial_height": NumberPrompt.ask(
                "Specify an initial height for your app\n"
                "This will be the height of the app while it is loading.\n",
                console=self.console,
                default=DEFAULT_INITIAL_HEIGHT,
                stream=self.stream,
            ),
            "initial_width": WidthPrompt.ask(
                "Specify an initial width for your app (optional)\n"
                "This will be the width of the app while it is loading.\n",
                console=self.console,
                default=NO_WIDTH,
                stream=self.stream,
            ),
        }

    # -- Prompt wrappers ---------------------------------------------------

    def _ask_text(self, message: str, default: str) -> str:
        return Prompt.ask(
            message,
            console=self.console,
            default=default,
            show_default=bool(default),
            stream=self.stream,
        )

    def _ask_required(self, message: str, default: str) -> str:
        # A blank default would be returned unvalidated, so only offer a real one.
        if not default:
            return RequiredPrompt.ask(message, console=self.console, stream=self.stream)
        return RequiredPrompt.ask(message, console=self.console, default=default, stream=self.stream)

    def _ask_confirm(self, message: str, default: bool) -> bool:
        return Confirm.ask(message, console=self.console, default=default, stream=self.stream)

    def _ask_choice(self, message: str, choices: tuple[str, ...]) -> str:
        return Prompt.ask(
            message,
            console=self.console,
            choices=list(choices),
            default=choices[0],
            stream=self.stream,
        )
