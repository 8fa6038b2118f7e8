"""Live App init configuration.

Typed models for everything the ``init`` command collects or needs to run.
All settings use Pydantic v2 models so answers are validated at construction
time and can be dumped straight into the JSON files of a new project.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SUPPORTED_BUNDLER = "webpack"

TOOLBAR_COLORS: tuple[str, ...] = ("red", "orange", "yellow", "green", "blue", "violet")
SIZING_MODES: tuple[str, ...] = ("fill_container", "fit_content", "scale")

DEFAULT_VERSION_NAME = "1.0.0-alpha.0"
DEFAULT_INITIAL_HEIGHT = 300
NO_WIDTH = -1

ToolbarColor = Literal["red", "orange", "yellow", "green", "blue", "violet"]
SizingMode = Literal["fill_container", "fit_content", "scale"]

_BUNDLED_TEMPLATES_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Collected options
# ---------------------------------------------------------------------------


class PackageOptions(BaseModel):
    """Answers that end up in ``package.json`` and pick the template."""

    name: str = Field(..., min_length=1, description="Package name, also the project directory")
    description: str = Field(default="")
    typescript: bool = Field(default=True)
    bundler: str = Field(default=SUPPORTED_BUNDLER)

    def as_updates(self) -> dict[str, Any]:
        """Return the fields written into ``package.json``."""
        return {"name": self.name, "description": self.description}


class ManifestOptions(BaseModel):
    """Answers that end up in ``manifest.json``.

    Only ``name`` and ``description`` are always present. The presentation
    settings stay ``None`` unless the user chose to customize the manifest,
    in which case the template's own values are left alone.
    """

    name: str = Field(..., min_length=1, description="Display name shown to users")
    description: Optional[str] = None
    version_name: Optional[str] = None
    toolbar_color: Optional[ToolbarColor] = None
    disable_app_level_comments: Optional[bool] = None
    sizing_mode: Optional[SizingMode] = None
    initial_height: Optional[int] = None
    initial_width: Optional[int] = Field(
        default=None, description=f"Loading width, {NO_WIDTH} when unspecified"
    )

    def as_updates(self) -> dict[str, Any]:
        """Return only the fields that were actually collected."""
        return self.model_dump(exclude_none=True)


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------


class InitConfig(BaseModel):
    """Settings for a single ``init`` run.

    Instances are created once by the CLI entry point and passed through the
    prompt, copy and merge steps.
    """

    cwd: Path = Field(default_factory=Path.cwd)
    templates_dir: Path = Field(default=_BUNDLED_TEMPLATES_DIR)
    dry_run: bool = Field(default=False)
    no_create: bool = Field(
        default=False, description="Reserved: there is no remote app registration to skip"
    )

    def template_path(self, template_id: str) -> Path:
        """Directory holding the template called *template_id*."""
        return self.templates_dir / template_id

    def destination_for(self, package_name: str) -> Path:
        """Directory the new project is materialized into."""
        return self.cwd / package_name

    @classmethod
    def from_env(cls, **overrides: Any) -> "InitConfig":
        """Build an ``InitConfig`` from environment variables.

        Recognised variables (all optional):
            LIVEAPP_TEMPLATES_DIR, LIVEAPP_CWD.

        Keyword *overrides* win over the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("LIVEAPP_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["LIVEAPP_TEMPLATES_DIR"])
        if os.environ.get("LIVEAPP_CWD"):
            kwargs["cwd"] = Path(os.environ["LIVEAPP_CWD"])
        kwargs.update(overrides)
        return cls(**kwargs)
