"""Template selection: maps language and bundler to a template id."""

from __future__ import annotations

from pathlib import Path


def template_id(typescript: bool, bundler: str) -> str:
    """Return the template id ``<js|ts>_<bundler>``.

    The bundler is passed through unchanged; a missing template is only
    detected when it is copied.
    """
    language = "ts" if typescript else "js"
    return f"{language}_{bundler}"


def available_templates(templates_dir: str | Path) -> list[str]:
    """Return the sorted ids of every template directory under *templates_dir*."""
    root = Path(templates_dir)
    if not root.is_dir():
        return []
    return sorted(p.name for p in root.iterdir() if p.is_dir() and not p.name.startswith("."))
