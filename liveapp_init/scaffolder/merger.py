"""Merges collected answers into a template's JSON configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from ..config import ManifestOptions, PackageOptions
from ..utils import load_json, save_json

PACKAGE_JSON = "package.json"
MANIFEST_JSON = "manifest.json"


def merge_fields(existing: Mapping[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    """Shallow-merge *updates* on top of *existing*.

    Keys already in *existing* keep their position and take the new value;
    keys only in *updates* are appended in order. Neither input is modified.
    """
    merged = dict(existing)
    for key, value in updates.items():
        merged[key] = value
    return merged


async def merge_json_file(path: str | Path, updates: Mapping[str, Any]) -> dict[str, Any]:
    """Rewrite the JSON object at *path* with *updates* applied.

    Returns:
        The merged object as written.

    Raises:
        ConfigParseError: If the file is not a JSON object.
        OSError: If the file cannot be read or written.
    """
    merged = merge_fields(load_json(path), updates)
    await save_json(merged, path, indent=4)
    return merged


async def merge_configs(
    project_dir: str | Path,
    package: PackageOptions,
    manifest: ManifestOptions,
) -> None:
    """Patch ``package.json`` and ``manifest.json`` inside *project_dir*."""
    root = Path(project_dir)
    await merge_json_file(root / PACKAGE_JSON, package.as_updates())
    await merge_json_file(root / MANIFEST_JSON, manifest.as_updates())
