"""Copies a template tree into the new project directory.

Symbolic links inside the template are followed, so the project receives
real files. Version-control metadata and dependency caches that live inside
a template checkout are never copied.
"""

from __future__ import annotations

import asyncio
import re
import shutil
from pathlib import Path
from typing import Callable

from ..errors import DestinationExistsError, TemplateNotFoundError
from ..utils import print_step, print_warning
from .selector import available_templates

# Matched against POSIX paths with a trailing slash appended.
_EXCLUDE_RE = re.compile(r"(?:^|/)\.git/|templates/\w+/node_modules/")


def is_excluded(path: str | Path) -> bool:
    """Return ``True`` if *path* must be skipped when copying a template.

    Excluded are any path with a ``.git`` segment and any ``node_modules``
    directory sitting directly inside ``templates/<name>/``.
    """
    return _EXCLUDE_RE.search(Path(path).as_posix() + "/") is not None


def _ignore_excluded(directory: str, names: list[str]) -> set[str]:
    """``shutil.copytree`` ignore hook built on :func:`is_excluded`."""
    base = Path(directory)
    return {name for name in names if is_excluded(base / name)}


async def materialize(
    template_dir: str | Path,
    dest: str | Path,
    *,
    dry_run: bool = False,
    ignore: Callable[[str, list[str]], set[str]] = _ignore_excluded,
) -> Path:
    """Copy *template_dir* to *dest*.

    Args:
        template_dir: Root of the selected template.
        dest: Project directory to create. Must not exist yet.
        dry_run: Only report what would be copied.
        ignore: ``copytree`` ignore hook; defaults to the exclusion rules.

    Returns:
        The destination path.

    Raises:
        TemplateNotFoundError: If *template_dir* is not a directory.
        DestinationExistsError: If *dest* already exists.
        OSError: If the copy itself fails.
    """
    source = Path(template_dir)
    target = Path(dest)

    if dry_run:
        print_step(f"Would initialize {source.name} on {target}")
        if target.exists():
            print_warning(f"  {target} already exists; a real run would stop here.")
        return target

    if not source.is_dir():
        raise TemplateNotFoundError(source.name, source, available_templates(source.parent))
    if target.exists():
        raise DestinationExistsError(target)

    await asyncio.to_thread(
        shutil.copytree, source, target, symlinks=False, ignore=ignore
    )
    return target
