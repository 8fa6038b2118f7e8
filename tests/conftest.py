"""Shared pytest fixtures for the liveapp-init test suite.

Provides reusable fixtures for:
- Throwaway template roots laid out like the bundled ``templates/`` directory
- A working directory to create projects in
- Scripted answers for the interactive prompts
- Captured Rich console output
"""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any, Callable, Iterator
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console
from rich.prompt import PromptBase

from liveapp_init import utils
from liveapp_init.config import InitConfig


# ---------------------------------------------------------------------------
# Template fixtures
# ---------------------------------------------------------------------------

TEMPLATE_PACKAGE_JSON: dict[str, Any] = {
    "name": "live-app-template",
    "version": "0.1.0",
    "description": "",
    "private": True,
    "scripts": {"build": "webpack --mode production"},
}

TEMPLATE_MANIFEST_JSON: dict[str, Any] = {
    "name": "Live App",
    "description": "",
    "version_name": "1.0.0-alpha.0",
    "version_number": 1,
    "toolbar_color": "blue",
    "sizing_mode": "fill_container",
    "initial_height": 300,
    "js_files": ["dist/app.js"],
}


def _write_template(root: Path, template_id: str) -> Path:
    """Create a template with config files, sources and junk to exclude."""
    tdir = root / template_id
    (tdir / "src").mkdir(parents=True)
    (tdir / "package.json").write_text(json.dumps(TEMPLATE_PACKAGE_JSON, indent=2), encoding="utf-8")
    (tdir / "manifest.json").write_text(json.dumps(TEMPLATE_MANIFEST_JSON, indent=2), encoding="utf-8")
    (tdir / "webpack.config.js").write_text("module.exports = {};\n", encoding="utf-8")
    (tdir / "src" / "root.jsx").write_text(f"// {template_id}\n", encoding="utf-8")

    git_dir = tdir / ".git"
    git_dir.mkdir()
    (git_dir / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")

    deps = tdir / "node_modules" / "react"
    deps.mkdir(parents=True)
    (deps / "index.js").write_text("module.exports = {};\n", encoding="utf-8")
    return tdir


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """A ``templates/`` directory holding ``js_webpack`` and ``ts_webpack``."""
    root = tmp_path / "bundle" / "templates"
    root.mkdir(parents=True)
    _write_template(root, "js_webpack")
    _write_template(root, "ts_webpack")
    return root


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Working directory named like a real user's project folder."""
    cwd = tmp_path / "my cool app!"
    cwd.mkdir()
    return cwd


@pytest.fixture
def init_config(templates_root: Path, work_dir: Path) -> InitConfig:
    """An ``InitConfig`` wired to the throwaway templates and working dir."""
    return InitConfig(cwd=work_dir, templates_dir=templates_root)


# ---------------------------------------------------------------------------
# Prompt & console fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def answer_prompts() -> Iterator[Callable[[list[str]], MagicMock]]:
    """Feed scripted answers to every ``rich.prompt`` question.

    An empty string accepts the question's default, just like pressing Enter.
    """
    patchers: list[Any] = []

    def _answer(answers: list[str]) -> MagicMock:
        patcher = patch.object(PromptBase, "get_input", side_effect=list(answers))
        patchers.append(patcher)
        return patcher.start()

    yield _answer

    for patcher in patchers:
        patcher.stop()


@pytest.fixture
def quiet_console() -> Console:
    """Console that records output instead of writing to the terminal."""
    return Console(file=io.StringIO(), width=500, color_system=None)


@pytest.fixture
def captured_output(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    """Redirect the shared Rich consoles in ``liveapp_init.utils`` to a buffer."""
    buffer = io.StringIO()
    wide = Console(file=buffer, width=500, color_system=None)
    monkeypatch.setattr(utils, "console", wide)
    monkeypatch.setattr(utils, "error_console", wide)
    return buffer
