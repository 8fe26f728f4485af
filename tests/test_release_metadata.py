from __future__ import annotations

import re
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _read_project_version() -> str:
    text = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, re.MULTILINE)
    assert match is not None, "version not found in pyproject.toml"
    return match.group(1)


def test_changelog_mentions_current_version() -> None:
    version = _read_project_version()
    text = (ROOT / "CHANGELOG.md").read_text(encoding="utf-8")
    pattern = rf"^## \[{re.escape(version)}\]"
    assert re.search(pattern, text, re.MULTILINE), "CHANGELOG entry missing for current version"


def test_fallback_version_matches_pyproject() -> None:
    text = (ROOT / "python" / "ssp_mcf" / "_version.py").read_text(encoding="utf-8")
    assert f'__version__ = "{_read_project_version()}"' in text
