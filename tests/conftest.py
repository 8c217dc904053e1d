from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package is importable
   without installation.
2. Provides documentation trees shared by discovery, pipeline and CLI tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """
    Documentation root with hidden and foreign entries.

    docs/
      readme.md
      image.png
      guide/
        intro.md
        advanced.md
      .hidden/
        notes.md
    """
    root = tmp_path / "docs"
    root.mkdir()
    (root / "readme.md").write_text("# Readme", encoding="utf-8")
    (root / "image.png").write_bytes(b"\x89PNG")

    guide = root / "guide"
    guide.mkdir()
    (guide / "intro.md").write_text("# Intro", encoding="utf-8")
    (guide / "advanced.md").write_text("# Advanced", encoding="utf-8")

    hidden = root / ".hidden"
    hidden.mkdir()
    (hidden / "notes.md").write_text("# Notes", encoding="utf-8")

    return root
