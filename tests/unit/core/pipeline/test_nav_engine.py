from __future__ import annotations

"""
Unit tests for the Navigation Index Pipeline.

Verifies root validation, the end-to-end scan scenarios, JSON persistence
and that internal invariant violations are not disguised as results.
"""

import json
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from mdnav.core.analysis.nav_serializer import normalize_path
from mdnav.core.pipeline.engine import get_nav_tree, resolve_root, run_nav_index
from mdnav.domain.errors import NavTreeInvariantError, RootUnavailableError
from mdnav.domain.nav_models import NavDirDto, NavFileDto

# -----------------------------------------------------------------------------
# Root validation
# -----------------------------------------------------------------------------

def test_resolve_root_canonicalizes(docs_root: Path) -> None:
    assert resolve_root(str(docs_root / "guide" / "..")) == os.path.realpath(docs_root)


def test_resolve_root_missing(tmp_path: Path) -> None:
    with pytest.raises(RootUnavailableError, match="does not exist"):
        resolve_root(str(tmp_path / "missing"))


def test_resolve_root_not_a_directory(docs_root: Path) -> None:
    with pytest.raises(RootUnavailableError, match="not a directory"):
        resolve_root(str(docs_root / "readme.md"))

# -----------------------------------------------------------------------------
# get_nav_tree
# -----------------------------------------------------------------------------

def test_get_nav_tree_mixed_root(docs_root: Path) -> None:
    assert get_nav_tree(str(docs_root)) == [
        NavFileDto(name="readme.md", path="readme.md"),
        NavDirDto(name="guide", path="guide", children=[
            NavFileDto(name="advanced.md", path="guide/advanced.md"),
            NavFileDto(name="intro.md", path="guide/intro.md"),
        ]),
    ]


def test_get_nav_tree_deep_chain(tmp_path: Path) -> None:
    deep = tmp_path / "a" / "b" / "c"
    deep.mkdir(parents=True)
    (deep / "deep.md").write_text("x", encoding="utf-8")

    assert get_nav_tree(str(tmp_path)) == [
        NavDirDto(name="a", path="a", children=[
            NavDirDto(name="b", path="a/b", children=[
                NavDirDto(name="c", path="a/b/c", children=[
                    NavFileDto(name="deep.md", path="a/b/c/deep.md"),
                ]),
            ]),
        ]),
    ]


def test_get_nav_tree_empty_root(tmp_path: Path) -> None:
    assert get_nav_tree(str(tmp_path)) == []


def test_directories_without_documents_are_absent(tmp_path: Path) -> None:
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "logo.svg").write_text("<svg/>", encoding="utf-8")

    assert get_nav_tree(str(tmp_path)) == []


def test_get_nav_tree_keeps_hidden_subtree_when_requested(docs_root: Path) -> None:
    names = [node.name for node in get_nav_tree(str(docs_root), prune_hidden=False)]
    assert ".hidden" in names


def test_get_nav_tree_missing_root(tmp_path: Path) -> None:
    with pytest.raises(RootUnavailableError):
        get_nav_tree(str(tmp_path / "nope"))

# -----------------------------------------------------------------------------
# run_nav_index
# -----------------------------------------------------------------------------

def test_run_nav_index_success(docs_root: Path) -> None:
    result = run_nav_index({"input_path": str(docs_root)})

    assert result.ok
    assert result.error == ""
    assert result.root == normalize_path(os.path.realpath(docs_root))
    assert result.summary["documents"] == 3
    assert result.summary["directories"] == 1
    assert result.tree_lines == []
    assert result.to_document()["tree"][0] == {
        "kind": "file", "name": "readme.md", "path": "readme.md",
    }


def test_run_nav_index_reports_missing_root(tmp_path: Path) -> None:
    result = run_nav_index({"input_path": str(tmp_path / "missing")})

    assert not result.ok
    assert "does not exist" in result.error
    assert result.tree == []


def test_run_nav_index_print_tree(docs_root: Path) -> None:
    result = run_nav_index({"input_path": str(docs_root), "print_tree": True})

    assert result.tree_lines == [
        "├── readme.md",
        "└── guide/",
        "    ├── advanced.md",
        "    └── intro.md",
    ]


def test_run_nav_index_writes_document(docs_root: Path, tmp_path: Path) -> None:
    out = tmp_path / "out" / "nav.json"

    result = run_nav_index({"input_path": str(docs_root), "output_file": str(out)})

    assert result.ok
    assert result.output_file == str(out)
    document = json.loads(out.read_text(encoding="utf-8"))
    assert document == result.to_document()
    assert document["tree"][1]["children"][0]["path"] == "guide/advanced.md"


def test_run_nav_index_reports_write_failure(docs_root: Path, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not dir", encoding="utf-8")

    result = run_nav_index({
        "input_path": str(docs_root),
        "output_file": str(blocker / "nav.json"),
    })

    assert not result.ok
    assert "nav.json" in result.error


def test_run_nav_index_propagates_invariant_errors(docs_root: Path) -> None:
    with patch("mdnav.core.pipeline.engine.build_nav_tree") as mock_build:
        mock_build.side_effect = NavTreeInvariantError("broken")

        with pytest.raises(NavTreeInvariantError):
            run_nav_index({"input_path": str(docs_root)})


def test_runs_do_not_share_state(docs_root: Path) -> None:
    first = run_nav_index({"input_path": str(docs_root)})
    (docs_root / "new.md").write_text("x", encoding="utf-8")
    second = run_nav_index({"input_path": str(docs_root)})

    assert first.summary["documents"] == 3
    assert second.summary["documents"] == 4


# -----------------------------------------------------------------------------
# Output robustness
# -----------------------------------------------------------------------------

@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="requires byte-oriented file names")
def test_run_nav_index_writes_undecodable_names(tmp_path: Path) -> None:
    root = tmp_path / "docs"
    root.mkdir()
    try:
        with open(os.path.join(os.fsencode(str(root)), b"bad\xff.md"), "wb") as f:
            f.write(b"x")
    except OSError as e:
        pytest.skip(f"filesystem rejects non UTF-8 names: {e}")
    out = tmp_path / "nav.json"

    result = run_nav_index({"input_path": str(root), "output_file": str(out)})

    assert result.ok, result.error
    document = json.loads(out.read_text(encoding="utf-8"))
    assert document["tree"] == [{"kind": "file", "name": "bad\ufffd.md", "path": "bad\ufffd.md"}]


def test_encode_failure_keeps_previous_output(docs_root: Path, tmp_path: Path) -> None:
    out = tmp_path / "nav.json"
    out.write_text("previous", encoding="utf-8")

    with patch("mdnav.core.pipeline.engine.json.dumps") as mock_dumps:
        mock_dumps.side_effect = ValueError("cannot encode")
        result = run_nav_index({"input_path": str(docs_root), "output_file": str(out)})

    assert not result.ok
    assert "cannot encode" in result.error
    assert out.read_text(encoding="utf-8") == "previous"
    assert sorted(p.name for p in tmp_path.iterdir() if p.is_file()) == ["nav.json"]


def test_failed_replace_removes_staged_file(docs_root: Path, tmp_path: Path) -> None:
    out = tmp_path / "nav.json"
    out.write_text("previous", encoding="utf-8")

    with patch("mdnav.core.pipeline.engine.os.replace") as mock_replace:
        mock_replace.side_effect = OSError("disk full")
        result = run_nav_index({"input_path": str(docs_root), "output_file": str(out)})

    assert not result.ok
    assert "disk full" in result.error
    assert out.read_text(encoding="utf-8") == "previous"
    assert sorted(p.name for p in tmp_path.iterdir() if p.is_file()) == ["nav.json"]
