from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object handed from the navigation pipeline to the
interface layer, and the factories that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from mdnav.domain.nav_models import NavNodeDto

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class NavIndexResult:
    """
    Outcome of one navigation index run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root: Normalized forward-slash form of the scanned root.
        tree: Serialized navigation forest.
        tree_lines: Text preview of the forest, when requested.
        output_file: Path of the written JSON document, if any.
        summary: Execution statistics.
    """
    ok: bool
    error: str
    root: str
    tree: List[NavNodeDto] = field(default_factory=list)
    tree_lines: List[str] = field(default_factory=list)
    output_file: str = ""
    summary: Dict[str, Any] = field(default_factory=dict)

    def to_document(self) -> Dict[str, Any]:
        return build_document(self.root, self.tree)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def build_document(root: str, tree: List[NavNodeDto]) -> Dict[str, Any]:
    """Build the JSON document consumed by a rendering client."""
    return {"root": root, "tree": [node.to_dict() for node in tree]}


def create_error_result(error: str, root: str) -> NavIndexResult:
    return NavIndexResult(ok=False, error=error, root=root)


def create_success_result(
        root: str,
        tree: List[NavNodeDto],
        tree_lines: Optional[List[str]] = None,
        output_file: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> NavIndexResult:
    return NavIndexResult(
        ok=True,
        error="",
        root=root,
        tree=tree,
        tree_lines=tree_lines or [],
        output_file=output_file,
        summary=summary_extra or {},
    )
