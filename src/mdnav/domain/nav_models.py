from __future__ import annotations

"""
Navigation Tree Data Models.

Defines the two node variants of the in-memory navigation tree (files as
leaves, directories owning their children) and their transport-safe
mirrors, where every path is a normalized forward-slash string.
"""

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any, Dict, List, Union

# -----------------------------------------------------------------------------
# IN-MEMORY TREE
# -----------------------------------------------------------------------------

@dataclass
class NavFile:
    """
    Leaf entry representing one discovered document.

    Attributes:
        name: Final path component, extension included.
        path: Full path relative to the scan root.
    """
    name: str
    path: PurePath


@dataclass
class NavDir:
    """
    Interior entry representing a directory inferred from document paths.

    Attributes:
        name: Directory base name.
        path: Path of the directory itself, relative to the scan root.
        children: Nested nodes in insertion order.
    """
    name: str
    path: PurePath
    children: List[NavNode] = field(default_factory=list)


NavNode = Union[NavFile, NavDir]

# -----------------------------------------------------------------------------
# SERIALIZED FORM (DTO)
# -----------------------------------------------------------------------------

KIND_FILE = "file"
KIND_DIR = "dir"


@dataclass(frozen=True)
class NavFileDto:
    name: str
    path: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": KIND_FILE, "name": self.name, "path": self.path}


@dataclass(frozen=True)
class NavDirDto:
    name: str
    path: str
    children: List[NavNodeDto] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Encode the directory and its whole subtree as plain JSON-ready data."""
        return {
            "kind": KIND_DIR,
            "name": self.name,
            "path": self.path,
            "children": [child.to_dict() for child in self.children],
        }


NavNodeDto = Union[NavFileDto, NavDirDto]
