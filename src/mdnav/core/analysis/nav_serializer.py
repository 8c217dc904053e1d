from __future__ import annotations

"""
Navigation Tree Serializer.

Converts the in-memory navigation forest into its transport-safe form.
Every path is rendered as a forward-slash string so that clients can embed
it directly in a link, whatever the host operating system.
"""

import os
from typing import Iterable, List, Union

from mdnav.domain.nav_models import (
    NavDir,
    NavDirDto,
    NavFile,
    NavFileDto,
    NavNode,
    NavNodeDto,
)

# Extended-length path marker used by Windows verbatim paths
VERBATIM_PREFIX = "\\\\?\\"


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize_path(path: Union[str, os.PathLike]) -> str:
    """
    Render a path as a canonical forward-slash string.

    Strips the verbatim prefix when present and replaces every backslash
    with a forward slash. Undecodable bytes become U+FFFD. Applying it to
    its own output is a no-op.

    Args:
        path: Native path value or its textual form.

    Returns:
        str: Normalized path string.
    """
    text = to_wire_text(os.fspath(path))
    if text.startswith(VERBATIM_PREFIX):
        text = text[len(VERBATIM_PREFIX):]
    return text.replace("\\", "/")


def serialize_node(node: NavNode) -> NavNodeDto:
    """
    Convert one node, recursively, into its serialized form.

    Args:
        node: File or directory node.

    Returns:
        NavNodeDto: Mirror of the node with normalized string paths.

    Raises:
        TypeError: If the node is neither a file nor a directory.
    """
    if isinstance(node, NavFile):
        return NavFileDto(name=to_wire_text(node.name), path=normalize_path(node.path))

    if isinstance(node, NavDir):
        return NavDirDto(
            name=to_wire_text(node.name),
            path=normalize_path(node.path),
            children=serialize_forest(node.children),
        )

    raise TypeError(f"Unknown navigation node type: {type(node).__name__}")


def serialize_forest(forest: Iterable[NavNode]) -> List[NavNodeDto]:
    """Serialize top-level nodes, preserving their order."""
    return [serialize_node(node) for node in forest]


def to_wire_text(text: str) -> str:
    """
    Make text from the filesystem encodable as UTF-8.

    Names that are not valid UTF-8 arrive from os.walk with lone surrogates
    (surrogateescape); those bytes are replaced with U+FFFD.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "replace")
    return raw.decode("utf-8", "replace")
