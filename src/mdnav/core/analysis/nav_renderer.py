from __future__ import annotations

"""
Navigation Tree Renderer.

Produces a plain-text preview of a serialized navigation forest using
standard connectors (├──, └──). Entries are rendered in forest order.
"""

from typing import List, Optional

from mdnav.domain.nav_models import NavDirDto, NavFileDto, NavNodeDto

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_nav_tree(
        forest: List[NavNodeDto],
        lines: Optional[List[str]] = None,
        prefix: str = "",
) -> List[str]:
    """
    Recursively transform a serialized forest into text lines.

    Directories are suffixed with a slash to tell them apart from documents.

    Args:
        forest: Nodes of the current level.
        lines: Accumulator list; a new one is created when omitted.
        prefix: Indentation prefix for the current recursion level.

    Returns:
        List[str]: The accumulated lines.
    """
    if lines is None:
        lines = []

    total = len(forest)
    for i, node in enumerate(forest):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if isinstance(node, NavDirDto):
            lines.append(f"{prefix}{connector}{node.name}/")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_nav_tree(node.children, lines, prefix=new_prefix)
        elif isinstance(node, NavFileDto):
            lines.append(f"{prefix}{connector}{node.name}")
        else:
            raise TypeError(f"Unknown navigation node type: {type(node).__name__}")

    return lines
