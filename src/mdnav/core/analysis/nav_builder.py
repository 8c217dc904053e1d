from __future__ import annotations

"""
Navigation Tree Builder.

Turns the flat list of relative document paths produced by discovery into
an ordered forest of directory and file nodes. Directories are inferred from
path components; each logical directory is represented exactly once and
children keep the order in which they were first encountered.
"""

import logging
from pathlib import PurePath
from typing import Iterable, Iterator, List, Tuple, Union

from mdnav.domain.errors import NavTreeInvariantError
from mdnav.domain.nav_models import NavDir, NavFile, NavNode

logger = logging.getLogger(__name__)

# Placeholder identity of the scratch root; never part of the result
_SCRATCH_ROOT_NAME = "root"


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_nav_tree(relative_paths: Iterable[Union[str, PurePath]]) -> List[NavNode]:
    """
    Build the navigation forest from relative document paths.

    Paths with an extension are files: their last component becomes a file
    leaf and the preceding components become directories. Paths without an
    extension are treated as directories only.

    Args:
        relative_paths: Paths relative to the scan root, in discovery order.

    Returns:
        List[NavNode]: Top-level nodes of the forest.

    Raises:
        ValueError: If a path is absolute or escapes the root.
        NavTreeInvariantError: If descent reaches a file node.
    """
    root = NavDir(name=_SCRATCH_ROOT_NAME, path=PurePath())

    for raw_path in relative_paths:
        path = PurePath(raw_path)
        parts = path.parts
        if not parts:
            continue
        _check_relative(path)

        is_file = bool(path.suffix)
        dir_parts = parts[:-1] if is_file else parts

        current = root
        current_path = PurePath()
        for name in dir_parts:
            current_path = current_path / name
            current = _descend(current, name, current_path)

        if is_file:
            current.children.append(NavFile(name=parts[-1], path=path))

    logger.debug(f"Built navigation forest with {len(root.children)} top-level node(s)")
    return root.children


def iter_files(forest: Iterable[NavNode]) -> Iterator[NavFile]:
    """Yield every file leaf depth-first, in child order."""
    for node in forest:
        if isinstance(node, NavFile):
            yield node
        elif isinstance(node, NavDir):
            yield from iter_files(node.children)
        else:
            raise TypeError(f"Unknown navigation node type: {type(node).__name__}")


def count_nodes(forest: Iterable[NavNode]) -> Tuple[int, int]:
    """
    Count files and directories in a forest.

    Returns:
        Tuple[int, int]: (files, directories).
    """
    files = 0
    dirs = 0
    for node in forest:
        if isinstance(node, NavFile):
            files += 1
        elif isinstance(node, NavDir):
            sub_files, sub_dirs = count_nodes(node.children)
            files += sub_files
            dirs += sub_dirs + 1
        else:
            raise TypeError(f"Unknown navigation node type: {type(node).__name__}")
    return files, dirs


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _descend(current: NavNode, name: str, dir_path: PurePath) -> NavDir:
    """
    Return the child directory called `name`, creating and appending it if absent.

    Only direct children of `current` are considered, and only directory
    nodes match; a file sharing the name is never reused.
    """
    if not isinstance(current, NavDir):
        raise NavTreeInvariantError(
            f"Descent into '{name}' reached a file node at '{current.path}'"
        )

    for child in current.children:
        if isinstance(child, NavDir) and child.name == name:
            return child

    new_dir = NavDir(name=name, path=dir_path)
    current.children.append(new_dir)
    return new_dir


def _check_relative(path: PurePath) -> None:
    """Reject paths that are absolute or climb above the root."""
    if path.is_absolute() or path.anchor:
        raise ValueError(f"Expected a path relative to the scan root, got '{path}'")
    if ".." in path.parts:
        raise ValueError(f"Path escapes the scan root: '{path}'")
