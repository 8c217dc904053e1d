from __future__ import annotations

"""
Document Discovery Service.

Walks a documentation root and yields the relative paths of every eligible
document. Hidden entries and files without the recognized extension are
filtered out; unreadable entries are skipped so that a partial scan still
succeeds.
"""

import logging
import os
from pathlib import PurePath
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".md"
HIDDEN_PREFIX = "."


# ==============================================================================
# PUBLIC API
# ==============================================================================

def scan_documents(
        root: str,
        extension: str = DEFAULT_EXTENSION,
        prune_hidden: bool = True,
        sort_entries: bool = True,
) -> List[PurePath]:
    """
    Recursively enumerate eligible documents below the root directory.

    The root is assumed to be an existing directory; validation belongs to
    the caller. A directory's own files are emitted before the files of its
    subdirectories. By default the order is lexical per directory, not the order
    in which the filesystem reports entries.

    Args:
        root: Directory to scan.
        extension: Recognized document extension, leading dot included.
        prune_hidden: If True, hidden directories are not descended into.
                      If False, only entries whose own name is hidden are dropped.
        sort_entries: Sort names per directory level instead of keeping the
                      order reported by the operating system.

    Returns:
        List[PurePath]: Document paths relative to the root, in walk order.
    """
    found: List[PurePath] = []

    for current, dirs, files in os.walk(root, topdown=True, onerror=_log_walk_error):
        if prune_hidden:
            dirs[:] = [d for d in dirs if not is_hidden(d)]
        if sort_entries:
            dirs.sort()
            files.sort()

        for file_name in files:
            if not _is_eligible(current, file_name, extension):
                continue
            full_path = os.path.join(current, file_name)
            found.append(PurePath(os.path.relpath(full_path, root)))

    logger.debug(f"Discovered {len(found)} document(s) under {root}")
    return found


def is_hidden(name: str) -> bool:
    """Check whether a base name carries the hidden-entry marker."""
    return name.startswith(HIDDEN_PREFIX)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _is_eligible(directory: str, file_name: str, extension: str) -> bool:
    """Apply the per-entry rules: visible, regular file, exact extension."""
    if is_hidden(file_name):
        return False

    _, ext = os.path.splitext(file_name)
    if ext != extension:
        return False

    # isfile() reports False for vanished entries and unreadable metadata
    full_path = os.path.join(directory, file_name)
    if not os.path.isfile(full_path):
        logger.debug(f"Skipping non-regular or unreadable entry: {full_path}")
        return False

    return True


def _log_walk_error(error: OSError) -> None:
    """Absorb a directory listing failure and keep walking."""
    logger.warning(f"Skipping unreadable directory '{error.filename}': {error.strerror}")
