from __future__ import annotations

"""
Navigation Index Pipeline.

Coordinates one navigation index request:
1. Validates configuration and resolves the scan root.
2. Discovers eligible documents.
3. Builds the navigation forest.
4. Serializes it into its transport-safe form.
5. Optionally renders a text preview and writes the JSON document.

Each request builds its own tree; nothing is cached between runs.
"""

import json
import logging
import os
import tempfile
from typing import Any, Dict, List, Optional

from mdnav.core.analysis.nav_builder import build_nav_tree, count_nodes
from mdnav.core.analysis.nav_renderer import render_nav_tree
from mdnav.core.analysis.nav_serializer import normalize_path, serialize_forest
from mdnav.core.pipeline.validator import validate_config
from mdnav.core.services.discovery import DEFAULT_EXTENSION, scan_documents
from mdnav.domain.errors import RootUnavailableError
from mdnav.domain.nav_models import NavNodeDto
from mdnav.domain.pipeline_models import (
    NavIndexResult,
    build_document,
    create_error_result,
    create_success_result,
)
from mdnav.infra.fs import resolve_input_path, safe_mkdir

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_root(root: str) -> str:
    """
    Canonicalize a scan root and verify that it is a usable directory.

    Args:
        root: Raw root path.

    Returns:
        str: Absolute path with symbolic links resolved.

    Raises:
        RootUnavailableError: If the path does not exist or is not a directory.
    """
    resolved = resolve_input_path(root, os.getcwd())
    if not os.path.exists(resolved):
        raise RootUnavailableError(resolved, "path does not exist")
    if not os.path.isdir(resolved):
        raise RootUnavailableError(resolved, "not a directory")
    return resolved


def get_nav_tree(
        root: str,
        *,
        extension: str = DEFAULT_EXTENSION,
        prune_hidden: bool = True,
        sort_entries: bool = True,
) -> List[NavNodeDto]:
    """
    Scan a root directory and return its serialized navigation forest.

    Args:
        root: Directory to index.
        extension: Recognized document extension.
        prune_hidden: Exclude the whole subtree of hidden directories.
        sort_entries: Sort names per directory level.

    Returns:
        List[NavNodeDto]: Top-level nodes, in discovery order.

    Raises:
        RootUnavailableError: If the root cannot be used.
    """
    resolved = resolve_root(root)
    paths = scan_documents(
        resolved,
        extension=extension,
        prune_hidden=prune_hidden,
        sort_entries=sort_entries,
    )
    return serialize_forest(build_nav_tree(paths))


def run_nav_index(config: Optional[Dict[str, Any]]) -> NavIndexResult:
    """
    Execute the full navigation index pipeline from a configuration.

    Root problems and output write failures are reported through the
    result; internal invariant violations propagate.

    Args:
        config: Raw or partial configuration dictionary.

    Returns:
        NavIndexResult: Status, serialized forest and statistics.
    """
    logger.info("Navigation index run started.")

    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    # 1) Root resolution
    try:
        root = resolve_root(cfg["input_path"])
    except RootUnavailableError as e:
        logger.error(str(e))
        return create_error_result(str(e), normalize_path(e.root))

    # 2) Discovery
    paths = scan_documents(
        root,
        extension=cfg["extension"],
        prune_hidden=cfg["prune_hidden"],
        sort_entries=cfg["sort_entries"],
    )

    # 3) Tree building
    forest = build_nav_tree(paths)
    documents, directories = count_nodes(forest)
    logger.info(f"Indexed {documents} document(s) across {directories} directories.")

    # 4) Serialization
    tree = serialize_forest(forest)
    root_text = normalize_path(root)

    tree_lines: List[str] = []
    if cfg["print_tree"]:
        tree_lines = render_nav_tree(tree)

    summary = {
        "documents": documents,
        "directories": directories,
        "extension": cfg["extension"],
    }

    # 5) Persistence
    output_file = cfg["output_file"]
    if output_file:
        output_file = os.path.abspath(output_file)
        error = _write_document(output_file, root_text, tree, cfg["json_indent"])
        if error:
            return create_error_result(error, root_text)

    logger.info("Navigation index run finished.")
    return create_success_result(
        root=root_text,
        tree=tree,
        tree_lines=tree_lines,
        output_file=output_file,
        summary_extra=summary,
    )


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _write_document(path: str, root: str, tree: List[NavNodeDto], indent: int) -> str:
    """
    Write the JSON document to disk.

    Returns:
        str: Error message, or an empty string on success.
    """
    ok, err = safe_mkdir(os.path.dirname(path))
    if not ok:
        msg = f"Cannot create output directory for '{path}': {err}"
        logger.error(msg)
        return msg

    try:
        payload = json.dumps(build_document(root, tree), ensure_ascii=False, indent=indent or None)
        data = (payload + "\n").encode("utf-8")
    except (TypeError, ValueError) as e:
        msg = f"Failed to encode navigation index for '{path}': {e}"
        logger.error(msg)
        return msg

    # Staged beside the target; os.replace swaps it in atomically
    tmp_path = ""
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=".mdnav-", suffix=".tmp", dir=os.path.dirname(path))
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        msg = f"Failed to write navigation index to '{path}': {e}"
        logger.error(msg)
        return msg

    logger.info(f"Navigation index saved to: {path}")
    return ""
