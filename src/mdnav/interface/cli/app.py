from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading
and merging (defaults, saved session, CLI overrides), pipeline execution,
and rendering of the navigation index to stdout or a file.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from mdnav.core.pipeline.engine import resolve_root, run_nav_index
from mdnav.core.pipeline.validator import validate_config
from mdnav.domain.config import get_default_config, load_config, save_config
from mdnav.domain.errors import RootUnavailableError
from mdnav.domain.pipeline_models import NavIndexResult
from mdnav.infra.logging import LoggingConfig, configure_logging, get_logger
from mdnav.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_ROOT = 2
EXIT_INTERRUPTED = 130

_MERGE_KEYS = [
    "input_path", "output_file", "extension",
    "prune_hidden", "sort_entries", "print_tree", "json_indent",
]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # Pre-flight root verification
    try:
        input_path = resolve_root(clean_conf["input_path"])
    except RootUnavailableError as e:
        msg = str(e)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_INVALID_ROOT
    clean_conf["input_path"] = input_path

    logger.info(f"Targeting documentation root: {input_path}")
    try:
        result = run_nav_index(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Operation interrupted by user.")
        return EXIT_INTERRUPTED

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return EXIT_FAILURE

    _render_result(result, clean_conf)
    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge known, explicitly given override values into the base."""
    out = dict(base)
    for k in _MERGE_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _render_result(result: NavIndexResult, conf: Dict[str, Any]) -> None:
    """Print the tree preview, the JSON document, or a short file report."""
    if result.tree_lines:
        print(result.root)
        print("\n".join(result.tree_lines))
    elif not result.output_file:
        indent = conf["json_indent"] or None
        print(json.dumps(result.to_document(), ensure_ascii=False, indent=indent))

    if result.output_file:
        docs = result.summary.get("documents", 0)
        print(f"Navigation index written to {result.output_file} ({docs} documents)")


if __name__ == "__main__":
    sys.exit(main())
