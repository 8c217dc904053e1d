from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the navigation pipeline.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the mdnav CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="mdnav",
        description="Build the navigation index of a documentation directory.",
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        help="Documentation root to scan (default: current directory).",
        default=None,
    )
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        help="Write the JSON navigation index to this file instead of stdout.",
        default=None,
    )

    # --- Discovery Rules ---
    p.add_argument(
        "--ext",
        dest="extension",
        default=None,
        help="Recognized document extension (default: .md).",
    )
    p.add_argument(
        "--keep-hidden-dirs",
        action="store_true",
        help="Descend into hidden directories; only hidden entries themselves are skipped.",
    )
    p.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep the directory order reported by the operating system.",
    )

    # --- Output Format ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print a text preview of the navigation tree instead of JSON.",
    )
    p.add_argument(
        "--indent",
        dest="json_indent",
        type=int,
        default=None,
        help="JSON indentation width (0 for compact output).",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved session and start from the default configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration as the last session.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to a rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides; None means "not given".
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "output_file": args.output_file,
        "extension": args.extension,
        "json_indent": args.json_indent,
    }

    if args.keep_hidden_dirs:
        overrides["prune_hidden"] = False
    if args.no_sort:
        overrides["sort_entries"] = False
    if args.print_tree:
        overrides["print_tree"] = True

    return overrides
