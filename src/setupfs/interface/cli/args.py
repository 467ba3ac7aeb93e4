from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the setupfs CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="setupfs",
        description="Create directories and files from an ASCII '|_' tree diagram.",
    )

    # --- Input / Output ---
    p.add_argument(
        "diagram",
        help="Path to the diagram file, or '-' to read it from stdin.",
    )
    p.add_argument(
        "-o", "--output-root",
        dest="root",
        default=None,
        help="Directory under which the tree is created (default: current directory).",
    )
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON file with default options.",
    )

    # --- Writing Behaviour ---
    p.add_argument(
        "--encoding",
        default=None,
        help="Text encoding for file contents (default: utf-8).",
    )
    p.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Fail instead of truncating files that already exist.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be created without touching the disk.",
    )

    # --- Output and Diagnostics ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print a preview of the parsed tree.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run summary as JSON.",
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
        help="Also write logs to this file (rotated).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options given on the command line appear in the result, so file
    configuration is not clobbered by argparse defaults.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.root is not None:
        overrides["root"] = args.root
    if args.encoding is not None:
        overrides["encoding"] = args.encoding
    if args.no_overwrite:
        overrides["overwrite"] = False
    if args.dry_run:
        overrides["dry_run"] = True
    if args.print_tree:
        overrides["print_tree"] = True

    return overrides
