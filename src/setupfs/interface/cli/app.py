from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, JSON file, command-line overrides), diagram parsing,
materialization and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from setupfs.core.analysis.diagram_parser import parse_diagram
from setupfs.core.analysis.path_flattener import flatten_forest
from setupfs.core.analysis.tree_renderer import render_forest
from setupfs.core.materializer import MaterializeResult, materialize
from setupfs.core.validator import validate_config
from setupfs.domain.config import load_config
from setupfs.domain.errors import MaterializeError, ParseError
from setupfs.infra.logging import LoggingConfig, configure_logging, get_logger
from setupfs.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_INVALID_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 I/O failure, 2 invalid input,
             130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Logging bootstrap (console on stderr, optional file)
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    # 2. Configuration hierarchy (strict: a bad value must not silently fall back)
    raw_conf = _merge_config(load_config(args.config_path), cli_args.args_to_overrides(args))
    try:
        conf, _ = validate_config(raw_conf, strict=True)
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"ERROR: invalid configuration: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    # 3. Diagram input
    try:
        text = _read_diagram(args.diagram)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read diagram '{args.diagram}': {e}")
        print(f"ERROR: cannot read diagram '{args.diagram}': {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        forest = parse_diagram(text)
    except ParseError as e:
        logger.error(f"Invalid diagram: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if conf["print_tree"]:
        print("\n".join(render_forest(forest, root_label=conf["root"])))

    # 4. Materialization
    try:
        result = materialize(
            conf["root"],
            flatten_forest(forest),
            encoding=conf["encoding"],
            overwrite=conf["overwrite"],
            dry_run=conf["dry_run"],
        )
    except MaterializeError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_IO_ERROR
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED

    # 5. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


def _read_diagram(source: str) -> str:
    """Read the diagram from a file path, or from stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    with open(os.path.expanduser(source), "r", encoding="utf-8") as f:
        return f.read()


def _print_human_summary(result: MaterializeResult) -> None:
    """Print a short plain-text report of the run."""
    verb = "Would create" if result.dry_run else "Created"
    print(f"{verb} {len(result.written)} files in {result.root}")
    for path in result.written:
        print(f"  {os.path.relpath(path, result.root)}")
