from __future__ import annotations

"""
Setup Service.

High-level entry points chaining the diagram parser, the path flattener and
the materializer.
"""

import logging
from typing import List, Tuple

from setupfs.core.analysis.diagram_parser import parse_diagram
from setupfs.core.analysis.path_flattener import flatten_forest
from setupfs.core.materializer import MaterializeResult, materialize
from setupfs.domain.config import DEFAULT_ENCODING

logger = logging.getLogger(__name__)


def parse_fs_tree(tree: str) -> List[Tuple[str, str]]:
    """
    Convert a diagram into ordered (relative_path, content) pairs.

    Paths use '/' separators regardless of platform.
    """
    return [entry.as_tuple() for entry in flatten_forest(parse_diagram(tree))]


def setup_fs(
        root: str,
        tree: str,
        *,
        encoding: str = DEFAULT_ENCODING,
        overwrite: bool = True,
        dry_run: bool = False,
) -> MaterializeResult:
    """
    Create the directories and files described by a diagram.

    The whole diagram is parsed before anything touches the disk, so a
    malformed diagram never leaves partial output.

    Example:
        setup_fs(tmp_path, '''
            |_initial-content
            | |_jcr-root
            |   |_test-file
            |     "initial-content"
        ''')

    Args:
        root: Directory under which the tree is created.
        tree: The diagram.
        encoding: Text encoding for file contents.
        overwrite: Truncate files that already exist.
        dry_run: Only report what would be created.

    Returns:
        MaterializeResult: Files written and directories created.

    Raises:
        ParseError: The diagram is malformed.
        MaterializeError: A directory or file could not be created.
    """
    entries = flatten_forest(parse_diagram(tree))
    logger.debug(f"Diagram resolved to {len(entries)} files")
    return materialize(
        str(root),
        entries,
        encoding=encoding,
        overwrite=overwrite,
        dry_run=dry_run,
    )
