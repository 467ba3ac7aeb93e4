from __future__ import annotations

"""
setupfs: stand up directory and file fixtures from an ASCII tree diagram.

    from setupfs import setup_fs

    setup_fs(tmp_path, '''
        |_initial-content
        | |_jcr-root
        |   |_test-file
        |     "initial-content"
        |_server-zip
          |_test-file
    ''')

Not meant for production use: symlinks, permissions and binary content are
not supported.
"""

from setupfs.core.analysis.diagram_parser import parse_diagram
from setupfs.core.analysis.path_flattener import flatten_forest, iter_path_entries
from setupfs.core.analysis.tree_renderer import render_forest
from setupfs.core.materializer import MaterializeResult, materialize
from setupfs.core.service import parse_fs_tree, setup_fs
from setupfs.domain.errors import (
    DirCreationError,
    DirectoryWithContent,
    EmptyPathError,
    FileCreationError,
    InvalidDepthJump,
    MalformedLine,
    MaterializeError,
    OrphanContent,
    ParseError,
    SetupFsError,
    WriteError,
)
from setupfs.domain.tree_models import Forest, Node, PathEntry

__version__ = "0.1.0"

__all__ = [
    "setup_fs",
    "parse_fs_tree",
    "parse_diagram",
    "flatten_forest",
    "iter_path_entries",
    "materialize",
    "render_forest",
    "MaterializeResult",
    "Forest",
    "Node",
    "PathEntry",
    "SetupFsError",
    "ParseError",
    "InvalidDepthJump",
    "OrphanContent",
    "MalformedLine",
    "DirectoryWithContent",
    "MaterializeError",
    "DirCreationError",
    "FileCreationError",
    "WriteError",
    "EmptyPathError",
]
