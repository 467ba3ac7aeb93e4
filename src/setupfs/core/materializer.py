from __future__ import annotations

"""
Materializer.

Turns ordered path entries into real directories and files below a root
directory. Each failure is reported with the offending path and the
underlying I/O cause. Output written before a failure is left in place.
"""

import errno
import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List, Set

from setupfs.domain.config import DEFAULT_ENCODING
from setupfs.domain.errors import (
    DirCreationError,
    EmptyPathError,
    FileCreationError,
    WriteError,
)
from setupfs.domain.tree_models import PathEntry
from setupfs.infra.fs import ensure_dir, join_parts, missing_dirs

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MaterializeResult:
    """
    Summary of one materialization run.

    Attributes:
        root: Absolute directory the entries were created under.
        written: Absolute file paths, in write order.
        dirs_created: Directories that did not exist before the run.
        dry_run: True when nothing was actually written.
    """
    root: str
    written: List[str] = field(default_factory=list)
    dirs_created: List[str] = field(default_factory=list)
    dry_run: bool = False

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def materialize(
        root: str,
        entries: Iterable[PathEntry],
        *,
        encoding: str = DEFAULT_ENCODING,
        overwrite: bool = True,
        dry_run: bool = False,
) -> MaterializeResult:
    """
    Create every entry's ancestor directories and write its file.

    Args:
        root: Directory under which relative entry paths are resolved.
        entries: File entries in creation order.
        encoding: Text encoding used to turn content into bytes.
        overwrite: Truncate existing files. When False, an existing file
            raises FileCreationError.
        dry_run: Only report what would be created.

    Returns:
        MaterializeResult: Files written and directories created.

    Raises:
        EmptyPathError: An entry has no path segments.
        DirCreationError: An ancestor directory cannot be created.
        FileCreationError: The file cannot be opened for writing.
        WriteError: The content cannot be encoded or written.
    """
    root = os.path.abspath(root)
    written: List[str] = []
    dirs_created: List[str] = []
    planned: Set[str] = set()

    for entry in entries:
        if not entry.parts:
            raise EmptyPathError(root)

        full_path = join_parts(root, entry.parts)
        parent = os.path.dirname(full_path)

        if dry_run:
            if not overwrite and os.path.exists(full_path):
                raise FileCreationError(
                    full_path, FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), full_path)
                )
            for d in missing_dirs(parent):
                if d not in planned:
                    planned.add(d)
                    dirs_created.append(d)
            logger.info(f"[dry-run] would write {full_path} ({len(entry.content)} chars)")
            written.append(full_path)
            continue

        try:
            dirs_created.extend(ensure_dir(parent))
        except OSError as e:
            raise DirCreationError(parent, e) from e

        _write_file(full_path, entry.content, encoding, overwrite)
        logger.debug(f"Wrote {full_path}")
        written.append(full_path)

    logger.info(
        f"{'Planned' if dry_run else 'Materialized'} {len(written)} files "
        f"and {len(dirs_created)} directories under {root}"
    )
    return MaterializeResult(
        root=root,
        written=written,
        dirs_created=dirs_created,
        dry_run=dry_run,
    )

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _write_file(path: str, content: str, encoding: str, overwrite: bool) -> None:
    """Create (or truncate) a file and write the encoded content."""
    mode = "wb" if overwrite else "xb"
    try:
        f = open(path, mode)
    except OSError as e:
        raise FileCreationError(path, e) from e

    with f:
        try:
            f.write(content.encode(encoding))
        except (OSError, UnicodeError) as e:
            raise WriteError(path, e) from e
