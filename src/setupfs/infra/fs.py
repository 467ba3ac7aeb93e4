from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin helpers over the 'os' module for path resolution and directory
creation. Errors are raised as plain OSError; callers decide how to
report them.
"""

import os
from typing import List, Optional, Sequence

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def join_parts(root: str, parts: Sequence[str]) -> str:
    """Join relative path segments onto a root using the host separator."""
    return os.path.join(root, *parts)

# -----------------------------------------------------------------------------
# DIRECTORY API
# -----------------------------------------------------------------------------

def missing_dirs(path: str) -> List[str]:
    """
    List the directories that creating `path` would add, outermost first.

    Args:
        path: Target directory path.

    Returns:
        List[str]: Absolute paths of the ancestors (and `path` itself) that
                   do not exist yet.
    """
    out: List[str] = []
    current = os.path.abspath(path)
    while not os.path.isdir(current):
        out.append(current)
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent
    out.reverse()
    return out


def ensure_dir(path: str) -> List[str]:
    """
    Recursively create a directory structure.

    Args:
        path: Target directory path.

    Returns:
        List[str]: Directories that were created by this call.

    Raises:
        OSError: If a component cannot be created.
    """
    created = missing_dirs(path)
    if created:
        os.makedirs(path, exist_ok=True)
    return created
