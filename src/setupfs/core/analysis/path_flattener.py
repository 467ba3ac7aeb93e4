from __future__ import annotations

"""
Path Flattener.

Walks a parsed Forest depth-first and emits one PathEntry per leaf, in the
order the leaves appear in the diagram. Directories are implied by the
paths of their descendants and are not enumerated separately.
"""

from typing import Iterator, List, Tuple

from setupfs.domain.tree_models import Forest, Node, PathEntry

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def flatten_forest(forest: Forest) -> List[PathEntry]:
    """
    Convert a Forest into its ordered list of file entries.

    Args:
        forest: Output of the diagram parser.

    Returns:
        List[PathEntry]: One entry per leaf, pre-order, left to right.
    """
    return list(iter_path_entries(forest))


def iter_path_entries(forest: Forest) -> Iterator[PathEntry]:
    """Lazily yield the file entries of a Forest in diagram order."""
    # Reversed pushes keep the explicit stack in left-to-right pop order
    pending: List[Tuple[Tuple[str, ...], Node]] = [
        ((root.name,), root) for root in reversed(forest.roots)
    ]
    while pending:
        parts, node = pending.pop()
        if node.children:
            pending.extend(
                (parts + (child.name,), child) for child in reversed(node.children)
            )
            continue
        yield PathEntry(parts=parts, content=node.content or "")
