from __future__ import annotations

"""
Diagram Tree Data Models.

Provides the structural nodes produced by the diagram parser and the flat
path entries consumed by the materializer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

# -----------------------------------------------------------------------------
# LINE CLASSIFICATION
# -----------------------------------------------------------------------------

class LineKind(Enum):
    """Grammar category of a non-blank diagram line."""
    BRANCH = "branch"
    CONTENT = "content"


@dataclass(frozen=True)
class DiagramLine:
    """
    A classified row of the diagram.

    Attributes:
        number: 1-based line number in the raw input.
        raw: Original text of the line.
        depth: Nesting level (number of indentation cells).
        kind: Branch name or quoted content.
        payload: Entry name, or the unescaped content string.
    """
    number: int
    raw: str
    depth: int
    kind: LineKind
    payload: str

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class Node:
    """
    A named entry of the diagram.

    A node with children is a directory and never carries content.

    Attributes:
        name: Path segment of the entry.
        children: Child entries in diagram order.
        content: Literal file content, when a quoted line follows the entry.
    """
    name: str
    children: List["Node"] = field(default_factory=list)
    content: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass
class Forest:
    """Ordered top-level nodes of one diagram."""
    roots: List[Node] = field(default_factory=list)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.roots)

    def __len__(self) -> int:
        return len(self.roots)

    @property
    def is_empty(self) -> bool:
        return not self.roots

    def leaf_count(self) -> int:
        """Count the nodes without children across all roots."""
        count = 0
        pending = list(self.roots)
        while pending:
            node = pending.pop()
            if node.children:
                pending.extend(node.children)
            else:
                count += 1
        return count


@dataclass(frozen=True)
class PathEntry:
    """
    A file to materialize, relative to the target root.

    Attributes:
        parts: Path segments from the root entry down to the file.
        content: Text written to the file (empty when none was given).
    """
    parts: Tuple[str, ...]
    content: str = ""

    @property
    def path(self) -> str:
        """POSIX-style relative path, independent of the host platform."""
        return "/".join(self.parts)

    def as_tuple(self) -> Tuple[str, str]:
        return self.path, self.content
