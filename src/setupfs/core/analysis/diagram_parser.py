from __future__ import annotations

"""
Diagram Parser.

Converts the ASCII tree notation into a Forest of named nodes:

    |_dir-a
    | |_dir-b
    |   |_file-one
    |     "hello"
    |_dir-c
      |_file-two

The indentation before each '|_' marker (or before an opening quote) is read
as 2-character cells, each either a continuation bar ("| ") or blank ("  ").
The number of cells is the depth of the line. A quoted line supplies the
content of the entry directly above it, one level shallower.
"""

import logging
import re
import textwrap
from typing import Iterator, List, Optional, Tuple

from setupfs.domain.errors import (
    DirectoryWithContent,
    InvalidDepthJump,
    MalformedLine,
    OrphanContent,
)
from setupfs.domain.tree_models import DiagramLine, Forest, LineKind, Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GRAMMAR
# -----------------------------------------------------------------------------

BRANCH_MARKER = "|_"
CELL_WIDTH = 2
TAB_SIZE = 4

_BRANCH_RE = re.compile(r"^(?P<indent>(?:[| ] )*)\|_(?P<name>.*)$")
_CONTENT_RE = re.compile(r'^(?P<indent>(?:[| ] )*)"(?P<body>(?:[^"\\]|\\.)*)"\s*$')
_SPACER_RE = re.compile(r"^[|\s]*$")
_ESCAPE_RE = re.compile(r"\\(.)")
_INDENT_RUN_RE = re.compile(r"^[ \t|]*")
_SEPARATOR_RE = re.compile(r"[\\/]")

_ESCAPES = {"n": "\n", "t": "\t", '"': '"', "\\": "\\"}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_diagram(text: str) -> Forest:
    """
    Parse a tree diagram into a Forest.

    Entries are assembled with a stack of (depth, node) pairs ordered
    shallowest-first. A branch line pops every entry at the same depth or
    deeper, then attaches to whatever remains on top (or becomes a root).

    Args:
        text: The raw diagram.

    Returns:
        Forest: Root entries in diagram order. Empty when the diagram has
                no entries.

    Raises:
        MalformedLine: A non-blank line matches neither grammar.
        InvalidDepthJump: An entry skips one or more nesting levels.
        OrphanContent: A quoted line has no entry to attach to.
        DirectoryWithContent: An entry is nested under a file with content.
    """
    forest = Forest()
    stack: List[Tuple[int, Node]] = []
    branches = 0

    for line in iter_diagram_lines(text):
        if line.kind is LineKind.CONTENT:
            _attach_content(stack, line)
            continue

        while stack and stack[-1][0] >= line.depth:
            stack.pop()

        node = Node(name=line.payload)
        if stack:
            parent_depth, parent = stack[-1]
            if line.depth != parent_depth + 1:
                raise InvalidDepthJump(line.number, line.raw)
            if parent.content is not None:
                raise DirectoryWithContent(line.number, line.raw)
            parent.children.append(node)
        else:
            if line.depth != 0:
                raise InvalidDepthJump(line.number, line.raw)
            forest.roots.append(node)

        stack.append((line.depth, node))
        branches += 1

    logger.debug(f"Parsed diagram: {branches} entries, {len(forest)} roots, {forest.leaf_count()} files")
    return forest


def iter_diagram_lines(text: str) -> Iterator[DiagramLine]:
    """
    Yield the classified non-blank lines of a diagram.

    The common left margin is removed first, so diagrams embedded in
    indented string literals behave like flush-left ones. Tabs are expanded
    in the indentation only; names and quoted payloads keep them.
    """
    rows = text.replace("\r\n", "\n").split("\n")
    body = textwrap.dedent("\n".join(_expand_indent(row) for row in rows))
    for number, raw in enumerate(body.split("\n"), start=1):
        line = classify_line(number, raw)
        if line is not None:
            yield line


def classify_line(number: int, raw: str) -> Optional[DiagramLine]:
    """
    Classify one row of the diagram.

    Args:
        number: 1-based line number, used in error reports.
        raw: The row, already stripped of the common margin.

    Returns:
        Optional[DiagramLine]: None for blank rows and bare '|' spacer rows.

    Raises:
        MalformedLine: The row is neither a branch nor a quoted content line.
    """
    stripped = raw.rstrip()
    if _SPACER_RE.match(stripped):
        return None

    m = _BRANCH_RE.match(stripped)
    if m:
        name = m.group("name").strip()
        if not name or '"' in name or BRANCH_MARKER in name or _escapes_root(name):
            raise MalformedLine(number, raw)
        return DiagramLine(
            number=number,
            raw=raw,
            depth=len(m.group("indent")) // CELL_WIDTH,
            kind=LineKind.BRANCH,
            payload=name,
        )

    m = _CONTENT_RE.match(stripped)
    if m:
        return DiagramLine(
            number=number,
            raw=raw,
            depth=len(m.group("indent")) // CELL_WIDTH,
            kind=LineKind.CONTENT,
            payload=unescape_content(m.group("body")),
        )

    raise MalformedLine(number, raw)


def unescape_content(body: str) -> str:
    """Resolve backslash escapes (\\n, \\t, \\", \\\\) in a quoted payload."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _expand_indent(row: str) -> str:
    """Expand tabs in the leading run of blanks and bars of a row."""
    m = _INDENT_RUN_RE.match(row)
    return m.group(0).expandtabs(TAB_SIZE) + row[m.end():]


def _escapes_root(name: str) -> bool:
    """True for absolute names and names with a '..' segment."""
    return name[0] in "/\\" or ".." in _SEPARATOR_RE.split(name)


def _attach_content(stack: List[Tuple[int, Node]], line: DiagramLine) -> None:
    """
    Assign a quoted payload to the most recent entry one level up.

    Consecutive quoted lines for the same entry are joined with newlines.
    """
    if not stack:
        raise OrphanContent(line.number, line.raw)

    depth, node = stack[-1]
    if depth != line.depth - 1 or node.children:
        raise OrphanContent(line.number, line.raw)

    if node.content is None:
        node.content = line.payload
    else:
        node.content = f"{node.content}\n{line.payload}"
