from __future__ import annotations

"""
Tree Renderer.

Converts a parsed Forest into a visual ASCII preview using the standard
'├──' / '└──' connectors. Entries keep their diagram order.
"""

from typing import List, Optional

from setupfs.domain.tree_models import Forest, Node

EXCERPT_WIDTH = 40

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_forest(forest: Forest, root_label: Optional[str] = None) -> List[str]:
    """
    Render a Forest as preview lines.

    Args:
        forest: Parsed diagram.
        root_label: Optional heading line (usually the target directory).

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines: List[str] = []
    if root_label:
        lines.append(root_label)
    render_nodes(forest.roots, lines, prefix="")
    return lines


def render_nodes(nodes: List[Node], lines: List[str], prefix: str = "") -> None:
    """
    Recursively append the preview lines of sibling nodes.

    Args:
        nodes: Siblings to render, in order.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    total = len(nodes)
    for i, node in enumerate(nodes):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        # Directory
        if node.children:
            lines.append(f"{prefix}{connector}{node.name}/")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_nodes(node.children, lines, prefix=new_prefix)
            continue

        # File
        if node.content:
            lines.append(f"{prefix}{connector}{node.name}  {_excerpt(node.content)}")
        else:
            lines.append(f"{prefix}{connector}{node.name}")


def _excerpt(content: str) -> str:
    """Single-line, width-limited quotation of file content."""
    first, _, rest = content.partition("\n")
    text = first if not rest else f"{first}..."
    if len(text) > EXCERPT_WIDTH:
        text = text[:EXCERPT_WIDTH - 3] + "..."
    return f'"{text}"'
