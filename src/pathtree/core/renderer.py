from __future__ import annotations

"""
Tree Renderer.

Converts the accumulated path structure into ASCII lines for terminal
display. Children are emitted in first-insertion order.
"""

from typing import List, Sequence, Tuple

from pathtree.domain.tree_models import StructureNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(
        nodes: Sequence[StructureNode],
        lines: List[str],
        prefix: str = "",
) -> None:
    """
    Transform a node sequence into a list of strings.

    Uses standard ASCII connectors (├──, └──) and manages indentation
    levels for nested segments. Walks the tree with an explicit stack, so
    deep branches do not hit the recursion limit.

    Args:
        nodes: Sibling nodes to process.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix applied to every emitted line.
    """
    stack = _frames(nodes, prefix)

    while stack:
        node, node_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{node_prefix}{connector}{node.name}")

        if node.children:
            new_prefix = node_prefix + ("    " if is_last else "│   ")
            stack.extend(_frames(node.children, new_prefix))


def render_lines(nodes: Sequence[StructureNode]) -> List[str]:
    """Render a node sequence and return the produced lines."""
    lines: List[str] = []
    render_tree_structure(nodes, lines)
    return lines

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _frames(nodes: Sequence[StructureNode], prefix: str) -> List[Tuple[StructureNode, str, bool]]:
    """Build stack entries for siblings, reversed so the first pops first."""
    total = len(nodes)
    return [(node, prefix, i == total - 1) for i, node in reversed(list(enumerate(nodes)))]
