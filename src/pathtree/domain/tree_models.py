from __future__ import annotations

"""
Path Tree Structure Data Models.

Provides the recursive node type used to accumulate observed request
targets, together with its two-field wire representation.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(repr=False)
class StructureNode:
    """
    One segment (hostname or path component) of an observed target.

    Attributes:
        name: Exact segment string. Never empty.
        children: Child nodes in first-insertion order. Sibling names are unique.
    """
    name: str
    children: List[StructureNode] = field(default_factory=list)

    def find_child(self, name: str) -> Optional[StructureNode]:
        """Return the child whose name is exactly `name`, or None."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def clone(self) -> StructureNode:
        """Return an independent copy of the subtree, built without recursion."""
        root = StructureNode(name=self.name)
        stack = [(self, root)]
        while stack:
            source, target = stack.pop()
            for child in source.children:
                child_copy = StructureNode(name=child.name)
                target.children.append(child_copy)
                stack.append((child, child_copy))
        return root

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the node and its subtree into the {Name, Children} shape.

        Children is always a list, empty for leaves. Built with an explicit
        stack, so depth is bounded by memory only.
        """
        result: Dict[str, Any] = {"Name": self.name, "Children": []}
        stack = [(self, result)]
        while stack:
            node, out = stack.pop()
            for child in node.children or []:
                child_out: Dict[str, Any] = {"Name": child.name, "Children": []}
                out["Children"].append(child_out)
                stack.append((child, child_out))
        return result

    def __repr__(self) -> str:
        return f"StructureNode(name={self.name!r}, children=<{len(self.children or [])} node(s)>)"

# -----------------------------------------------------------------------------
# SERIALIZATION
# -----------------------------------------------------------------------------

# Either literal JSON text or a node still to be expanded at the given depth
_JsonPart = Union[str, Tuple[StructureNode, int]]


def structure_to_dicts(nodes: Optional[Sequence[StructureNode]]) -> List[Dict[str, Any]]:
    """Serialize a node sequence, treating None as an empty sequence."""
    return [node.to_dict() for node in (nodes or [])]


def structure_to_json(nodes: Optional[Sequence[StructureNode]], indent: Optional[int] = None) -> str:
    """
    Emit the node sequence as JSON text.

    Output matches json.dumps(structure_to_dicts(nodes), indent=indent),
    but is produced with an explicit stack so arbitrarily deep branches
    never reach the interpreter recursion limit.

    Args:
        nodes: Top-level nodes, usually the result of PathTree.structure().
        indent: Pretty-print indentation. None or 0 produces compact output.

    Returns:
        str: JSON array of {Name, Children} objects.
    """
    return "".join(iter_structure_json(nodes, indent=indent))


def iter_structure_json(nodes: Optional[Sequence[StructureNode]], indent: Optional[int] = None) -> Iterator[str]:
    """Yield the JSON text of the node sequence chunk by chunk."""
    item_sep = "," if indent else ", "

    def newline(depth: int) -> str:
        return "\n" + " " * (indent * depth) if indent else ""

    def list_parts(items: Sequence[StructureNode], depth: int) -> List[_JsonPart]:
        if not items:
            return ["[]"]
        parts: List[_JsonPart] = ["["]
        for i, item in enumerate(items):
            if i:
                parts.append(item_sep)
            parts.append(newline(depth + 1))
            parts.append((item, depth + 1))
        parts.append(newline(depth) + "]")
        return parts

    def node_parts(node: StructureNode, depth: int) -> List[_JsonPart]:
        head = (
            "{" + newline(depth + 1)
            + '"Name": ' + json.dumps(node.name, ensure_ascii=False)
            + item_sep + newline(depth + 1) + '"Children": '
        )
        return [head, *list_parts(node.children or [], depth + 1), newline(depth) + "}"]

    stack = list(reversed(list_parts(nodes or [], 0)))
    while stack:
        part = stack.pop()
        if isinstance(part, str):
            yield part
        else:
            stack.extend(reversed(node_parts(*part)))
