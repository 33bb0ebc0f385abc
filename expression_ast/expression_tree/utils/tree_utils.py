"""
Tree Utility Functions

Traversal and inspection helpers for expression trees. They dispatch on
``Node.kind()`` and never evaluate anything, so they emit no diagnostics.
"""

from typing import List, Dict, Callable, Any, Optional
from collections import Counter, deque

from ..core.node import Node, ConstantNode, IdentifierNode
from ..core.operators import NodeType


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order, left child before right"""
    nodes = [node]
    for child in node.children():
        nodes.extend(_depth_first_traversal(child))
    return nodes


def find_nodes_by_kind(node: Node, kind: NodeType) -> List[Node]:
    """
    Find all nodes with a given kind tag.

    Args:
        node: Root node of the tree
        kind: NodeType to match

    Returns:
        Matching nodes in pre-order
    """
    return [n for n in _depth_first_traversal(node) if n.kind() == kind]


def count_nodes_by_kind(node: Node) -> Dict[NodeType, int]:
    """Count how many nodes of each kind the tree holds."""
    return dict(Counter(n.kind() for n in _depth_first_traversal(node)))


def get_identifier_names(node: Node) -> List[str]:
    """Sorted distinct names of the identifiers in the tree."""
    identifiers = find_nodes_by_kind(node, NodeType.IDENTIFIER)
    return sorted({n.name for n in identifiers if isinstance(n, IdentifierNode)})


def get_identifier_usage_counts(node: Node) -> Dict[str, int]:
    """
    Count the usage frequency of each identifier in the tree.

    Args:
        node: Root node of the tree

    Returns:
        Dictionary mapping variable names to their usage counts
    """
    usage_counts: Dict[str, int] = {}
    for ident in find_nodes_by_kind(node, NodeType.IDENTIFIER):
        if isinstance(ident, IdentifierNode):  # Type guard
            usage_counts[ident.name] = usage_counts.get(ident.name, 0) + 1
    return usage_counts


def get_constants(node: Node) -> List[ConstantNode]:
    """Get all constant nodes in the tree."""
    return [n for n in find_nodes_by_kind(node, NodeType.CONSTANT) if isinstance(n, ConstantNode)]


def apply_to_all_nodes(node: Node, func: Callable[[Node], Any],
                       filter_kind: Optional[NodeType] = None) -> List[Any]:
    """
    Apply a function to all nodes (optionally filtered by kind).

    Args:
        node: Root node of the tree
        func: Function to apply to each node
        filter_kind: Only apply to nodes with this kind tag

    Returns:
        List of function results
    """
    all_nodes = get_all_nodes(node)

    if filter_kind is not None:
        all_nodes = [n for n in all_nodes if n.kind() == filter_kind]

    return [func(n) for n in all_nodes]


def calculate_tree_depth(node: Node) -> int:
    """Maximum depth of the tree (leaf nodes have depth 1)."""
    return node.depth()


def clone_tree(node: Node) -> Node:
    """Deep copy of the tree; the copy has no parent."""
    return node.copy()
