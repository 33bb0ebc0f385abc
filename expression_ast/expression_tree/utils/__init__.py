"""Utilities for expression trees."""

from .sympy_utils import SymPyConverter
from .tree_utils import (
    get_all_nodes, find_nodes_by_kind, count_nodes_by_kind,
    get_identifier_names, get_identifier_usage_counts, get_constants,
    apply_to_all_nodes, calculate_tree_depth, clone_tree
)
from .validator import ExpressionValidator

__all__ = [
    'SymPyConverter', 'ExpressionValidator',
    'get_all_nodes', 'find_nodes_by_kind', 'count_nodes_by_kind',
    'get_identifier_names', 'get_identifier_usage_counts', 'get_constants',
    'apply_to_all_nodes', 'calculate_tree_depth', 'clone_tree'
]
