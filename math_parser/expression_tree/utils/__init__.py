"""Utilities for expression trees."""

from .tree_utils import get_all_nodes, calculate_tree_depth, find_calls
from .validator import ExpressionValidator

__all__ = [
    'get_all_nodes', 'calculate_tree_depth', 'find_calls',
    'ExpressionValidator'
]
