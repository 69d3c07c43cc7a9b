"""Expression Tree Module

Tree nodes, the function registry, tree construction from postfix tokens and
evaluation.
"""

from .core.node import Node, LiteralNode, BinaryOpNode, CallNode
from .core.operators import OpType, BINARY_OP_MAP, PRECEDENCE, evaluate_binary_op
from .core.functions import (
    FunctionSpec, FUNCTION_REGISTRY, lookup_function, check_call_arity, available_functions
)
from .builder import build_tree
from .evaluator import evaluate
from .expression import Expression
from .utils import ExpressionValidator, get_all_nodes, calculate_tree_depth, find_calls

__all__ = [
    "Expression",
    "Node", "LiteralNode", "BinaryOpNode", "CallNode",
    "OpType", "BINARY_OP_MAP", "PRECEDENCE", "evaluate_binary_op",
    "FunctionSpec", "FUNCTION_REGISTRY", "lookup_function", "check_call_arity",
    "available_functions",
    "build_tree", "evaluate",
    "ExpressionValidator", "get_all_nodes", "calculate_tree_depth", "find_calls"
]
