"""Core expression tree components."""

from .node import Node, LiteralNode, BinaryOpNode, CallNode, format_number
from .operators import (
    OpType, BINARY_OPS, BINARY_OP_MAP, OP_SYMBOLS, PRECEDENCE,
    is_binary_op, evaluate_binary_op, evaluate_binary_op_fast
)
from .functions import (
    FunctionSpec, FUNCTION_REGISTRY, lookup_function, check_call_arity, available_functions
)

__all__ = [
    'Node', 'LiteralNode', 'BinaryOpNode', 'CallNode', 'format_number',
    'OpType', 'BINARY_OPS', 'BINARY_OP_MAP', 'OP_SYMBOLS', 'PRECEDENCE',
    'is_binary_op', 'evaluate_binary_op', 'evaluate_binary_op_fast',
    'FunctionSpec', 'FUNCTION_REGISTRY', 'lookup_function', 'check_call_arity',
    'available_functions'
]
