"""
Public parsing pipeline.

string -> tokens -> expanded tokens -> postfix tokens -> tree -> float

Every stage is a pure function of its input; the angle unit only enters at
evaluation time through the EvaluationConfig passed in by the caller.
"""

from typing import Optional

import numpy as np

from .config import EvaluationConfig, DEFAULT_CONFIG
from .errors import ExpressionSyntaxError, ParseError, describe_error
from .expression_tree.builder import build_tree
from .expression_tree.core.node import Node
from .expression_tree.evaluator import evaluate
from .expression_tree.utils.tree_utils import calculate_tree_depth
from .logging_system import LogLevel, log_debug, log_info
from .postfix import expand_implicit_multiplication, to_postfix
from .tokenizer import scan


def parse(expression: str) -> Optional[Node]:
    """
    Parse ``expression`` into an expression tree.

    Returns None when the input contains no tokens at all. Raises a ParseError
    subclass (MalformedNumberError, ExpressionSyntaxError, UnknownFunctionError,
    ArityMismatchError) for structurally invalid input.
    """
    tokens = scan(expression)
    expanded = expand_implicit_multiplication(tokens)
    postfix = to_postfix(expanded)
    return build_tree(postfix)


def calculate(expression: str, config: Optional[EvaluationConfig] = None) -> float:
    """Parse and evaluate ``expression`` in one step"""
    if config is None:
        config = DEFAULT_CONFIG

    try:
        root = parse(expression)
    except ParseError as e:
        log_debug(f"Could not parse {expression!r}: {describe_error(e)}")
        raise
    if root is None:
        raise ExpressionSyntaxError("Expression is empty")

    result = evaluate(root, config)

    log_info(
        f"{expression!r} = {result} (size={root.size()}, depth={calculate_tree_depth(root)}, "
        f"angle_unit={config.angle_unit.value})",
        LogLevel.DETAILED,
    )
    if not np.isfinite(result):
        log_info(f"Non-finite result for {expression!r}: {result}", LogLevel.DETAILED)
    return result


__all__ = ["scan", "parse", "evaluate", "calculate"]
