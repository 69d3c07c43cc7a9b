from .core.node import Node, LiteralNode, BinaryOpNode, CallNode
from .core.operators import evaluate_binary_op
from .core.functions import lookup_function
from ..config import EvaluationConfig, DEFAULT_CONFIG


def evaluate(node: Node, config: EvaluationConfig = DEFAULT_CONFIG) -> float:
  """Reduce a tree to a single float.

  Numeric edge cases follow IEEE-754: 5/0 is inf, sqrt(-1) and 0/0 are nan.
  """
  if isinstance(node, LiteralNode):
    return node.value

  if isinstance(node, BinaryOpNode):
    left_val = evaluate(node.left, config)
    right_val = evaluate(node.right, config)
    return evaluate_binary_op(left_val, right_val, node.operator)

  if isinstance(node, CallNode):
    values = [evaluate(arg, config) for arg in node.args]
    return lookup_function(node.name)(values, config)

  raise TypeError(f"Cannot evaluate {type(node).__name__}")
