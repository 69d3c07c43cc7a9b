from ..core.node import Node, LiteralNode, BinaryOpNode, CallNode
from ..core.operators import is_binary_op
from ..core.functions import check_call_arity
from ...errors import ExpressionSyntaxError, ParseError


class ExpressionValidator:
  """Structural checks for trees that were assembled by hand instead of parsed.

  Parsed trees are valid by construction; this applies the same rules the
  tree builder enforces.
  """

  @staticmethod
  def is_valid_expression(node: Node) -> bool:
    try:
      ExpressionValidator.validate(node)
      return True
    except ParseError:
      return False

  @staticmethod
  def validate(node: Node) -> None:
    """Raise the matching ParseError subclass for the first structural problem found"""
    if isinstance(node, LiteralNode):
      return

    if isinstance(node, BinaryOpNode):
      if not is_binary_op(node.operator):
        raise ExpressionSyntaxError(f"Invalid binary operator: {node.operator!r}")
      ExpressionValidator._validate_children(node, (node.left, node.right))
      return

    if isinstance(node, CallNode):
      check_call_arity(node.name, len(node.args))
      ExpressionValidator._validate_children(node, node.args)
      return

    raise ExpressionSyntaxError(f"Not an expression node: {type(node).__name__}")

  @staticmethod
  def _validate_children(parent: Node, children) -> None:
    for child in children:
      if not isinstance(child, Node):
        raise ExpressionSyntaxError(
          f"{type(parent).__name__} has a non-node child: {type(child).__name__}")
      ExpressionValidator.validate(child)
