from typing import List, Optional
from .core.node import Node
from .evaluator import evaluate
from .utils.tree_utils import calculate_tree_depth, find_calls
from ..config import EvaluationConfig, DEFAULT_CONFIG


class Expression:
  """Parsed expression with string caching"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self, config: EvaluationConfig = DEFAULT_CONFIG) -> float:
    return evaluate(self.root, config)

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def function_names(self) -> List[str]:
    """Names of the functions called, in order of appearance"""
    return [call.name for call in find_calls(self.root)]

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root

  @classmethod
  def from_string(cls, expr_str: str) -> 'Expression':
    # Import here to avoid circular imports
    from ..parser import parse
    from ..errors import ExpressionSyntaxError

    root = parse(expr_str)
    if root is None:
      raise ExpressionSyntaxError("Expression is empty")
    return cls(root)
