import numpy as np
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple
from .operators import OpType, OP_SYMBOLS, is_binary_op


def format_number(value: float) -> str:
  """Positional notation without a trailing '.0', so literals read back as typed"""
  if not np.isfinite(value):
    return str(value)
  return np.format_float_positional(value, trim='-')


class Node(ABC):
  """Base node class with size and hash caching.

  The node set is closed: LiteralNode, BinaryOpNode and CallNode. Evaluation
  lives in a single function (see evaluator.py) rather than on the nodes.
  """

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @property
  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def _key(self) -> tuple:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children)
    return self._size_cache

  def __eq__(self, other) -> bool:
    if type(self) is not type(other):
      return False
    return self._key() == other._key()

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = hash((type(self).__name__,) + self._key())
    return self._hash_cache

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class LiteralNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  @property
  def children(self) -> Tuple[Node, ...]:
    return ()

  def to_string(self) -> str:
    return format_number(self.value)

  def _key(self) -> tuple:
    # nan != nan would make a literal unequal to itself
    return ('nan',) if np.isnan(self.value) else (self.value,)


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: OpType, left: Node, right: Node):
    super().__init__()
    if not is_binary_op(operator):
      raise ValueError(f"Not a binary operator: {operator!r}")
    self.operator = OpType(operator)
    self.left = left
    self.right = right

  @property
  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def to_string(self) -> str:
    return f"({self.left.to_string()} {OP_SYMBOLS[self.operator]} {self.right.to_string()})"

  def _key(self) -> tuple:
    return (int(self.operator), self.left, self.right)


class CallNode(Node):
  __slots__ = ('name', 'args')

  def __init__(self, name: str, args: Sequence[Node]):
    super().__init__()
    self.name = name
    self.args = tuple(args)

  @property
  def children(self) -> Tuple[Node, ...]:
    return self.args

  def to_string(self) -> str:
    return f"{self.name}({', '.join(arg.to_string() for arg in self.args)})"

  def _key(self) -> tuple:
    return (self.name,) + self.args
