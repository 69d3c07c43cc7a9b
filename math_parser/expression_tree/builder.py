from typing import List, Optional
from .core.node import Node, LiteralNode, BinaryOpNode, CallNode
from .core.operators import OpType
from .core.functions import check_call_arity
from ..errors import ExpressionSyntaxError
from ..logging_system import log_debug
from ..tokens import Token, TokenType


def _syntax_error(message: str) -> ExpressionSyntaxError:
  log_debug(f"Tree construction failed: {message}")
  return ExpressionSyntaxError(message)


def _pop(stack: List[Node], what: str) -> Node:
  if not stack:
    raise _syntax_error(f"Missing {what}")
  return stack.pop()


def _pop_argument_count(stack: List[Node], name: str) -> int:
  count_node = _pop(stack, f"argument count for '{name}'")
  if not isinstance(count_node, LiteralNode):
    raise _syntax_error(f"Invalid argument count for '{name}'")
  count = count_node.value
  if not count.is_integer() or count < 1:
    raise _syntax_error(f"Invalid argument count for '{name}': {count}")
  return int(count)


def build_tree(postfix: List[Token]) -> Optional[Node]:
  """Build an expression tree from a postfix token list.

  Returns None for an empty token list. Function tokens must be preceded by
  their argument count, as produced by ``to_postfix``; arguments come off the
  stack last-first and are reversed back into call order.
  """
  stack: List[Node] = []

  for token in postfix:
    if token.type == TokenType.NUMBER:
      stack.append(LiteralNode(token.value))

    elif token.is_function:
      n_args = _pop_argument_count(stack, token.name)
      if n_args > len(stack):
        raise _syntax_error(f"'{token.name}' expects {n_args} operands, found {len(stack)}")
      args = [stack.pop() for _ in range(n_args)]
      args.reverse()
      check_call_arity(token.name, n_args)
      stack.append(CallNode(token.name, args))

    elif token.type == TokenType.OPERATOR:
      right = _pop(stack, f"right operand for '{OpType(token.op).name}'")
      left = _pop(stack, f"left operand for '{OpType(token.op).name}'")
      stack.append(BinaryOpNode(token.op, left, right))

    else:
      raise _syntax_error(f"Unexpected token in postfix input: {token}")

  if not stack:
    return None
  if len(stack) > 1:
    raise _syntax_error(f"Expression leaves {len(stack)} operands without an operator")
  return stack[0]
