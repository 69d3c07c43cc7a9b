"""Math Parser Package

Evaluates flat arithmetic expressions such as ``"5+2sqrt(9 + rad(49,2))"``
with implicit multiplication, variadic functions and a degrees/radians switch
for trigonometry.
"""

# expression_tree must be imported before the tokenizer modules that depend on it
from .expression_tree import (
  Expression, Node, LiteralNode, BinaryOpNode, CallNode,
  OpType, FunctionSpec, FUNCTION_REGISTRY, available_functions,
  ExpressionValidator
)
from .config import AngleUnit, EvaluationConfig, DEFAULT_CONFIG
from .errors import (
  ParseError, MalformedNumberError, ExpressionSyntaxError,
  UnknownFunctionError, ArityMismatchError
)
from .tokens import Token, TokenType
from .parser import scan, parse, evaluate, calculate
from .postfix import expand_implicit_multiplication, to_postfix
from .expression_tree.builder import build_tree
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "LiteralNode", "BinaryOpNode", "CallNode",
  "OpType", "FunctionSpec", "FUNCTION_REGISTRY", "available_functions",
  "ExpressionValidator",
  "AngleUnit", "EvaluationConfig", "DEFAULT_CONFIG",
  "ParseError", "MalformedNumberError", "ExpressionSyntaxError",
  "UnknownFunctionError", "ArityMismatchError",
  "Token", "TokenType",
  "scan", "parse", "evaluate", "calculate",
  "expand_implicit_multiplication", "to_postfix", "build_tree",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
