"""
Lexical tokens shared by the tokenizer, the postfix converter and the tree builder.
"""

from enum import IntEnum
from typing import NamedTuple, Optional

from .expression_tree.core.node import format_number
from .expression_tree.core.operators import OpType, OP_SYMBOLS, PRECEDENCE


class TokenType(IntEnum):
    NUMBER = 0
    OPERATOR = 1
    OPEN_PAREN = 2
    CLOSE_PAREN = 3
    COMMA = 4


class Token(NamedTuple):
    type: TokenType
    value: float = 0.0
    op: Optional[OpType] = None
    name: str = ""

    @classmethod
    def number(cls, value: float) -> 'Token':
        return cls(TokenType.NUMBER, value=float(value))

    @classmethod
    def operator(cls, op: OpType) -> 'Token':
        return cls(TokenType.OPERATOR, op=OpType(op))

    @classmethod
    def function(cls, name: str) -> 'Token':
        return cls(TokenType.OPERATOR, op=OpType.FUNCTION, name=name)

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.OPERATOR

    @property
    def is_function(self) -> bool:
        return self.type == TokenType.OPERATOR and self.op == OpType.FUNCTION

    def precedence(self) -> int:
        """Operator precedence; 0 for anything that is not an operator"""
        if self.type != TokenType.OPERATOR:
            return 0
        return PRECEDENCE[self.op]

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER:
            return format_number(self.value)
        if self.is_function:
            return self.name
        if self.type == TokenType.OPERATOR:
            return OP_SYMBOLS[self.op]
        return _PUNCTUATION[self.type]


_PUNCTUATION = {
    TokenType.OPEN_PAREN: "(",
    TokenType.CLOSE_PAREN: ")",
    TokenType.COMMA: ",",
}

OPEN_PAREN = Token(TokenType.OPEN_PAREN)
CLOSE_PAREN = Token(TokenType.CLOSE_PAREN)
COMMA = Token(TokenType.COMMA)
