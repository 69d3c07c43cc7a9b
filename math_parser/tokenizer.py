"""
Tokenizer

Scans an expression string left to right into a flat list of tokens. Numbers
and function names span several characters, so they are accumulated in
buffers; every other lexeme is exactly one character.
"""

from typing import List

from .errors import MalformedNumberError
from .expression_tree.core.operators import BINARY_OP_MAP
from .logging_system import log_stage
from .tokens import Token, TokenType, OPEN_PAREN, CLOSE_PAREN, COMMA

_NUMBER_CHARS = frozenset("0123456789.")
_FUNCTION_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz")

_SINGLE_CHAR_TOKENS = {symbol: Token.operator(op_type) for symbol, op_type in BINARY_OP_MAP.items()}
_SINGLE_CHAR_TOKENS.update({"(": OPEN_PAREN, ")": CLOSE_PAREN, ",": COMMA})

# A '-' following one of these starts a negative literal instead of a subtraction
_NEGATION_CONTEXT = (TokenType.OPEN_PAREN, TokenType.OPERATOR, TokenType.COMMA)


def _number_token(lexeme: str) -> Token:
    if lexeme.count(".") > 1:
        raise MalformedNumberError(lexeme)
    try:
        return Token.number(float(lexeme))
    except ValueError:
        raise MalformedNumberError(lexeme) from None


def _starts_negative_literal(tokens: List[Token]) -> bool:
    return not tokens or tokens[-1].type in _NEGATION_CONTEXT


def scan(expression: str) -> List[Token]:
    """
    Convert ``expression`` into tokens.

    Whitespace and unrecognised characters are skipped. Raises
    MalformedNumberError when a numeric lexeme does not parse (``"1.2.3"``,
    or a lone ``"-"`` as in ``"-(3)"``).
    """
    tokens: List[Token] = []
    number = ""
    function = ""

    for char in expression or "":
        if char in _NUMBER_CHARS:
            if function:
                tokens.append(Token.function(function))
                function = ""
            number += char
            continue

        if char in _FUNCTION_CHARS:
            if number:
                tokens.append(_number_token(number))
                number = ""
            function += char
            continue

        if number:
            tokens.append(_number_token(number))
            number = ""
        if function:
            tokens.append(Token.function(function))
            function = ""

        if char == "-":
            if _starts_negative_literal(tokens):
                number = "-"
            else:
                tokens.append(_SINGLE_CHAR_TOKENS[char])
        elif char in _SINGLE_CHAR_TOKENS:
            tokens.append(_SINGLE_CHAR_TOKENS[char])

    # Tie up loose ends
    if number:
        tokens.append(_number_token(number))
    if function:
        tokens.append(Token.function(function))

    log_stage("tokens", tokens)
    return tokens
