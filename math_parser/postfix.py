"""
Infix to postfix conversion.

Two passes over the token list: implicit multiplications are made explicit,
then a shunting-yard pass reorders the tokens into reverse Polish notation.
Function calls come out as ``<args...> NUMBER(arg_count) FUNCTION`` so the tree
builder can collect a variadic argument list in its authored order.
"""

from typing import List

from .errors import ExpressionSyntaxError
from .expression_tree.core.operators import OpType
from .logging_system import log_debug, log_stage
from .tokens import Token, TokenType

_MULTIPLY = Token.operator(OpType.MUL)


def _is_juxtaposed(left: Token, right: Token) -> bool:
    """True when two adjacent tokens denote multiplied terms, as in 2(3) or (2)sqrt(9)"""
    if left.type == TokenType.NUMBER:
        return right.type == TokenType.OPEN_PAREN or right.is_function
    if left.type == TokenType.CLOSE_PAREN:
        return (right.type in (TokenType.NUMBER, TokenType.OPEN_PAREN)
                or right.is_function)
    return False


def expand_implicit_multiplication(tokens: List[Token]) -> List[Token]:
    expanded: List[Token] = []
    for idx, token in enumerate(tokens):
        if idx > 0 and _is_juxtaposed(tokens[idx - 1], token):
            expanded.append(_MULTIPLY)
        expanded.append(token)
    log_stage("expanded", expanded)
    return expanded


def _syntax_error(message: str) -> ExpressionSyntaxError:
    log_debug(f"Postfix conversion failed: {message}")
    return ExpressionSyntaxError(message)


def _missing_argument_list(token: Token) -> ExpressionSyntaxError:
    return _syntax_error(f"Function '{token.name}' is missing its argument list")


def _pop_operator(stack: List[Token]) -> Token:
    """Pop an operator displaced by precedence; a function only leaves through its ')'"""
    op = stack.pop()
    if op.is_function:
        raise _missing_argument_list(op)
    return op


def to_postfix(tokens: List[Token]) -> List[Token]:
    """
    Shunting-yard conversion of an (expanded) infix token list.

    Operators of equal precedence associate to the left, including '^' and 'E'.
    Raises ExpressionSyntaxError for commas outside a function call, for
    unbalanced parentheses and for a function name not followed by its
    parenthesised argument list.
    """
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type == TokenType.OPEN_PAREN:
            stack.append(token)

        elif token.type == TokenType.OPERATOR:
            while stack and stack[-1].precedence() >= token.precedence():
                output.append(_pop_operator(stack))
            stack.append(token)

        elif token.type == TokenType.CLOSE_PAREN:
            commas = 0
            while True:
                if not stack:
                    raise _syntax_error("Unmatched ')'")
                op = stack.pop()
                if op.type == TokenType.OPEN_PAREN:
                    break
                if op.type == TokenType.COMMA:
                    commas += 1
                elif op.is_function:
                    raise _missing_argument_list(op)
                else:
                    output.append(op)

            if stack and stack[-1].is_function:
                output.append(Token.number(commas + 1))
                output.append(stack.pop())
            elif commas > 0:
                raise _syntax_error("Comma outside of a function call")

        elif token.type == TokenType.COMMA:
            while stack and stack[-1].type not in (TokenType.OPEN_PAREN, TokenType.COMMA):
                output.append(_pop_operator(stack))
            stack.append(token)

    while stack:
        op = stack.pop()
        if op.type == TokenType.OPEN_PAREN:
            raise _syntax_error("Unmatched '('")
        if op.type == TokenType.COMMA:
            raise _syntax_error("Comma outside of a function call")
        if op.is_function:
            raise _missing_argument_list(op)
        output.append(op)

    log_stage("postfix", output)
    return output
