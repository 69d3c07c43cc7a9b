"""
Error taxonomy for expression parsing.

Every structural problem with an input string is reported as a ParseError
subclass before evaluation starts. Numeric edge cases (division by zero,
sqrt of a negative number, ...) are not errors; they evaluate to inf/nan.
"""


class ParseError(ValueError):
    """Base class for all structural errors raised while parsing"""


class MalformedNumberError(ParseError):
    """A numeric lexeme could not be converted to a float"""

    def __init__(self, lexeme: str):
        self.lexeme = lexeme
        super().__init__(f"Malformed number: {lexeme!r}")


class ExpressionSyntaxError(ParseError):
    """Commas, parentheses or operands do not form a valid expression"""


class UnknownFunctionError(ParseError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown function: {name}")


class ArityMismatchError(ParseError):
    """A fixed-arity function was called with the wrong number of arguments"""

    def __init__(self, name: str, expected: int, got: int, variadic: bool = False):
        self.name = name
        self.expected = expected
        self.got = got
        self.variadic = variadic
        bound = f"at least {expected}" if variadic else f"{expected}"
        super().__init__(
            f"Function '{name}' expects {bound} argument{'s' if expected != 1 else ''}, got {got}"
        )


def describe_error(error: BaseException) -> str:
    """Short, single-line description used in log messages"""
    return f"{type(error).__name__}: {error}"
