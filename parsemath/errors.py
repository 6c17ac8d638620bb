class ParseError(Exception):
    """Base for everything the parser raises. ``str()`` is user-facing."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"Error in evaluating {self.message}"

    @classmethod
    def wrap(cls, exc: BaseException) -> "ParseError":
        # generic conversion for lower-level failures
        return InvalidOperator(f"internal error ({type(exc).__name__}: {exc})")


class UnableToParse(ParseError):
    """An operand was expected but could not be formed."""


class InvalidOperator(ParseError):
    """Unexpected or mismatched token, invalid character, or empty input."""
