from enum import Enum, IntEnum
from typing import NamedTuple, Optional


class OperatorPrecedence(IntEnum):
    """Binding strength, lowest to highest."""
    NONE = 0
    ADD_SUB = 1
    MUL_DIV = 2
    POWER = 3
    UNARY_NEGATIVE = 4


class TokenKind(Enum):
    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"
    POWER = "Power"
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    NUMBER = "Number"
    END_OF_INPUT = "EndOfInput"


_PRECEDENCE = {
    TokenKind.ADD: OperatorPrecedence.ADD_SUB,
    TokenKind.SUBTRACT: OperatorPrecedence.ADD_SUB,
    TokenKind.MULTIPLY: OperatorPrecedence.MUL_DIV,
    TokenKind.DIVIDE: OperatorPrecedence.MUL_DIV,
    TokenKind.POWER: OperatorPrecedence.POWER,
}


class Token(NamedTuple):
    kind: TokenKind
    value: Optional[float] = None   # only set for NUMBER

    def precedence(self) -> OperatorPrecedence:
        return _PRECEDENCE.get(self.kind, OperatorPrecedence.NONE)

    def __str__(self):
        if self.kind is TokenKind.NUMBER:
            return f"Number({self.value!r})"
        return self.kind.value

    __repr__ = __str__


def number(value: float) -> Token:
    return Token(TokenKind.NUMBER, float(value))


ADD = Token(TokenKind.ADD)
SUBTRACT = Token(TokenKind.SUBTRACT)
MULTIPLY = Token(TokenKind.MULTIPLY)
DIVIDE = Token(TokenKind.DIVIDE)
POWER = Token(TokenKind.POWER)
LEFT_PAREN = Token(TokenKind.LEFT_PAREN)
RIGHT_PAREN = Token(TokenKind.RIGHT_PAREN)
END_OF_INPUT = Token(TokenKind.END_OF_INPUT)

SYMBOLS = {
    "+": ADD,
    "-": SUBTRACT,
    "*": MULTIPLY,
    "/": DIVIDE,
    "^": POWER,
    "(": LEFT_PAREN,
    ")": RIGHT_PAREN,
}
