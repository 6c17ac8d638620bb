import logging
import re
from typing import Iterator, Optional

from .token import SYMBOLS, Token, number

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(r"\d+(\.\d*)?|\.\d+")
WHITESPACE = " \t\r\n"


class Tokenizer:
    """Lazy scanner over an expression string.

    Iteration stops when the input is consumed. It also stops, without
    raising, at the first character that cannot start a token; that character
    and its offset are then available as ``invalid_char`` / ``position`` so the
    parser can report it.
    """

    def __init__(self, expr: str):
        self.expr = expr
        self.position = 0
        self.invalid_char: Optional[str] = None

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        expr, n = self.expr, len(self.expr)
        while self.position < n and expr[self.position] in WHITESPACE:
            self.position += 1
        if self.position >= n or self.invalid_char is not None:
            raise StopIteration

        ch = expr[self.position]
        if ch in SYMBOLS:
            self.position += 1
            return SYMBOLS[ch]

        m = NUMBER_RE.match(expr, self.position)
        if m:
            self.position = m.end()
            return number(float(m.group()))

        logger.debug("tokenizer stopped at %r (offset %d)", ch, self.position)
        self.invalid_char = ch
        raise StopIteration

    @property
    def halted(self) -> bool:
        return self.invalid_char is not None


def tokenize(expr: str) -> list[Token]:
    return list(Tokenizer(expr))
