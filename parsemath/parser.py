"""Precedence-climbing parser: turns the token stream into an AST."""
import logging
from typing import Optional

from . import nodes
from .errors import InvalidOperator, ParseError, UnableToParse
from .nodes import Node
from .token import END_OF_INPUT, RIGHT_PAREN, OperatorPrecedence, Token, TokenKind
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256

_BINARY = {
    TokenKind.ADD: nodes.Add,
    TokenKind.SUBTRACT: nodes.Subtract,
    TokenKind.MULTIPLY: nodes.Multiply,
    TokenKind.DIVIDE: nodes.Divide,
    TokenKind.POWER: nodes.Power,
}
_RIGHT_ASSOC = {TokenKind.POWER}


class Parser:
    def __init__(self, expr: str, max_depth: Optional[int] = None):
        self.tokenizer = Tokenizer(expr)
        self.max_depth = DEFAULT_MAX_DEPTH if max_depth is None else max_depth
        self._depth = 0
        first = next(self.tokenizer, None)
        if first is None:
            if self.tokenizer.halted:
                raise InvalidOperator(self._invalid_char_message())
            raise InvalidOperator("empty expression")
        self.current_token: Token = first
        logger.debug("primed parser with %s", first)

    def parse(self) -> Node:
        """Parse the whole expression and return the root node."""
        ast = self.generate_ast(OperatorPrecedence.NONE)
        if self.current_token != END_OF_INPUT:
            raise InvalidOperator(f"Unexpected token {self.current_token} after end of expression")
        logger.debug("parsed %r -> %r", self.tokenizer.expr, ast)
        return ast

    # --- core ---------------------------------------------------------------

    def generate_ast(self, min_prec: OperatorPrecedence) -> Node:
        self._descend()
        grown = 0
        try:
            left = self.parse_number()
            while (self.current_token.precedence() > min_prec
                   and self.current_token != END_OF_INPUT):
                # each operator puts left one level deeper in the tree
                grown += 1
                self._descend()
                left = self.convert_token_to_node(left)
            return left
        finally:
            self._depth -= 1 + grown

    def _descend(self) -> None:
        self._depth += 1
        if self._depth > self.max_depth:
            raise UnableToParse(f"expression nested too deeply (limit {self.max_depth})")

    def parse_number(self) -> Node:
        """Primary operand: number, unary minus or parenthesized group."""
        token = self.current_token
        if token.kind is TokenKind.SUBTRACT:
            self.next_token()
            operand = self.generate_ast(OperatorPrecedence.UNARY_NEGATIVE)
            return nodes.Negative(operand)
        if token.kind is TokenKind.NUMBER:
            self.next_token()
            return nodes.Number(token.value)
        if token.kind is TokenKind.LEFT_PAREN:
            self.next_token()
            expr = self.generate_ast(OperatorPrecedence.NONE)
            self.check_paren(RIGHT_PAREN)
            # (a)(b) means (a)*(b)
            if self.current_token.kind is TokenKind.LEFT_PAREN:
                right = self.generate_ast(OperatorPrecedence.MUL_DIV)
                return nodes.Multiply(expr, right)
            return expr
        raise UnableToParse(f"Unable to parse, expected a number but got {token}")

    def convert_token_to_node(self, left: Node) -> Node:
        token = self.current_token
        node_cls = _BINARY.get(token.kind)
        if node_cls is None:
            raise InvalidOperator(f"Please enter valid operator {token}")
        self.next_token()
        prec = token.precedence()
        if token.kind in _RIGHT_ASSOC:
            # a bound one below lets another ^ nest to the right
            prec = OperatorPrecedence(prec - 1)
        right = self.generate_ast(prec)
        return node_cls(left, right)

    def check_paren(self, expected: Token) -> None:
        if self.current_token != expected:
            raise InvalidOperator(f"Expected {expected}, got {self.current_token}")
        self.next_token()

    def next_token(self) -> None:
        token = next(self.tokenizer, None)
        if token is None:
            if self.tokenizer.halted:
                raise InvalidOperator(self._invalid_char_message())
            token = END_OF_INPUT
        self.current_token = token

    def _invalid_char_message(self) -> str:
        return f"Invalid character {self.tokenizer.invalid_char!r} at position {self.tokenizer.position}"


def parse_expression(expr: str, max_depth: Optional[int] = None) -> Node:
    try:
        return Parser(expr, max_depth=max_depth).parse()
    except RecursionError as e:
        raise ParseError.wrap(e) from e
