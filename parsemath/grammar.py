# Grammar-driven reference parser. Produces the same node types as
# parser.Parser and is used to cross-check it. An implicit product swallows
# any ^ that follows it, so it is kept out of the base of a power.
from lark import Lark, Transformer, v_args
from lark.exceptions import LarkError

from .errors import UnableToParse
from .nodes import Add, Divide, Multiply, Negative, Number, Power, Subtract

GRAMMAR = r"""
?start: sum
?sum: product
    | sum "+" product      -> add
    | sum "-" product      -> sub
?product: power
    | product "*" power    -> mul
    | product "/" power    -> div
?power: base
    | base "^" power       -> pow
    | closed
?base: NUMBER              -> number
    | group
    | "-" base             -> neg
?closed: implicit_mul
    | "-" closed           -> neg
?group: "(" sum ")"
implicit_mul: "(" sum ")" paren_power
?paren_power: group
    | implicit_mul
    | group "^" power      -> pow
NUMBER: /\d+(\.\d*)?|\.\d+/
%ignore /[ \t\r\n]+/
"""

parser = Lark(GRAMMAR, start="start", parser="lalr")


@v_args(inline=True)
class ASTBuilder(Transformer):
    def number(self, tok): return Number(float(tok))
    def neg(self, operand): return Negative(operand)
    def add(self, a, b): return Add(a, b)
    def sub(self, a, b): return Subtract(a, b)
    def mul(self, a, b): return Multiply(a, b)
    def div(self, a, b): return Divide(a, b)
    def pow(self, a, b): return Power(a, b)
    def implicit_mul(self, a, b): return Multiply(a, b)


def parse_reference(src: str):
    try:
        tree = parser.parse(src)
    except LarkError as e:
        lines = str(e).strip().splitlines()
        raise UnableToParse(lines[0] if lines else type(e).__name__) from e
    return ASTBuilder().transform(tree)
