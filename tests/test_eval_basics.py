import math

import pytest
from parsemath.errors import ParseError
from parsemath.eval import OPS, eval_node, evaluate
from parsemath.nodes import Add, Negative, Number, Power, Subtract
from parsemath.parser import parse_expression


@pytest.mark.parametrize("src,value", [
    ("2+3*4", 14.0),
    ("(2+3)*4", 20.0),
    ("10-4-3", 3.0),
    ("8/4/2", 1.0),
    ("2^3^2", 512.0),
    ("-2^2", 4.0),
    ("2^-1", 0.5),
    ("(2)(3)", 6.0),
    ("(1+1)(2+2)", 8.0),
    ("-(2)(3)", -6.0),
    ("1.5*4", 6.0),
    ("2 * (3 + 4) - 5 / (1 + 1)", 11.5),
    ("-3--3", 0.0),
])
def test_arithmetic(src, value):
    assert evaluate(src) == pytest.approx(value)

def test_ieee_semantics():
    assert evaluate("1/0") == math.inf
    assert evaluate("-1/0") == -math.inf
    assert math.isnan(evaluate("0/0"))
    assert math.isnan(evaluate("(-8)^(1/3)"))

def test_result_is_python_float():
    assert type(evaluate("1+1")) is float

def test_custom_operator_table():
    ops = dict(OPS)
    ops[Add] = lambda a, b: a * b
    assert eval_node(parse_expression("3+4"), ops=ops) == 12.0

def test_eval_node_on_built_tree():
    tree = Subtract(Power(Number(2.0), Number(10.0)), Negative(Number(24.0)))
    assert eval_node(tree) == 1048.0

def test_unknown_node():
    class Bogus: pass
    with pytest.raises(TypeError):
        eval_node(Bogus())

def test_very_long_chain_is_reported():
    src = "+".join(["1"] * 5000)
    with pytest.raises(ParseError):
        evaluate(src)
