import pytest
from parsemath.errors import InvalidOperator, ParseError, UnableToParse
from parsemath.parser import Parser, parse_expression


@pytest.mark.parametrize("src", ["", "   ", "@", "x+1"])
def test_construct_fails_without_tokens(src):
    with pytest.raises(InvalidOperator):
        Parser(src)

@pytest.mark.parametrize("src,exc", [
    ("(2+3", InvalidOperator),
    ("2+3)", InvalidOperator),
    ("2 3", InvalidOperator),
    ("(1)2", InvalidOperator),
    ("2@3", InvalidOperator),
    ("2+", UnableToParse),
    ("*2", UnableToParse),
    ("()", UnableToParse),
    ("2*/3", UnableToParse),
])
def test_malformed(src, exc):
    with pytest.raises(exc):
        parse_expression(src)

def test_messages():
    with pytest.raises(ParseError) as ei:
        parse_expression("(2+3")
    assert str(ei.value) == "Error in evaluating Expected RightParen, got EndOfInput"

    with pytest.raises(ParseError) as ei:
        parse_expression("2+3)")
    assert str(ei.value) == "Error in evaluating Unexpected token RightParen after end of expression"

    with pytest.raises(ParseError) as ei:
        parse_expression("1 + $")
    assert "Invalid character '$' at position 4" in str(ei.value)

def test_invalid_operator_check():
    p = Parser("2 3")
    left = p.parse_number()
    with pytest.raises(InvalidOperator, match="valid operator Number"):
        p.convert_token_to_node(left)

def test_nesting_guard():
    src = "(" * 50 + "1" + ")" * 50
    with pytest.raises(UnableToParse, match="nested too deeply"):
        parse_expression(src, max_depth=20)

def test_long_unary_chain_guarded():
    with pytest.raises(UnableToParse):
        parse_expression("-" * 5000 + "1")

def test_wrap_is_invalid_operator():
    err = ParseError.wrap(RecursionError("too deep"))
    assert isinstance(err, InvalidOperator)
    assert str(err).startswith("Error in evaluating internal error")

def test_zero_depth_limit_is_honoured():
    with pytest.raises(UnableToParse, match=r"limit 0"):
        Parser("1", max_depth=0).parse()

def test_long_flat_chain_counts_towards_depth():
    assert parse_expression("1+2+3", max_depth=4) is not None
    with pytest.raises(UnableToParse, match="nested too deeply"):
        parse_expression("1+2+3+4+5", max_depth=4)
