from .errors import InvalidOperator, ParseError, UnableToParse
from .eval import eval_node, evaluate
from .parser import Parser, parse_expression
from .tokenizer import Tokenizer, tokenize

__all__ = [
    "InvalidOperator",
    "ParseError",
    "UnableToParse",
    "eval_node",
    "evaluate",
    "Parser",
    "parse_expression",
    "Tokenizer",
    "tokenize",
]
