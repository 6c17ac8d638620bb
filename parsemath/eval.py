import logging
from typing import Callable, Dict, Optional

import numpy as np

from .nodes import Add, Divide, Multiply, Negative, Node, Number, Power, Subtract
from .errors import ParseError
from .parser import parse_expression

logger = logging.getLogger(__name__)

OPS: Dict[type, Callable] = {
    Add: lambda a, b: a + b,
    Subtract: lambda a, b: a - b,
    Multiply: lambda a, b: a * b,
    Divide: lambda a, b: a / b,
    Power: lambda a, b: np.power(a, b),
}

UNARY_OPS: Dict[type, Callable] = {
    Negative: lambda a: -a,
}


def eval_node(node: Node, ops: Optional[Dict[type, Callable]] = None,
              unary_ops: Optional[Dict[type, Callable]] = None) -> float:
    """Depth-first tree walk; float64 semantics (1/0 -> inf, 0/0 -> nan)."""
    ops = OPS if ops is None else ops
    unary_ops = UNARY_OPS if unary_ops is None else unary_ops

    def walk(n):
        if isinstance(n, Number):
            return np.float64(n.value)
        if type(n) in unary_ops:
            return unary_ops[type(n)](walk(n.operand))
        if type(n) in ops:
            a = walk(n.left)
            b = walk(n.right)
            return ops[type(n)](a, b)
        raise TypeError(f"Unknown node {type(n).__name__}")

    with np.errstate(all="ignore"):
        out = float(walk(node))
    return out


def evaluate(expr: str, max_depth: Optional[int] = None) -> float:
    ast = parse_expression(expr, max_depth=max_depth)
    try:
        out = eval_node(ast)
    except RecursionError as e:
        raise ParseError.wrap(e) from e
    logger.debug("evaluated %r = %r", expr, out)
    return out
