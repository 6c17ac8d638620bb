# parsemath/ast_utils.py
from typing import Any, Dict

import numpy as np

from .nodes import BinaryNode, Negative, Number


def _fmt_number(value: float) -> str:
    text = repr(value)
    if "e" in text:
        # no exponent syntax in the tokenizer
        text = np.format_float_positional(value)
    return text


def ast_to_dict(node) -> Dict[str, Any]:
    if isinstance(node, Number):
        return {"type": "Number", "value": node.value}
    if isinstance(node, Negative):
        return {"type": "Negative", "operand": ast_to_dict(node.operand)}
    if isinstance(node, BinaryNode):
        return {
            "type": type(node).__name__,
            "op": node.symbol,
            "left": ast_to_dict(node.left),
            "right": ast_to_dict(node.right),
        }
    return {"type": "Unknown", "repr": repr(node)}


def ast_to_pretty(node, indent: str = "  ") -> str:
    lines = []
    def rec(n, depth=0, label=None):
        pad = indent * depth
        pre = f"{label}: " if label else ""
        if isinstance(n, Number):
            lines.append(f"{pad}{pre}Number({n.value})")
        elif isinstance(n, Negative):
            lines.append(f"{pad}{pre}Negative")
            rec(n.operand, depth+1, "operand")
        elif isinstance(n, BinaryNode):
            lines.append(f"{pad}{pre}{type(n).__name__}({n.symbol})")
            rec(n.left, depth+1, "left")
            rec(n.right, depth+1, "right")
        else:
            lines.append(f"{pad}{pre}{type(n).__name__}")
    rec(node)
    return "\n".join(lines)


def ast_to_infix(node) -> str:
    """Fully parenthesized infix text; parses back to an equal tree."""
    if isinstance(node, Number):
        return _fmt_number(node.value)
    if isinstance(node, Negative):
        return f"-{ast_to_infix(node.operand)}"
    if isinstance(node, BinaryNode):
        return f"({ast_to_infix(node.left)} {node.symbol} {ast_to_infix(node.right)})"
    raise TypeError(f"Unknown node {type(node).__name__}")
