from collections import Counter
from dataclasses import dataclass, field

from .nodes import BinaryNode, Negative, Number


@dataclass
class Analysis:
    operators: Counter = field(default_factory=Counter)
    numbers: int = 0
    depth: int = 0


def analyze(node) -> Analysis:
    an = Analysis()

    def walk(n, level):
        an.depth = max(an.depth, level)
        if isinstance(n, Number):
            an.numbers += 1
        elif isinstance(n, Negative):
            an.operators["neg"] += 1
            walk(n.operand, level + 1)
        elif isinstance(n, BinaryNode):
            an.operators[n.symbol] += 1
            walk(n.left, level + 1)
            walk(n.right, level + 1)

    walk(node, 1)
    return an
