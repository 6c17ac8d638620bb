from dataclasses import dataclass
from typing import ClassVar, Union


class Node:
    """Base class of every AST node."""


@dataclass(frozen=True)
class Number(Node):
    value: float


@dataclass(frozen=True)
class Negative(Node):
    operand: Node


@dataclass(frozen=True)
class BinaryNode(Node):
    left: Node
    right: Node
    symbol: ClassVar[str] = "?"


@dataclass(frozen=True)
class Add(BinaryNode):
    symbol: ClassVar[str] = "+"


@dataclass(frozen=True)
class Subtract(BinaryNode):
    symbol: ClassVar[str] = "-"


@dataclass(frozen=True)
class Multiply(BinaryNode):
    symbol: ClassVar[str] = "*"


@dataclass(frozen=True)
class Divide(BinaryNode):
    symbol: ClassVar[str] = "/"


@dataclass(frozen=True)
class Power(BinaryNode):
    symbol: ClassVar[str] = "^"


AnyNode = Union[Number, Negative, Add, Subtract, Multiply, Divide, Power]
BINARY_NODES = (Add, Subtract, Multiply, Divide, Power)
