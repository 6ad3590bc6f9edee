from .core import (
    Expression,
    ExpressionLike,
    Leaf,
    Node,
    expression,
    intersection,
    leaf,
    node,
    union,
)
from .ops import Operator

__all__ = [
    "Expression",
    "ExpressionLike",
    "Leaf",
    "Node",
    "Operator",
    "expression",
    "leaf",
    "node",
    "union",
    "intersection",
]
