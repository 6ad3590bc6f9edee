"""Demonstration: build one nested expression, render it and test a point."""

from ivalgebra.core import Expression, expression
from ivalgebra.ops import Operator


def sample() -> Expression:
    """([10, 40] ∪ ([100, 200] ∩ [125, 175])) - ([20, 40] ∩ [10, 30])"""
    return expression(
        (
            ((10, 40), Operator.UNION, ((100, 200), Operator.INTERSECTION, (125, 175))),
            Operator.DIFFERENCE,
            ((20, 40), Operator.INTERSECTION, (10, 30)),
        )
    )


def main() -> int:
    expr = sample()
    print(expr)
    print(str(expr.contains(25)).lower())
    return 0
