import operator as op
from enum import Enum
from typing import Callable


class Operator(Enum):
    """Binary set operators that join two interval expressions."""

    UNION = ("∪", op.or_)
    INTERSECTION = ("∩", op.and_)
    DIFFERENCE = ("-", lambda left, right: left and not right)
    SYMMETRIC_DIFFERENCE = ("⊖", op.xor)

    def __init__(self, symbol: str, rule: Callable[[bool, bool], bool]):
        self.symbol: str = symbol
        self._rule: Callable[[bool, bool], bool] = rule

    def combine(self, in_left: bool, in_right: bool) -> bool:
        """Combine the memberships of both operands under this operator."""
        return bool(self._rule(in_left, in_right))

    def __str__(self) -> str:
        return self.symbol
