from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from functools import reduce
from typing import Any, TypeAlias

from typing_extensions import override

from ivalgebra.ops import Operator


class Expression(ABC):
    """A set of integers described by intervals joined with set operators."""

    @abstractmethod
    def _member(self, num: int) -> bool:
        """Membership test without argument checking, used while recursing."""
        pass

    @abstractmethod
    def to_text(self) -> str:
        """Render the expression, wrapping compound operands in parentheses."""
        pass

    @property
    @abstractmethod
    def depth(self) -> int:
        """Number of levels in the tree, counting a lone leaf as 1."""
        pass

    @abstractmethod
    def leaves(self) -> Iterator["Leaf"]:
        """Yield the leaf intervals from left to right."""
        pass

    def contains(self, num: int) -> bool:
        """Return True if ``num`` belongs to the set this expression denotes."""
        if isinstance(num, bool) or not isinstance(num, int):
            raise TypeError(
                f"Membership can only be tested for integers.\n"
                f"Got {type(num).__name__!r}: {num!r}\n"
                f"Example: expr.contains(25)  # or: 25 in expr"
            )
        return self._member(num)

    def __contains__(self, num: int) -> bool:
        return self.contains(num)

    def __str__(self) -> str:
        return self.to_text()

    def __or__(self, other: "ExpressionLike") -> "Node":
        return Node(left=self, operator=Operator.UNION, right=expression(other))

    def __ror__(self, other: "ExpressionLike") -> "Node":
        return Node(left=expression(other), operator=Operator.UNION, right=self)

    def __and__(self, other: "ExpressionLike") -> "Node":
        return Node(left=self, operator=Operator.INTERSECTION, right=expression(other))

    def __rand__(self, other: "ExpressionLike") -> "Node":
        return Node(left=expression(other), operator=Operator.INTERSECTION, right=self)

    def __sub__(self, other: "ExpressionLike") -> "Node":
        return Node(left=self, operator=Operator.DIFFERENCE, right=expression(other))

    def __rsub__(self, other: "ExpressionLike") -> "Node":
        return Node(left=expression(other), operator=Operator.DIFFERENCE, right=self)

    def __xor__(self, other: "ExpressionLike") -> "Node":
        return Node(
            left=self, operator=Operator.SYMMETRIC_DIFFERENCE, right=expression(other)
        )

    def __rxor__(self, other: "ExpressionLike") -> "Node":
        return Node(
            left=expression(other), operator=Operator.SYMMETRIC_DIFFERENCE, right=self
        )


@dataclass(frozen=True, kw_only=True)
class Leaf(Expression):
    """The closed interval ``[lower, upper]``.

    Bounds are kept in the given order. A leaf with ``lower > upper`` is
    allowed and contains nothing.
    """

    lower: int
    upper: int

    def __post_init__(self) -> None:
        for name, bound in (("lower", self.lower), ("upper", self.upper)):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise TypeError(
                    f"Leaf {name} bound must be an int.\n"
                    f"Got {type(bound).__name__!r}: {bound!r}\n"
                    f"Example: leaf(10, 40)"
                )

    @override
    def _member(self, num: int) -> bool:
        return self.lower <= num <= self.upper

    @override
    def to_text(self) -> str:
        return f"[{self.lower}, {self.upper}]"

    @property
    @override
    def depth(self) -> int:
        return 1

    @override
    def leaves(self) -> Iterator["Leaf"]:
        yield self


@dataclass(frozen=True, kw_only=True)
class Node(Expression):
    """Two sub-expressions joined by a set operator."""

    left: Expression
    operator: Operator
    right: Expression

    def __post_init__(self) -> None:
        if not isinstance(self.operator, Operator):
            raise TypeError(
                f"Node operator must be an Operator.\n"
                f"Got {type(self.operator).__name__!r}: {self.operator!r}\n"
                f"Hint: use Operator.UNION, Operator.INTERSECTION, "
                f"Operator.DIFFERENCE or Operator.SYMMETRIC_DIFFERENCE"
            )
        for side, operand in (("left", self.left), ("right", self.right)):
            if not isinstance(operand, Expression):
                raise TypeError(
                    f"Node {side} operand must be an Expression.\n"
                    f"Got {type(operand).__name__!r}: {operand!r}\n"
                    f"Hint: build nodes from literals with node() or expression(),\n"
                    f"      which convert (lower, upper) pairs for you"
                )

    @override
    def _member(self, num: int) -> bool:
        # Both operands are always evaluated. Union with a compound left
        # operand evaluates the right operand first.
        if self.operator is Operator.UNION and isinstance(self.left, Node):
            in_right = self.right._member(num)
            in_left = self.left._member(num)
        else:
            in_left = self.left._member(num)
            in_right = self.right._member(num)
        return self.operator.combine(in_left, in_right)

    @override
    def to_text(self) -> str:
        left = _operand_text(self.left)
        right = _operand_text(self.right)
        return f"{left} {self.operator.symbol} {right}"

    @property
    @override
    def depth(self) -> int:
        return 1 + max(self.left.depth, self.right.depth)

    @override
    def leaves(self) -> Iterator[Leaf]:
        yield from self.left.leaves()
        yield from self.right.leaves()


ExpressionLike: TypeAlias = "Expression | tuple[int, int] | tuple[Any, Operator, Any]"


def _operand_text(operand: Expression) -> str:
    text = operand.to_text()
    if isinstance(operand, Node):
        return f"({text})"
    return text


def leaf(lower: int, upper: int) -> Leaf:
    """Build the closed interval ``[lower, upper]``."""
    return Leaf(lower=lower, upper=upper)


def node(left: ExpressionLike, operator: Operator, right: ExpressionLike) -> Node:
    """Join two operands with ``operator``, converting literal operands first."""
    return Node(left=expression(left), operator=operator, right=expression(right))


def expression(value: ExpressionLike) -> Expression:
    """Convert a literal into an expression tree.

    Accepts an existing expression (returned as is), a ``(lower, upper)`` pair
    or a ``(left, operator, right)`` triple whose operands are themselves any
    of these shapes, nested to any depth.

    Example:
        >>> expr = expression(((10, 40), Operator.UNION, (100, 200)))
        >>> str(expr)
        '[10, 40] ∪ [100, 200]'
    """
    if isinstance(value, Expression):
        return value
    if isinstance(value, tuple):
        if len(value) == 2:
            lower, upper = value
            return leaf(lower, upper)
        if len(value) == 3:
            left, operator, right = value
            return node(left, operator, right)
        raise TypeError(
            f"Cannot build an expression from a tuple of length {len(value)}.\n"
            f"Got: {value!r}\n"
            f"Hint: use (lower, upper) for an interval\n"
            f"      or (left, Operator.UNION, right) to join two operands"
        )
    raise TypeError(
        f"Cannot build an expression from {type(value).__name__!r}.\n"
        f"Got: {value!r}\n"
        f"Hint: use (lower, upper) for an interval\n"
        f"      or (left, Operator.UNION, right) to join two operands"
    )


def union(*operands: ExpressionLike) -> Expression:
    """Compose operands with union semantics (equivalent to chaining `|`).

    The result is left-nested, so its depth grows by one per operand.
    Membership and rendering recurse through that depth, so a few thousand
    operands exceed the interpreter recursion limit.
    """

    if not operands:
        raise ValueError(
            f"union() requires at least one operand.\n"
            f"Example: union((1, 5), (10, 20), (30, 40))"
        )

    def reducer(acc: Expression, nxt: ExpressionLike) -> Expression:
        return acc | nxt

    return reduce(reducer, operands[1:], expression(operands[0]))


def intersection(*operands: ExpressionLike) -> Expression:
    """Compose operands with intersection semantics (equivalent to chaining `&`).

    Left-nested like union(), with the same depth limit.
    """

    if not operands:
        raise ValueError(
            f"intersection() requires at least one operand.\n"
            f"Example: intersection((1, 50), (10, 80))"
        )

    def reducer(acc: Expression, nxt: ExpressionLike) -> Expression:
        return acc & nxt

    return reduce(reducer, operands[1:], expression(operands[0]))
