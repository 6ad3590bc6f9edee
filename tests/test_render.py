from ivalgebra import Operator, expression, leaf, node
from ivalgebra.demo import main, sample


def test_leaf_text() -> None:
    assert leaf(10, 40).to_text() == "[10, 40]"
    assert str(leaf(-7, 3)) == "[-7, 3]"


def test_flat_node_is_not_parenthesized() -> None:
    expr = node((1, 2), Operator.SYMMETRIC_DIFFERENCE, (3, 4))

    assert expr.to_text() == "[1, 2] ⊖ [3, 4]"


def test_compound_operands_are_parenthesized() -> None:
    inner = leaf(1, 2) & (3, 4)

    assert node(inner, Operator.UNION, (5, 6)).to_text() == "([1, 2] ∩ [3, 4]) ∪ [5, 6]"
    assert node((5, 6), Operator.UNION, inner).to_text() == "[5, 6] ∪ ([1, 2] ∩ [3, 4])"


def test_deep_nesting_wraps_each_level_once() -> None:
    expr = ((leaf(1, 2) | (3, 4)) - (5, 6)) ^ (7, 8)

    assert expr.to_text() == "(([1, 2] ∪ [3, 4]) - [5, 6]) ⊖ [7, 8]"


def test_rendering_is_idempotent() -> None:
    expr = sample()

    assert expr.to_text() == expr.to_text()
    assert str(expr) == expr.to_text()


class TestSampleExpression:
    """The nested expression shown by the demonstration entry point."""

    def test_text(self):
        assert sample().to_text() == (
            "([10, 40] ∪ ([100, 200] ∩ [125, 175])) - ([20, 40] ∩ [10, 30])"
        )

    def test_membership(self):
        expr = sample()

        assert not expr.contains(25)
        assert expr.contains(15)
        assert expr.contains(35)
        assert expr.contains(150)
        assert not expr.contains(110)
        assert not expr.contains(300)

    def test_matches_operator_built_tree(self):
        built = (leaf(10, 40) | (leaf(100, 200) & (125, 175))) - (
            leaf(20, 40) & (10, 30)
        )

        assert built == sample()

    def test_literal_form(self):
        expr = expression(
            (
                ((10, 40), Operator.UNION, ((100, 200), Operator.INTERSECTION, (125, 175))),
                Operator.DIFFERENCE,
                ((20, 40), Operator.INTERSECTION, (10, 30)),
            )
        )

        assert expr == sample()

    def test_main_prints_text_and_membership(self, capsys):
        assert main() == 0

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "([10, 40] ∪ ([100, 200] ∩ [125, 175])) - ([20, 40] ∩ [10, 30])",
            "false",
        ]
