"""Tests for polynomial evaluation and labels."""

import pytest

from equata.core.polynomial import (
    evaluate,
    degree,
    coefficient_labels,
    equation_template,
)


class TestEvaluate:
    """Tests for Horner evaluation."""

    def test_x_squared_minus_one(self):
        coefs = [1.0, 0.0, -1.0]
        assert evaluate(coefs, 2.0) == 3.0
        assert evaluate(coefs, 1.0) == 0.0
        assert evaluate(coefs, -1.0) == 0.0

    def test_highest_degree_first(self):
        """[2, 3] is 2x + 3, not 3x + 2."""
        assert evaluate([2.0, 3.0], 10.0) == 23.0

    def test_cubic(self):
        # (x - 1)(x + 2)(x - 3)
        coefs = [1.0, -2.0, -5.0, 6.0]
        for root in (1.0, -2.0, 3.0):
            assert evaluate(coefs, root) == pytest.approx(0.0)
        assert evaluate(coefs, 0.0) == 6.0

    def test_empty_is_zero(self):
        assert evaluate([], 0.0) == 0.0
        assert evaluate([], 123.4) == 0.0

    def test_constant(self):
        assert evaluate([7.0], -3.0) == 7.0

    def test_leading_zeros_ignored_numerically(self):
        assert evaluate([0.0, 0.0, 1.0, 0.0, -1.0], 3.0) == evaluate([1.0, 0.0, -1.0], 3.0)

    def test_does_not_mutate_input(self):
        coefs = [1.0, 2.0]
        evaluate(coefs, 5.0)
        assert coefs == [1.0, 2.0]


class TestLabels:
    """Tests for equation labels shown next to the coefficient controls."""

    def test_degree(self):
        assert degree([1.0, 0.0, -1.0]) == 2
        assert degree([0.0, 1.0, 0.0, -1.0]) == 3

    def test_coefficient_labels(self):
        assert coefficient_labels(3) == ["a", "b", "c"]

    def test_too_many_labels_raises(self):
        with pytest.raises(ValueError):
            coefficient_labels(27)

    def test_quadratic_template(self):
        assert equation_template(3) == "ax^2 + bx + c"

    def test_quartic_template(self):
        assert equation_template(5) == "ax^4 + bx^3 + cx^2 + dx + e"

    def test_linear_and_constant_templates(self):
        assert equation_template(2) == "ax + b"
        assert equation_template(1) == "a"
