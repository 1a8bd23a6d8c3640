"""Unit tests for the DiscountEvaluator domain service."""

import pytest

from pos.domain.exceptions import EntityNotFoundError, InactiveDiscountError
from pos.domain.model.discount import DiscountRule, DiscountType
from pos.domain.model.value_objects import Money
from pos.domain.service.discount_evaluator import DiscountEvaluator
from tests.fakes import FakeDiscountRepository


def _setup() -> DiscountEvaluator:
    repo = FakeDiscountRepository([
        DiscountRule.create("SUMMER10", DiscountType.PERCENTAGE, 10),
        DiscountRule.create("WELCOME50", DiscountType.FIXED_AMOUNT, 5000),
        DiscountRule.create("EXPIRED", DiscountType.FIXED_AMOUNT, 10000, is_active=False),
    ])
    return DiscountEvaluator(repo)


class TestEvaluate:

    def test_percentage_rule(self):
        result = _setup().evaluate("SUMMER10", Money(10000))
        assert result.rule.code == "SUMMER10"
        assert result.deduction == Money(1000)

    def test_fixed_rule_clamped(self):
        result = _setup().evaluate("WELCOME50", Money(3000))
        assert result.deduction == Money(3000)

    def test_code_is_case_insensitive_and_trimmed(self):
        result = _setup().evaluate("  summer10 ", Money(10000))
        assert result.rule.code == "SUMMER10"

    def test_unknown_code(self):
        with pytest.raises(EntityNotFoundError, match='"NOPE" not found'):
            _setup().evaluate("nope", Money(10000))

    def test_inactive_code(self):
        with pytest.raises(InactiveDiscountError, match="no longer active"):
            _setup().evaluate("EXPIRED", Money(10000))
