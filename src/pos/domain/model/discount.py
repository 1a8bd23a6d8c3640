"""DiscountRule aggregate — a reusable discount code.

A rule is looked up by its normalized code and turns a subtotal into
the amount to deduct.  Rules are never hard-deleted while orders
reference them; they are switched off instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money

MAX_CODE_LENGTH = 50


class DiscountType(Enum):
    PERCENTAGE = "PERCENTAGE"
    FIXED_AMOUNT = "FIXED_AMOUNT"


def normalize_code(code: str) -> str:
    """Codes are case-insensitive: trim and upper-case before any lookup."""
    return code.strip().upper()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _check_value(discount_type: DiscountType, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError("Discount value must be a non-negative integer")
    if discount_type is DiscountType.PERCENTAGE and value > 100:
        raise ValidationError(
            f"Percentage discount must be between 0 and 100, got {value}"
        )


@dataclass
class DiscountRule:
    """Aggregate root for discount codes.

    ``value`` is percentage points (0-100) for PERCENTAGE rules and
    minor units for FIXED_AMOUNT rules.
    """

    id: int | None
    code: str
    type: DiscountType
    value: int
    is_active: bool = True
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @staticmethod
    def create(
        code: str,
        discount_type: DiscountType,
        value: int,
        is_active: bool = True,
    ) -> DiscountRule:
        """Create a new rule, enforcing all invariants."""
        normalized = normalize_code(code or "")
        if not normalized:
            raise ValidationError("Discount code is required")
        if len(normalized) > MAX_CODE_LENGTH:
            raise ValidationError(
                f"Discount code may be at most {MAX_CODE_LENGTH} characters"
            )
        _check_value(discount_type, value)
        return DiscountRule(
            id=None,
            code=normalized,
            type=discount_type,
            value=value,
            is_active=is_active,
        )

    def deduction_for(self, subtotal: Money) -> Money:
        """Amount this rule takes off *subtotal*.

        Clamped so a discount can never exceed the subtotal.
        """
        if self.type is DiscountType.PERCENTAGE:
            deduction = subtotal.percentage(self.value)
        else:
            deduction = Money(self.value)
        return min(deduction, subtotal)

    def update_terms(self, discount_type: DiscountType, value: int) -> None:
        """Change what the code is worth.

        Orders already placed keep the amount recorded in their audit row.
        """
        _check_value(discount_type, value)
        self.type = discount_type
        self.value = value
        self.updated_at = _utcnow()

    def set_active(self, active: bool) -> None:
        self.is_active = active
        self.updated_at = _utcnow()
