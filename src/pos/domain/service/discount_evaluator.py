"""Domain service: Discount Rule Evaluation.

Looks a code up, checks that the rule may be used, and works out the
deduction for a given subtotal.  Read-only: it never writes anything,
so it is safe to call for previews as often as needed.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from pos.domain.exceptions import EntityNotFoundError, InactiveDiscountError
from pos.domain.model.discount import DiscountRule, normalize_code
from pos.domain.model.value_objects import Money
from pos.domain.repository.discount_repository import DiscountRepository


@dataclass(frozen=True)
class DiscountEvaluation:
    rule: DiscountRule
    deduction: Money


class DiscountEvaluator:

    def __init__(
        self,
        discount_repo: DiscountRepository,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._discount_repo = discount_repo
        self._logger = logger or structlog.get_logger(__name__)

    def evaluate(self, code: str, subtotal: Money) -> DiscountEvaluation:
        """Validate *code* and compute what it takes off *subtotal*.

        Raises EntityNotFoundError for unknown codes and
        InactiveDiscountError for rules that have been switched off.
        The deduction is clamped to the subtotal, never rejected.
        """
        normalized = normalize_code(code)
        rule = self._discount_repo.find_by_normalized_code(normalized)

        if rule is None:
            self._logger.info("discount_not_found", code=normalized)
            raise EntityNotFoundError(f'Discount code "{normalized}" not found')
        if not rule.is_active:
            self._logger.info("discount_inactive", code=normalized)
            raise InactiveDiscountError(
                f'Discount code "{normalized}" is no longer active'
            )

        deduction = rule.deduction_for(subtotal)
        self._logger.debug(
            "discount_evaluated",
            code=rule.code,
            subtotal=subtotal.amount,
            deduction=deduction.amount,
        )
        return DiscountEvaluation(rule=rule, deduction=deduction)
