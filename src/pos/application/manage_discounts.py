"""Application services: discount code administration."""

from __future__ import annotations

import structlog

from pos.domain.exceptions import ConflictError, EntityNotFoundError
from pos.domain.model.discount import DiscountRule, DiscountType
from pos.domain.repository.discount_repository import DiscountRepository


class AddDiscountHandler:

    def __init__(
        self,
        discount_repo: DiscountRepository,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._discount_repo = discount_repo
        self._logger = logger or structlog.get_logger(__name__)

    def handle(
        self,
        code: str,
        discount_type: DiscountType,
        value: int,
        active: bool = True,
    ) -> DiscountRule:
        """Create a new discount code.

        Codes are stored upper-case; ``summer10`` and ``SUMMER10`` are
        the same code and the second one is rejected.
        """
        rule = DiscountRule.create(code, discount_type, value, is_active=active)

        if self._discount_repo.find_by_normalized_code(rule.code) is not None:
            raise ConflictError(f'Discount code "{rule.code}" already exists')

        saved = self._discount_repo.add(rule)
        self._logger.info("discount_created", code=saved.code, discount_id=saved.id)
        return saved


def _get_or_raise(discount_repo: DiscountRepository, discount_id: int) -> DiscountRule:
    rule = discount_repo.get_by_id(discount_id)
    if rule is None:
        raise EntityNotFoundError(f"Discount #{discount_id} not found")
    return rule


class ShowDiscountHandler:

    def __init__(self, discount_repo: DiscountRepository) -> None:
        self._discount_repo = discount_repo

    def handle(self, discount_id: int) -> DiscountRule:
        return _get_or_raise(self._discount_repo, discount_id)


class UpdateDiscountHandler:

    def __init__(
        self,
        discount_repo: DiscountRepository,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._discount_repo = discount_repo
        self._logger = logger or structlog.get_logger(__name__)

    def handle(
        self,
        discount_id: int,
        value: int,
        discount_type: DiscountType | None = None,
    ) -> DiscountRule:
        """Change the value, and optionally the type, of a code.

        The code itself is fixed; existing orders keep the amount they
        were charged.
        """
        rule = _get_or_raise(self._discount_repo, discount_id)
        rule.update_terms(discount_type or rule.type, value)
        self._discount_repo.save(rule)
        self._logger.info(
            "discount_updated", code=rule.code, type=rule.type.value, value=rule.value
        )
        return rule


class SetDiscountActiveHandler:
    """Soft toggle; rules are never hard-deleted while orders reference them."""

    def __init__(self, discount_repo: DiscountRepository) -> None:
        self._discount_repo = discount_repo

    def handle(self, discount_id: int, active: bool) -> DiscountRule:
        rule = _get_or_raise(self._discount_repo, discount_id)
        rule.set_active(active)
        self._discount_repo.save(rule)
        return rule
