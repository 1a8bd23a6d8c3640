"""Abstract repository for DiscountRule aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.discount import DiscountRule


class DiscountRepository(ABC):

    @abstractmethod
    def get_by_id(self, discount_id: int) -> DiscountRule | None:
        """Return a rule by its ID, or None if not found."""

    @abstractmethod
    def find_by_normalized_code(self, code: str) -> DiscountRule | None:
        """Return the rule whose stored (upper-case) code equals *code*."""

    @abstractmethod
    def list_all(self) -> list[DiscountRule]:
        """Return every rule, active or not."""

    @abstractmethod
    def add(self, rule: DiscountRule) -> DiscountRule:
        """Insert a new rule and return it with its assigned ID.

        Raises ConflictError if the code is already taken.
        """

    @abstractmethod
    def save(self, rule: DiscountRule) -> None:
        """Persist changes to an existing rule."""
