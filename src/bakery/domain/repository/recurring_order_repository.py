"""Abstract repository for RecurringOrderTemplate aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bakery.domain.model.recurring import RecurringOrderTemplate


class RecurringOrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, template_id: str) -> RecurringOrderTemplate | None:
        """Return a template by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[RecurringOrderTemplate]:
        """Every template, active or not."""

    @abstractmethod
    def save(self, template: RecurringOrderTemplate) -> None:
        """Persist a new or updated template."""

    def list_active(self) -> list[RecurringOrderTemplate]:
        return [t for t in self.list_all() if t.is_active]
