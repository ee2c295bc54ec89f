"""Application service: how many recurring orders run on each weekday (query)."""

from __future__ import annotations

from bakery.domain.repository.recurring_order_repository import (
    RecurringOrderRepository,
)
from bakery.domain.service.recurring import weekly_schedule


class WeeklyScheduleHandler:

    def __init__(self, recurring_repo: RecurringOrderRepository) -> None:
        self._recurring_repo = recurring_repo

    def handle(self) -> dict[int, int]:
        return weekly_schedule(self._recurring_repo.list_all())
