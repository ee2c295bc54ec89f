"""Application service: pause or resume a recurring order.

A paused template stays stored but generates nothing until resumed.
"""

from __future__ import annotations

import logging

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.recurring import RecurringOrderTemplate
from bakery.domain.repository.recurring_order_repository import (
    RecurringOrderRepository,
)

logger = logging.getLogger(__name__)


class ToggleRecurringOrderHandler:

    def __init__(self, recurring_repo: RecurringOrderRepository) -> None:
        self._recurring_repo = recurring_repo

    def handle(self, template_id: str, active: bool) -> RecurringOrderTemplate:
        template = self._recurring_repo.get_by_id(template_id)
        if template is None:
            raise EntityNotFoundError(f"Recurring order '{template_id}' not found")

        if active:
            template.resume()
        else:
            template.pause()
        self._recurring_repo.save(template)
        logger.info(
            "Recurring order %s %s", template.id, "resumed" if active else "paused"
        )
        return template
