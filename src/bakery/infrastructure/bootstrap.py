"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from bakery.infrastructure.config import Settings, load_settings
from bakery.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from bakery.infrastructure.persistence.json_delivery_repository import (
    JsonDeliveryRepository,
)
from bakery.infrastructure.persistence.json_document_store import JsonDocumentStore
from bakery.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from bakery.infrastructure.persistence.json_payment_repository import (
    JsonPaymentRepository,
)
from bakery.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from bakery.infrastructure.persistence.json_recurring_order_repository import (
    JsonRecurringOrderRepository,
)


def settings() -> Settings:
    return load_settings()


def document_store() -> JsonDocumentStore:
    return JsonDocumentStore(settings().data_dir)


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(document_store())


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(document_store())


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(document_store())


def delivery_repository() -> JsonDeliveryRepository:
    return JsonDeliveryRepository(document_store())


def payment_repository() -> JsonPaymentRepository:
    return JsonPaymentRepository(document_store())


def recurring_order_repository() -> JsonRecurringOrderRepository:
    return JsonRecurringOrderRepository(document_store())
