"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories, no file I/O. The clock is pinned to
Monday 2024-06-10 10:00 so date checks are deterministic.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from bakery.application.create_order import CreateOrderHandler
from bakery.application.dto import LineSpec
from bakery.domain.exceptions import (
    DuplicateOrderError,
    EntityNotFoundError,
    ValidationError,
)
from bakery.domain.model.customer import CustomProduct, Customer
from bakery.domain.model.product import Product
from tests.fakes import FakeCustomerRepository, FakeOrderRepository, FakeProductRepository

NOW = datetime(2024, 6, 10, 10, 0)
WEDNESDAY = date(2024, 6, 12)


def _setup(now: datetime = NOW):
    order_repo = FakeOrderRepository()
    customer_repo = FakeCustomerRepository(
        [
            Customer(
                id="c1",
                name="Alice",
                custom_products=[CustomProduct("Rye Special", "loaves")],
            )
        ]
    )
    product_repo = FakeProductRepository(
        [
            Product(id="p1", name="Sourdough", default_unit="kg"),
            Product(id="p2", name="Baguette", default_unit="pieces"),
        ]
    )
    handler = CreateOrderHandler(order_repo, customer_repo, product_repo, clock=lambda: now)
    return handler, order_repo


class TestCreateOrderHappyPath:

    def test_creates_pending_order(self):
        handler, _ = _setup()
        dto = handler.handle("c1", WEDNESDAY, [LineSpec("Sourdough", "5", "kg")])

        assert dto.status == "pending"
        assert dto.customer_name == "Alice"
        assert dto.delivery_date == "2024-06-12"
        assert dto.can_modify
        assert [(l.product, l.ordered, l.delivered, l.progress) for l in dto.lines] == [
            ("Sourdough", "5", "0", 0.0)
        ]

    def test_persists_order(self):
        handler, order_repo = _setup()
        dto = handler.handle("c1", WEDNESDAY, [LineSpec("Sourdough", "2.5")], notes="  ring twice ")

        saved = order_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.lines[0].quantity == Decimal("2.5")
        assert saved.notes == "ring twice"
        assert saved.created_at == NOW

    def test_unit_defaults_from_catalog(self):
        handler, order_repo = _setup()
        dto = handler.handle("c1", WEDNESDAY, [LineSpec("Baguette", "3")])
        assert order_repo.get_by_id(dto.id).lines[0].unit == "pieces"

    def test_catalog_lookup_ignores_case(self):
        handler, order_repo = _setup()
        dto = handler.handle("c1", WEDNESDAY, [LineSpec("baguette", "3")])
        assert order_repo.get_by_id(dto.id).lines[0].unit == "pieces"

    def test_unit_defaults_from_customer_products(self):
        handler, order_repo = _setup()
        dto = handler.handle("c1", WEDNESDAY, [LineSpec("Rye Special", "2")])
        assert order_repo.get_by_id(dto.id).lines[0].unit == "loaves"

    def test_unknown_product_with_explicit_unit_is_accepted(self):
        handler, _ = _setup()
        dto = handler.handle("c1", WEDNESDAY, [LineSpec("Panettone", "1", "pieces")])
        assert dto.lines[0].product == "Panettone"


class TestCreateOrderValidation:

    def test_unknown_customer(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle("nobody", WEDNESDAY, [LineSpec("Sourdough", "1")])

    def test_empty_order(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="at least one line"):
            handler.handle("c1", WEDNESDAY, [])

    def test_zero_quantity(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="positive"):
            handler.handle("c1", WEDNESDAY, [LineSpec("Sourdough", "0")])

    def test_unknown_product_without_unit(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="No unit"):
            handler.handle("c1", WEDNESDAY, [LineSpec("Panettone", "1")])

    def test_second_order_same_day_rejected(self):
        handler, order_repo = _setup()
        handler.handle("c1", WEDNESDAY, [LineSpec("Sourdough", "1")])
        with pytest.raises(DuplicateOrderError, match="already has an order"):
            handler.handle("c1", WEDNESDAY, [LineSpec("Baguette", "1")])
        assert len(order_repo.all()) == 1

    def test_after_cutoff_still_accepted_but_locked(self):
        handler, order_repo = _setup(now=datetime(2024, 6, 11, 21, 0))
        dto = handler.handle("c1", WEDNESDAY, [LineSpec("Sourdough", "1")])
        assert len(order_repo.all()) == 1
        assert not dto.can_modify

    def test_order_for_today_is_accepted(self):
        handler, order_repo = _setup(now=datetime(2024, 6, 10, 8, 0))
        dto = handler.handle("c1", date(2024, 6, 10), [LineSpec("Sourdough", "1")])
        assert dto.delivery_date == "2024-06-10"
        assert order_repo.get_by_id(dto.id) is not None

    def test_past_date_rejected(self):
        handler, order_repo = _setup()
        with pytest.raises(ValidationError, match="past date"):
            handler.handle("c1", date(2024, 6, 9), [LineSpec("Sourdough", "1")])
        assert order_repo.all() == []

    def test_just_before_cutoff_accepted(self):
        handler, _ = _setup(now=datetime(2024, 6, 11, 20, 59))
        dto = handler.handle("c1", WEDNESDAY, [LineSpec("Sourdough", "1")])
        assert dto.can_modify

    def test_catalog_is_read_once_per_order(self):
        product_repo = FakeProductRepository([Product(id="p1", name="Sourdough", default_unit="kg")])
        handler = CreateOrderHandler(
            FakeOrderRepository(),
            FakeCustomerRepository([Customer(id="c1", name="Alice")]),
            product_repo,
            clock=lambda: NOW,
        )
        handler.handle(
            "c1",
            WEDNESDAY,
            [LineSpec("Sourdough", "1"), LineSpec("sourdough", "2", "loaves"), LineSpec("Rye", "1", "kg")],
        )
        assert product_repo.reads == 1
