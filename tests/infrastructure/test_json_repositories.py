"""Round trips through the JSON repositories."""

import time
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from bakery.domain.model.customer import CustomProduct, Customer
from bakery.domain.model.delivery import Delivery
from bakery.domain.model.lines import DeliveryLine, OrderLine
from bakery.domain.model.order import Order, OrderStatus
from bakery.domain.model.payment import Payment, PaymentMethod
from bakery.domain.model.product import Product
from bakery.domain.model.recurring import RecurringOrderTemplate
from bakery.domain.model.value_objects import Money
from bakery.infrastructure.persistence.json_customer_repository import JsonCustomerRepository
from bakery.infrastructure.persistence.json_delivery_repository import JsonDeliveryRepository
from bakery.infrastructure.persistence.json_document_store import JsonDocumentStore
from bakery.infrastructure.persistence.json_order_repository import JsonOrderRepository
from bakery.infrastructure.persistence.json_payment_repository import JsonPaymentRepository
from bakery.infrastructure.persistence.json_product_repository import JsonProductRepository
from bakery.infrastructure.persistence.json_recurring_order_repository import (
    JsonRecurringOrderRepository,
)


@pytest.fixture
def store(tmp_path):
    return JsonDocumentStore(tmp_path)


@pytest.fixture
def rome_time(monkeypatch):
    monkeypatch.setenv("TZ", "Europe/Rome")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


# ── Orders ───────────────────────────────────────────────────────────────────


class TestJsonOrderRepository:

    def _order(self, customer_id="c1", day=date(2024, 6, 12)):
        return Order(
            id=None,
            customer_id=customer_id,
            customer_name="Alice",
            delivery_date=day,
            lines=[OrderLine("Sourdough", Decimal("2.5"), "kg")],
            notes="side door",
            recurring_template_id="t1",
            created_at=datetime(2024, 6, 10, 9, 30),
        )

    def test_round_trip(self, store):
        repo = JsonOrderRepository(store)
        order = self._order()
        repo.save(order)

        loaded = repo.get_by_id(order.id)

        assert loaded == order

    def test_update_keeps_id(self, store):
        repo = JsonOrderRepository(store)
        order = self._order()
        repo.save(order)
        order.confirm()
        repo.save(order)
        assert repo.get_by_id(order.id).status == OrderStatus.CONFIRMED
        assert len(store.find("orders")) == 1

    def test_list_by_date_and_customer(self, store):
        repo = JsonOrderRepository(store)
        repo.save(self._order("c1", date(2024, 6, 12)))
        repo.save(self._order("c1", date(2024, 6, 14)))
        repo.save(self._order("c2", date(2024, 6, 12)))

        assert {o.customer_id for o in repo.list_by_date(date(2024, 6, 12))} == {"c1", "c2"}
        assert [o.delivery_date.day for o in repo.list_by_customer("c1")] == [14, 12]
        assert len(repo.find_for_customer_on("c2", date(2024, 6, 12))) == 1

    def test_delete(self, store):
        repo = JsonOrderRepository(store)
        order = self._order()
        repo.save(order)
        repo.delete(order.id)
        assert repo.get_by_id(order.id) is None

    def test_non_numeric_stored_quantity_reads_as_zero(self, store):
        store.put(
            "orders",
            "legacy",
            {
                "customer_id": "c1",
                "delivery_date": "2024-06-12",
                "lines": [{"product": "Bread", "quantity": "two", "unit": "kg"}],
            },
        )
        loaded = JsonOrderRepository(store).get_by_id("legacy")
        assert loaded.lines[0].quantity == 0
        assert loaded.status == OrderStatus.PENDING


# ── Deliveries ───────────────────────────────────────────────────────────────


class TestJsonDeliveryRepository:

    def _delivery(self, when, customer_id="c1"):
        return Delivery(
            id=None,
            customer_id=customer_id,
            customer_name="Alice",
            date=when,
            lines=[DeliveryLine("Sourdough", Decimal("3"), "kg", Money.of("4.20"))],
            created_at=datetime(2024, 6, 10, 9, 0),
        )

    def test_round_trip_keeps_price_snapshot(self, store):
        repo = JsonDeliveryRepository(store)
        delivery = self._delivery(datetime(2024, 6, 10, 7, 15))
        repo.save(delivery)
        assert repo.get_by_id(delivery.id) == delivery

    def test_date_range_is_end_of_day_inclusive(self, store):
        repo = JsonDeliveryRepository(store)
        for when in (
            datetime(2024, 5, 31, 23, 59),
            datetime(2024, 6, 1, 0, 0),
            datetime(2024, 6, 30, 23, 59),
            datetime(2024, 7, 1, 0, 0),
        ):
            repo.save(self._delivery(when))
        repo.save(self._delivery(None))

        found = repo.list_by_date_range(date(2024, 6, 1), date(2024, 6, 30))

        assert [d.date for d in found] == [datetime(2024, 6, 30, 23, 59), datetime(2024, 6, 1, 0, 0)]

    def test_date_range_for_one_customer(self, store):
        repo = JsonDeliveryRepository(store)
        repo.save(self._delivery(datetime(2024, 6, 3), "c1"))
        repo.save(self._delivery(datetime(2024, 6, 3), "c2"))
        found = repo.list_by_date_range(date(2024, 6, 3), date(2024, 6, 3), customer_id="c2")
        assert [d.customer_id for d in found] == ["c2"]

    def test_list_by_customer_includes_dateless(self, store):
        repo = JsonDeliveryRepository(store)
        repo.save(self._delivery(None))
        assert len(repo.list_by_customer("c1")) == 1

    def test_aware_date_is_stored_as_local_time(self, store):
        repo = JsonDeliveryRepository(store)
        when = datetime(2024, 6, 10, 23, 30, tzinfo=timezone.utc)
        repo.save(self._delivery(when))
        local_day = when.astimezone().date()

        stored = store.get("deliveries", repo.list_by_customer("c1")[0].id)
        assert "+" not in stored["date"] and not stored["date"].endswith("Z")
        assert len(repo.list_by_date_range(local_day, local_day)) == 1
        before = local_day - timedelta(days=1)
        assert repo.list_by_date_range(before, before) == []

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="needs time.tzset")
    def test_late_utc_delivery_lands_on_next_rome_day(self, store, rome_time):
        repo = JsonDeliveryRepository(store)
        repo.save(self._delivery(datetime(2024, 6, 10, 23, 30, tzinfo=timezone.utc)))

        assert repo.list_by_date_range(date(2024, 6, 10), date(2024, 6, 10)) == []
        found = repo.list_by_date_range(date(2024, 6, 11), date(2024, 6, 11))
        assert [d.date for d in found] == [datetime(2024, 6, 11, 1, 30)]


# ── Payments, customers, products, templates ─────────────────────────────────


class TestOtherRepositories:

    def test_payment_round_trip(self, store):
        repo = JsonPaymentRepository(store)
        payment = Payment(
            id=None,
            customer_id="c1",
            customer_name="Alice",
            amount=Money.of("12.50"),
            date=datetime(2024, 6, 14),
            method=PaymentMethod.WIRE,
            notes="June",
            created_at=datetime(2024, 6, 14, 10, 0),
        )
        repo.save(payment)
        assert repo.get_by_id(payment.id) == payment
        assert repo.list_by_customer("c1") == [payment]

    def test_unknown_stored_payment_method_reads_as_other(self, store):
        store.put("payments", "p", {"customer_id": "c1", "amount": "5", "method": "barter"})
        assert JsonPaymentRepository(store).get_by_id("p").method == PaymentMethod.OTHER

    def test_customer_round_trip(self, store):
        repo = JsonCustomerRepository(store)
        customer = Customer(
            id=None,
            name="Alice",
            phone="555",
            address="Via Roma 1",
            custom_products=[CustomProduct("Rye", "loaves")],
            created_at=datetime(2024, 1, 1),
        )
        repo.save(customer)
        assert repo.get_by_id(customer.id) == customer

    def test_customers_listed_by_name(self, store):
        repo = JsonCustomerRepository(store)
        for name in ("zoe", "Anna", "bruno"):
            repo.save(Customer.create(name))
        assert [c.name for c in repo.list_all()] == ["Anna", "bruno", "zoe"]

    def test_product_lookup_and_price_list(self, store):
        repo = JsonProductRepository(store)
        repo.save(Product.create("Sourdough", "kg", Money.of("4.20")))
        repo.save(Product.create("Rolls", "pieces"))

        assert repo.get_by_name("sourdough").default_unit == "kg"
        assert repo.get_by_name("Missing") is None
        assert repo.price_list() == {"Sourdough": Decimal("4.20")}

    def test_template_round_trip(self, store):
        repo = JsonRecurringOrderRepository(store)
        template = RecurringOrderTemplate(
            id=None,
            customer_id="c1",
            customer_name="Alice",
            days_of_week=frozenset({1, 3, 5}),
            lines=[OrderLine("Sourdough", Decimal("2"), "kg")],
            notes="early",
            created_at=datetime(2024, 6, 1),
        )
        repo.save(template)
        template.pause()
        repo.save(template)

        loaded = repo.get_by_id(template.id)

        assert loaded == template
        assert repo.list_active() == []
