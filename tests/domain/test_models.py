"""Unit tests for the ledger primitives and their construction rules."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.customer import Customer
from bakery.domain.model.delivery import Delivery
from bakery.domain.model.lines import DeliveryLine, OrderLine, line_key
from bakery.domain.model.order import MAX_LINES, Order, OrderStatus
from bakery.domain.model.payment import Payment, PaymentMethod
from bakery.domain.model.product import Product
from bakery.domain.model.recurring import RecurringOrderTemplate
from bakery.domain.model.value_objects import Money


def _line(product="Sourdough", qty="5", unit="kg") -> OrderLine:
    return OrderLine.create(product, qty, unit)


# ── Lines ────────────────────────────────────────────────────────────────────


class TestLines:

    def test_order_line_parses_quantity(self):
        line = _line(qty="2.5")
        assert line.quantity == Decimal("2.5")

    def test_order_line_rejects_zero_quantity(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _line(qty="0")

    def test_order_line_requires_product(self):
        with pytest.raises(ValidationError, match="Product name is required"):
            OrderLine.create("  ", "1", "kg")

    def test_order_line_requires_unit(self):
        with pytest.raises(ValidationError, match="Unit is required"):
            OrderLine.create("Bread", "1", "")

    def test_names_are_trimmed(self):
        line = OrderLine.create(" Bread ", "1", " kg ")
        assert (line.product, line.unit) == ("Bread", "kg")

    def test_line_key_is_case_sensitive(self):
        assert line_key(_line("Bread")) != line_key(_line("bread"))

    def test_delivery_line_keeps_price_snapshot(self):
        line = DeliveryLine.create("Bread", "3", "kg", Money.of("2.40"))
        assert line.price_at_delivery == Money.of("2.40")


# ── Order ────────────────────────────────────────────────────────────────────


class TestOrderCreate:

    def test_new_order_is_pending(self):
        order = Order.create("c1", "Alice", date(2024, 6, 10), [_line()])
        assert order.status == OrderStatus.PENDING
        assert order.id is None

    def test_datetime_delivery_date_is_normalized(self):
        order = Order.create("c1", "Alice", datetime(2024, 6, 10, 15, 30), [_line()])
        assert order.delivery_date == date(2024, 6, 10)

    def test_requires_customer(self):
        with pytest.raises(ValidationError, match="Customer is required"):
            Order.create("", "Alice", date(2024, 6, 10), [_line()])

    def test_requires_lines(self):
        with pytest.raises(ValidationError, match="at least one line"):
            Order.create("c1", "Alice", date(2024, 6, 10), [])

    def test_max_lines(self):
        lines = [_line(f"P{i}") for i in range(MAX_LINES + 1)]
        with pytest.raises(ValidationError, match="Maximum"):
            Order.create("c1", "Alice", date(2024, 6, 10), lines)


class TestOrderTransitions:

    def _order(self) -> Order:
        return Order.create("c1", "Alice", date(2024, 6, 10), [_line()])

    def test_confirm_then_deliver(self):
        order = self._order()
        order.confirm()
        assert order.status == OrderStatus.CONFIRMED
        order.mark_delivered()
        assert order.status == OrderStatus.DELIVERED

    def test_cannot_confirm_twice(self):
        order = self._order()
        order.confirm()
        with pytest.raises(ValidationError, match="expected pending"):
            order.confirm()

    def test_cannot_deliver_pending(self):
        with pytest.raises(ValidationError, match="expected confirmed"):
            self._order().mark_delivered()

    def test_revise_replaces_contents(self):
        order = self._order()
        order.revise(date(2024, 6, 11), [_line("Baguette", "2", "pieces")], "ring twice")
        assert order.delivery_date == date(2024, 6, 11)
        assert order.lines[0].product == "Baguette"
        assert order.notes == "ring twice"

    def test_revise_delivered_order_rejected(self):
        order = self._order()
        order.confirm()
        order.mark_delivered()
        with pytest.raises(ValidationError, match="already delivered"):
            order.revise(date(2024, 6, 11), [_line()])


# ── Delivery / Payment / Template / Product / Customer ───────────────────────


class TestDelivery:

    def test_record_with_plain_date_uses_midnight(self):
        d = Delivery.record("c1", "Alice", date(2024, 6, 10), [DeliveryLine.create("Bread", "1", "kg")])
        assert d.date == datetime(2024, 6, 10)
        assert d.local_date == date(2024, 6, 10)

    def test_requires_lines(self):
        with pytest.raises(ValidationError, match="at least one line"):
            Delivery.record("c1", "Alice", date(2024, 6, 10), [])

    def test_local_date_missing(self):
        d = Delivery(id="d1", customer_id="c1", customer_name="A", date=None, lines=[])
        assert d.local_date is None


class TestPayment:

    def test_method_parse(self):
        assert PaymentMethod.parse(" Wire ") == PaymentMethod.WIRE

    def test_unknown_method_rejected(self):
        with pytest.raises(ValidationError, match="Unknown payment method"):
            PaymentMethod.parse("bitcoin")

    def test_record(self):
        p = Payment.record("c1", "Alice", Money.of("50"), date(2024, 6, 1), PaymentMethod.CHECK)
        assert p.date == datetime(2024, 6, 1)
        assert p.method == PaymentMethod.CHECK


class TestRecurringTemplate:

    def test_create(self):
        t = RecurringOrderTemplate.create("c1", "Alice", {1, 3, 5}, [_line()])
        assert t.is_active
        assert t.days_label == "Mon, Wed, Fri"

    def test_rejects_invalid_weekday(self):
        with pytest.raises(ValidationError, match="0 \\(Sunday\\) to 6"):
            RecurringOrderTemplate.create("c1", "Alice", {7}, [_line()])

    def test_rejects_empty_days(self):
        with pytest.raises(ValidationError, match="at least one day"):
            RecurringOrderTemplate.create("c1", "Alice", set(), [_line()])

    def test_paused_template_does_not_run(self):
        t = RecurringOrderTemplate.create("c1", "Alice", {1}, [_line()])
        t.pause()
        assert not t.runs_on(1)
        t.resume()
        assert t.runs_on(1)


class TestProductAndCustomer:

    def test_product_name_match_is_case_insensitive(self):
        p = Product.create("Sourdough", "kg")
        assert p.matches_name("SOURDOUGH ")

    def test_customer_custom_products_deduplicated(self):
        c = Customer.create("Bar Roma")
        c.add_custom_product("Mini rolls", "pieces")
        c.add_custom_product("Mini rolls", "pieces")
        assert len(c.custom_products) == 1

    def test_customer_requires_name(self):
        with pytest.raises(ValidationError, match="Customer name is required"):
            Customer.create(" ")
