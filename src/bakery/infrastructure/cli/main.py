import click

from bakery.infrastructure.bootstrap import settings
from bakery.infrastructure.cli.billing_commands import billing_balance, billing_statement
from bakery.infrastructure.cli.customer_commands import (
    customer_add,
    customer_add_product,
    customer_list,
    customer_remove_product,
    customer_update,
)
from bakery.infrastructure.cli.delivery_commands import (
    delivery_delete,
    delivery_record,
    delivery_update,
    payment_delete,
    payment_list,
    payment_record,
)
from bakery.infrastructure.cli.order_commands import (
    order_confirm,
    order_create,
    order_day,
    order_delete,
    order_deliver,
    order_show,
    order_update,
)
from bakery.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_seed,
    product_update,
)
from bakery.infrastructure.cli.recurring_commands import (
    recurring_add,
    recurring_generate,
    recurring_list,
    recurring_pause,
    recurring_resume,
    recurring_week,
)
from bakery.infrastructure.cli.report_commands import report_customer, report_deliveries
from bakery.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Bakery orders, deliveries and billing."""
    configure_logging(settings())


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def delivery() -> None:
    """Record deliveries."""


@cli.group()
def payment() -> None:
    """Record payments."""


@cli.group()
def billing() -> None:
    """Balances and statements."""


@cli.group()
def recurring() -> None:
    """Weekly recurring orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def report() -> None:
    """Reports."""


# Register subcommands
order.add_command(order_confirm)
order.add_command(order_create)
order.add_command(order_day)
order.add_command(order_delete)
order.add_command(order_deliver)
order.add_command(order_show)
order.add_command(order_update)
delivery.add_command(delivery_delete)
delivery.add_command(delivery_record)
delivery.add_command(delivery_update)
payment.add_command(payment_delete)
payment.add_command(payment_list)
payment.add_command(payment_record)
billing.add_command(billing_balance)
billing.add_command(billing_statement)
recurring.add_command(recurring_add)
recurring.add_command(recurring_generate)
recurring.add_command(recurring_list)
recurring.add_command(recurring_pause)
recurring.add_command(recurring_resume)
recurring.add_command(recurring_week)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_seed)
product.add_command(product_update)
customer.add_command(customer_add)
customer.add_command(customer_add_product)
customer.add_command(customer_list)
customer.add_command(customer_remove_product)
customer.add_command(customer_update)
report.add_command(report_customer)
report.add_command(report_deliveries)
