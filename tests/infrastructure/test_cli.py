"""End-to-end tests of the command line against a temporary data directory."""

import pytest
from click.testing import CliRunner

from bakery.infrastructure.cli.main import cli

ORDER_DAY = "2099-01-07"


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("BAKERY_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("BAKERY_LOG_FILE", raising=False)
    runner = CliRunner()

    def invoke(*args):
        result = runner.invoke(cli, list(args))
        return result

    return invoke


def _new_id(output: str) -> str:
    """Second word of '<Kind> <id> ...' confirmation lines."""
    return output.split()[1]


@pytest.fixture
def customer_id(run):
    result = run("customer", "add", "--name", "Alice", "--phone", "555")
    assert result.exit_code == 0, result.output
    return _new_id(result.output)


class TestCatalogCommands:

    def test_seed_then_list(self, run):
        result = run("product", "seed")
        assert result.exit_code == 0
        assert "Seeded 10 products." in result.output

        listing = run("product", "list")
        assert "Sourdough" in listing.output
        assert "Croissant" in listing.output

        again = run("product", "seed")
        assert "nothing seeded" in again.output

    def test_customer_list(self, run, customer_id):
        result = run("customer", "list")
        assert customer_id in result.output
        assert "Alice" in result.output

    def test_customer_update(self, run, customer_id):
        result = run("customer", "update", "--id", customer_id, "--name", "Alice Rossi", "--phone", "777")
        assert result.exit_code == 0, result.output
        listing = run("customer", "list").output
        assert "Alice Rossi" in listing
        assert "777" in listing

    def test_custom_product_supplies_order_unit(self, run, customer_id):
        added = run("customer", "add-product", "--id", customer_id, "--name", "Focaccia", "--unit", "trays")
        assert added.exit_code == 0, added.output
        assert "Focaccia" in added.output

        created = run(
            "order", "create", "--customer-id", customer_id, "--date", ORDER_DAY,
            "--items", "Focaccia:2",
        )
        assert created.exit_code == 0, created.output
        assert "trays" in created.output

        removed = run("customer", "remove-product", "--id", customer_id, "--name", "focaccia")
        assert removed.exit_code == 0, removed.output
        assert "(none)" in removed.output

    def test_remove_missing_custom_product(self, run, customer_id):
        result = run("customer", "remove-product", "--id", customer_id, "--name", "Rye")
        assert result.exit_code != 0
        assert "no custom product" in result.output


class TestOrderCommands:

    def test_create_show_and_delete(self, run, customer_id):
        run("product", "add", "--name", "Sourdough", "--unit", "kg", "--price", "4.20")

        created = run(
            "order", "create", "--customer-id", customer_id, "--date", ORDER_DAY,
            "--items", "Sourdough:5",
        )
        assert created.exit_code == 0, created.output
        order_id = _new_id(created.output)
        assert "editable=yes" in created.output

        delivered = run(
            "delivery", "record", "--customer-id", customer_id, "--date", f"{ORDER_DAY}T07:00",
            "--items", "Sourdough:3",
        )
        assert delivered.exit_code == 0, delivered.output

        shown = run("order", "show", "--id", order_id)
        assert "partial" in shown.output
        assert "60%" in shown.output
        assert "Remaining" in shown.output

        day = run("order", "day", "--date", ORDER_DAY)
        assert "To bake" in day.output

        deleted = run("order", "delete", "--id", order_id)
        assert deleted.exit_code == 0
        assert run("order", "show", "--id", order_id).exit_code != 0

    def test_duplicate_order_is_an_error(self, run, customer_id):
        args = ("order", "create", "--customer-id", customer_id, "--date", ORDER_DAY,
                "--items", "Bread:1:kg")
        assert run(*args).exit_code == 0
        second = run(*args)
        assert second.exit_code != 0
        assert "already has an order" in second.output

    def test_past_date_is_rejected(self, run, customer_id):
        result = run(
            "order", "create", "--customer-id", customer_id, "--date", "2000-01-01",
            "--items", "Bread:1:kg",
        )
        assert result.exit_code != 0
        assert "past date" in result.output

    def test_malformed_items(self, run, customer_id):
        result = run(
            "order", "create", "--customer-id", customer_id, "--date", ORDER_DAY,
            "--items", "Bread",
        )
        assert result.exit_code != 0
        assert "Invalid line" in result.output


class TestBillingCommands:

    def test_balance_and_statement(self, run, customer_id, tmp_path):
        run(
            "delivery", "record", "--customer-id", customer_id, "--date", "2024-06-03",
            "--items", "Sourdough:2:kg:4.20",
        )
        paid = run(
            "payment", "record", "--customer-id", customer_id, "--amount", "5",
            "--date", "2024-06-15", "--method", "wire",
        )
        assert paid.exit_code == 0, paid.output

        balance = run("billing", "balance")
        assert "Alice" in balance.output
        assert "8.40" in balance.output
        assert "3.40" in balance.output

        out_dir = tmp_path / "exports"
        statement = run(
            "billing", "statement", "--customer-id", customer_id,
            "--start", "2024-06-01", "--end", "2024-06-30", "--out", str(out_dir), "--csv",
        )
        assert statement.exit_code == 0, statement.output
        assert "Current balance" in statement.output
        [pdf_file] = list(out_dir.glob("statement_Alice_*.pdf"))
        assert pdf_file.read_bytes().startswith(b"%PDF-")
        [csv_file] = list(out_dir.glob("statement_Alice_*.csv"))
        assert "Current balance,3.40" in csv_file.read_text(encoding="utf-8")

    def test_delivery_update_changes_balance(self, run, customer_id):
        recorded = run(
            "delivery", "record", "--customer-id", customer_id, "--date", "2024-06-03",
            "--items", "Sourdough:2:kg:4.20",
        )
        delivery_id = _new_id(recorded.output)

        updated = run("delivery", "update", "--id", delivery_id, "--items", "Sourdough:3:kg")
        assert updated.exit_code == 0, updated.output
        assert f"Delivery {delivery_id} updated" in updated.output
        assert "12.60" in run("billing", "balance", "--customer-id", customer_id).output

    def test_update_unknown_delivery(self, run):
        result = run("delivery", "update", "--id", "nope", "--items", "Sourdough:3:kg")
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_payment_list(self, run, customer_id):
        run("payment", "record", "--customer-id", customer_id, "--amount", "12", "--date", "2024-06-15")
        result = run("payment", "list")
        assert "€12.00" in result.output


class TestRecurringCommands:

    def test_add_generate_and_week(self, run, customer_id):
        added = run(
            "recurring", "add", "--customer-id", customer_id, "--days", "1,3,5",
            "--items", "Sourdough:2:kg",
        )
        assert added.exit_code == 0, added.output
        assert "Mon, Wed, Fri" in added.output

        first = run("recurring", "generate", "--date", ORDER_DAY)
        assert f"1 order(s) generated for {ORDER_DAY}" in first.output
        second = run("recurring", "generate", "--date", ORDER_DAY)
        assert f"0 order(s) generated for {ORDER_DAY}" in second.output

        week = run("recurring", "week")
        assert "Mon:1" in week.output
        assert "Tue:0" in week.output

    def test_pause_and_resume(self, run, customer_id):
        added = run(
            "recurring", "add", "--customer-id", customer_id, "--days", "3",
            "--items", "Sourdough:2:kg",
        )
        template_id = added.output.split()[2]

        paused = run("recurring", "pause", "--id", template_id)
        assert paused.exit_code == 0, paused.output
        assert "paused" in run("recurring", "list").output
        assert f"0 order(s) generated for {ORDER_DAY}" in run("recurring", "generate", "--date", ORDER_DAY).output

        resumed = run("recurring", "resume", "--id", template_id)
        assert resumed.exit_code == 0, resumed.output
        assert f"1 order(s) generated for {ORDER_DAY}" in run("recurring", "generate", "--date", ORDER_DAY).output

    def test_pause_unknown_template(self, run):
        result = run("recurring", "pause", "--id", "nope")
        assert result.exit_code != 0
        assert "not found" in result.output


class TestReportCommands:

    def test_delivery_report_with_csv(self, run, customer_id, tmp_path):
        run(
            "delivery", "record", "--customer-id", customer_id, "--date", "2024-06-03",
            "--items", "Sourdough:2:kg",
        )
        target = tmp_path / "report.csv"
        result = run(
            "report", "deliveries", "--start", "2024-06-01", "--end", "2024-06-30",
            "--csv", str(target),
        )
        assert result.exit_code == 0, result.output
        assert "All customers" in result.output
        assert target.read_text(encoding="utf-8").splitlines()[1] == "Sourdough,2,kg,1"

    def test_customer_history(self, run, customer_id):
        result = run("report", "customer", "--customer-id", customer_id)
        assert result.exit_code == 0, result.output
        assert "Orders:      0" in result.output
