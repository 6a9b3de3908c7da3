"""Tests for the storefront CLI, with the network swapped for fakes."""

import pytest
from click.testing import CliRunner

from storefront.domain.exceptions import ValidationError
from storefront.infrastructure.cli import (
    order_commands,
    product_commands,
    server_commands,
    shop_commands,
)
from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.notifications import TimedNotifier
from tests.fakes import FakeStoreGateway, FakeTimerFactory


@pytest.fixture()
def gateway(monkeypatch):
    fake = FakeStoreGateway()
    for module in (order_commands, product_commands, shop_commands):
        monkeypatch.setattr(module, "store_gateway", lambda url=None: fake)
        monkeypatch.setattr(
            module, "notifier", lambda: TimedNotifier(timer_factory=FakeTimerFactory())
        )
    return fake


@pytest.fixture()
def runner():
    return CliRunner()


class TestProductsCommand:

    def test_lists_catalog(self, runner, gateway):
        result = runner.invoke(cli, ["products"])
        assert result.exit_code == 0, result.output
        assert "Smartphone" in result.output
        assert "$1299.99" in result.output

    def test_unreachable_server(self, runner, gateway):
        gateway.fail_with = "refused"
        result = runner.invoke(cli, ["products"])
        assert result.exit_code == 0
        assert "* Failed to load products." in result.output
        assert "No products found." in result.output


class TestOrderCommand:

    def test_places_order(self, runner, gateway):
        result = runner.invoke(cli, ["order", "--items", "1:1,2:2"])
        assert result.exit_code == 0, result.output
        assert "Headphones x 2 ($399.98)" in result.output
        assert "Total: $1099.97" in result.output
        assert "* Order placed successfully" in result.output
        assert "Order #1 placed." in result.output
        assert gateway.submitted[0].to_payload() == {
            "items": [{"id": 1, "quantity": 1}, {"id": 2, "quantity": 2}]
        }

    def test_bad_item_format(self, runner, gateway):
        result = runner.invoke(cli, ["order", "--items", "Smartphone"])
        assert result.exit_code != 0
        assert "Expected 'ProductId:Quantity'" in result.output

    def test_non_positive_quantity(self, runner, gateway):
        result = runner.invoke(cli, ["order", "--items", "1:0"])
        assert result.exit_code != 0
        assert "must be positive" in result.output

    def test_unknown_product(self, runner, gateway):
        result = runner.invoke(cli, ["order", "--items", "42:1"])
        assert result.exit_code != 0
        assert "Product not found: #42" in result.output
        assert gateway.submitted == []

    def test_domain_error_becomes_click_error(self, runner, gateway, monkeypatch):
        def reject(request):
            raise ValidationError("Order rejected by rule")

        monkeypatch.setattr(gateway, "submit_order", reject)
        result = runner.invoke(cli, ["order", "--items", "1:1"])
        assert result.exit_code == 1
        assert "Error: Order rejected by rule" in result.output

    def test_catalog_unavailable(self, runner, gateway):
        gateway.fail_with = "refused"
        result = runner.invoke(cli, ["order", "--items", "1:1"])
        assert result.exit_code != 0
        assert "Catalog is unavailable." in result.output


class TestShopCommand:

    def test_session_add_and_checkout(self, runner, gateway):
        script = "add 1\nadd 2\nadd 2\ncart\ncheckout\ncart\nquit\n"
        result = runner.invoke(cli, ["shop"], input=script)

        assert result.exit_code == 0, result.output
        assert "* Added Smartphone to cart." in result.output
        assert "Total: $1099.97" in result.output
        assert "* Order placed successfully" in result.output
        assert "Cart is empty." in result.output
        assert len(gateway.submitted) == 1

    def test_empty_checkout_sends_nothing(self, runner, gateway):
        result = runner.invoke(cli, ["shop"], input="checkout\nquit\n")
        assert "* Your cart is empty." in result.output
        assert gateway.submitted == []

    def test_remove_and_unknown_commands(self, runner, gateway):
        script = "add 3\nremove 3\nremove 2\nadd 99\nremove x\ndance\n"
        result = runner.invoke(cli, ["shop"], input=script)

        assert result.exit_code == 0, result.output
        assert "Cart is empty." in result.output
        assert "Product not found: #99" in result.output
        assert "Product #2 is not in your cart." in result.output
        assert "Invalid product id 'x'." in result.output
        assert "Commands:" in result.output


class TestServeCommand:

    def test_runs_uvicorn_on_configured_port(self, runner, monkeypatch):
        calls = []
        monkeypatch.setattr(
            server_commands.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs))
        )
        result = runner.invoke(cli, ["serve", "--port", "4000", "--host", "127.0.0.1"])

        assert result.exit_code == 0, result.output
        app, kwargs = calls[0]
        assert kwargs["port"] == 4000
        assert kwargs["host"] == "127.0.0.1"
        assert {"/api/products", "/api/orders"} <= set(app.openapi()["paths"])

    def test_port_zero_is_passed_through(self, runner, monkeypatch):
        calls = []
        monkeypatch.setattr(
            server_commands.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs)
        )
        result = runner.invoke(cli, ["serve", "--port", "0"])

        assert result.exit_code == 0, result.output
        assert calls[0]["port"] == 0


class TestBadConfiguration:

    def test_non_numeric_port_is_a_usage_error(self, runner, monkeypatch):
        monkeypatch.setenv("PORT", "abc")
        result = runner.invoke(cli, ["products"])
        assert result.exit_code == 1
        assert "Error: PORT must be an integer, got 'abc'" in result.output
