"""Tests for the click CLI, against a temporary data directory."""

import re

import pytest
from click.testing import CliRunner

from stock.infrastructure.cli.main import cli
from stock.infrastructure.config import get_settings


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("STOCK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOCK_LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield CliRunner()
    get_settings.cache_clear()


def _id_from(output: str) -> str:
    return re.search(r"#(\S+)", output).group(1)


@pytest.fixture
def catalog(runner):
    """Register a type, a provider and one product; return the product ID."""
    type_id = _id_from(runner.invoke(cli, ["type", "add", "--initials", "SD", "--description", "Soda"]).output)
    provider_id = _id_from(runner.invoke(cli, ["provider", "add", "--name", "Acme"]).output)
    result = runner.invoke(cli, [
        "product", "add",
        "--name", "Coca-Cola",
        "--price", "2.50",
        "--employee-price", "2.00",
        "--type-id", type_id,
        "--provider-id", provider_id,
        "--stock", "10",
    ])
    assert result.exit_code == 0, result.output
    return _id_from(result.output)


class TestProductCommands:

    def test_list_empty(self, runner):
        result = runner.invoke(cli, ["product", "list"])
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_add_and_list(self, runner, catalog):
        result = runner.invoke(cli, ["product", "list"])
        assert "Coca-Cola" in result.output
        assert "Soda" in result.output

    def test_add_with_unknown_type_fails(self, runner):
        result = runner.invoke(cli, [
            "product", "add", "--name", "X", "--price", "1", "--employee-price", "1",
            "--type-id", "nope", "--provider-id", "nope",
        ])
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_show(self, runner, catalog):
        result = runner.invoke(cli, ["product", "show", "--id", catalog])
        assert result.exit_code == 0
        assert "Employee price: 2.00 USD" in result.output

    def test_update(self, runner, catalog):
        result = runner.invoke(cli, ["product", "update", "--id", catalog, "--price", "3"])
        assert result.exit_code == 0
        result = runner.invoke(cli, ["price", "show", "--id", catalog])
        assert "3.00" in result.output

    def test_search(self, runner, catalog):
        result = runner.invoke(cli, ["product", "search", "--name", "cola"])
        assert "Coca-Cola" in result.output
        result = runner.invoke(cli, ["product", "search", "--name", "pepsi", "--condition", "and"])
        assert "No products found." in result.output

    def test_delete(self, runner, catalog):
        assert runner.invoke(cli, ["product", "delete", "--id", catalog]).exit_code == 0
        result = runner.invoke(cli, ["product", "delete", "--id", catalog])
        assert result.exit_code != 0


class TestStockCommands:

    def test_show_add_remove(self, runner, catalog):
        assert "10 in stock" in runner.invoke(cli, ["stock", "show", "--id", catalog]).output
        assert "stock now 15" in runner.invoke(
            cli, ["stock", "add", "--id", catalog, "--quantity", "5"]
        ).output
        assert "stock now 12" in runner.invoke(
            cli, ["stock", "remove", "--id", catalog, "--quantity", "3"]
        ).output

    def test_remove_too_much(self, runner, catalog):
        result = runner.invoke(cli, ["stock", "remove", "--id", catalog, "--quantity", "99"])
        assert result.exit_code != 0
        assert "Insufficient stock" in result.output

    def test_employee_price(self, runner, catalog):
        result = runner.invoke(cli, ["price", "show", "--id", catalog, "--employee"])
        assert "Employee price" in result.output
        assert "2.00" in result.output
