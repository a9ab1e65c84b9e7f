"""End-to-end tests for the click CLI against temporary JSON files."""

import json

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.config import load_settings

CATALOG = [
    {
        "id": 1,
        "name": "Drill",
        "sku": "DRL-1",
        "base_price": "1000",
        "stock": 10,
        "price_breaks": [{"min_qty": 5, "price": "900"}, {"min_qty": 10, "price": "800"}],
    },
]

COMPANY_ARGS = [
    "--company", "Acme", "--contact", "Ana", "--email", "ana@acme.cl",
    "--phone", "123", "--tax-id", "76.1-7", "--address", "Main St 1",
]


@pytest.fixture
def env(tmp_path, monkeypatch):
    catalog = tmp_path / "products.json"
    catalog.write_text(json.dumps(CATALOG), encoding="utf-8")
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_EXPORT_DIR", str(tmp_path / "exports"))
    monkeypatch.setenv("STOREFRONT_CURRENCY", "CLP")
    monkeypatch.delenv("STOREFRONT_CATALOG_FILE", raising=False)
    monkeypatch.delenv("STOREFRONT_CART_FILE", raising=False)
    return tmp_path


def _run(*args):
    return CliRunner().invoke(cli, list(args))


class TestSettings:

    def test_paths_follow_data_dir(self, env):
        settings = load_settings()
        assert settings.catalog_file == env / "products.json"
        assert settings.cart_file == env / "cart.json"


class TestCartCommands:

    def test_add_persists_between_invocations(self, env):
        assert "Added 3 x Drill" in _run("cart", "add", "--id", "1", "--quantity", "3").output
        _run("cart", "add", "--id", "1", "--quantity", "4")

        stored = json.loads((env / "cart.json").read_text(encoding="utf-8"))
        assert stored["cart_items"] == [{"productId": 1, "quantity": 7}]

        shown = _run("cart", "show").output
        assert "$900" in shown
        assert "$6,300" in shown

    def test_add_over_stock_reports_cap(self, env):
        result = _run("cart", "add", "--id", "1", "--quantity", "20")
        assert result.exit_code == 0
        assert "Stock limit reached" in result.output

    def test_add_unknown_product_fails(self, env):
        result = _run("cart", "add", "--id", "99")
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_update_negative_rejected(self, env):
        _run("cart", "add", "--id", "1")
        result = _run("cart", "update", "--id", "1", "--quantity=-2")
        assert result.exit_code != 0

    def test_clear_empties_cart(self, env):
        _run("cart", "add", "--id", "1", "--quantity", "2")
        assert "Cart cleared" in _run("cart", "clear").output
        assert "Your cart is empty." in _run("cart", "show").output


class TestQuoteCommands:

    def test_preview_requires_complete_contact(self, env):
        _run("cart", "add", "--id", "1", "--quantity", "5")
        result = _run("quote", "preview", "--company", "Acme")
        assert result.exit_code != 0
        assert "All company fields are required" in result.output

    def test_preview_shows_totals(self, env):
        _run("cart", "add", "--id", "1", "--quantity", "5")
        result = _run("quote", "preview", *COMPANY_ARGS)
        assert result.exit_code == 0
        assert "10.0%" in result.output
        assert "$4,500" in result.output

    def test_export_writes_file(self, env):
        _run("cart", "add", "--id", "1", "--quantity", "5")
        target = env / "out" / "quote.json"
        result = _run("quote", "export", *COMPANY_ARGS, "--format", "json", "--output", str(target))
        assert result.exit_code == 0
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["subtotal"] == "$5,000"
        assert data["total"] == "$4,500"

    def test_export_defaults_to_pdf(self, env):
        _run("cart", "add", "--id", "1", "--quantity", "5")
        result = _run("quote", "export", *COMPANY_ARGS)
        assert result.exit_code == 0
        exported = list((env / "exports").glob("quote_*.pdf"))
        assert len(exported) == 1
        assert exported[0].read_bytes().startswith(b"%PDF")


class TestForeignCurrencyCatalog:

    @pytest.fixture
    def usd_catalog(self, env):
        catalog = [CATALOG[0], {**CATALOG[0], "id": 2, "currency": "USD"}]
        (env / "products.json").write_text(json.dumps(catalog), encoding="utf-8")
        return env

    def test_product_list_reports_error(self, usd_catalog):
        result = _run("product", "list")
        assert result.exit_code == 1
        assert "priced in USD" in result.output

    def test_cart_add_reports_error(self, usd_catalog):
        result = _run("cart", "add", "--id", "1")
        assert result.exit_code == 1
        assert "priced in USD" in result.output
