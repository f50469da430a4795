"""Tests for the catalog command line interface."""

from typer.testing import CliRunner

from src.catalog.cli import app
from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import with_context

runner = CliRunner()


def _sql_config(url: str) -> ConfigData:
    config = ConfigData()
    config.database.backend = "sql"
    config.database.url = url
    return config


def test_help_lists_commands():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "serve" in result.output
    assert "products" in result.output


def test_products_requires_sql_backend():
    config = ConfigData()
    config.database.backend = "memory"

    with with_context(config):
        result = runner.invoke(app, ["products"])

    assert result.exit_code == 1
    assert "memory" in result.output


def test_products_empty_database(tmp_path):
    with with_context(_sql_config(f"sqlite:///{tmp_path / 'catalog.db'}")):
        runner.invoke(app, ["db", "init"])
        result = runner.invoke(app, ["products"])

    assert result.exit_code == 0
    assert "No products found" in result.output


def test_db_init_requires_sql_backend():
    config = ConfigData()
    config.database.backend = "memory"

    with with_context(config):
        result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 1


def test_db_init_and_list_products(tmp_path):
    db_file = tmp_path / "catalog.db"

    with with_context(_sql_config(f"sqlite:///{db_file}")):
        init_result = runner.invoke(app, ["db", "init"])
        assert init_result.exit_code == 0
        assert db_file.exists()

        from src.catalog.api.http.app_data import build_dependencies
        from src.catalog.runtime.context import get_config

        deps = build_dependencies(get_config())
        deps.product_service.create("P-001", "Americano", "2500")
        deps.close()

        list_result = runner.invoke(app, ["products"])

    assert list_result.exit_code == 0
    assert "P-001" in list_result.output
    assert "Americano" in list_result.output
