"""Catalog CLI commands."""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.catalog.api.http.app_data import build_dependencies
from src.catalog.runtime.context import get_config

console = Console()

db_app = typer.Typer(help="Database management commands")


def serve(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the catalog API server."""
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Starting {config.app.name}[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print(f"[blue]Product store:[/blue] {config.database.backend}")

    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,
    )


@db_app.command(name="init")
def init_database() -> None:
    """Create the product tables in the configured SQL database."""
    from src.catalog.runtime.init_db import init_db

    config = get_config()
    if config.database.backend != "sql":
        console.print(
            "[yellow]database.backend is 'memory'; nothing to initialize[/yellow]"
        )
        raise typer.Exit(1)

    init_db().dispose()
    console.print(f"[green]Tables created in {config.database.url}[/green]")


def show_products() -> None:
    """Print the products stored in the configured SQL database."""
    config = get_config()
    if config.database.backend != "sql":
        console.print(
            "[yellow]database.backend is 'memory'; the in-memory store lives "
            "only inside a running server[/yellow]"
        )
        raise typer.Exit(1)

    deps = build_dependencies(config)
    try:
        products = deps.product_service.find_all()
    finally:
        deps.close()

    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(title="Products")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Product ID", style="magenta")
    table.add_column("Name")
    table.add_column("Price", justify="right", style="green")
    for product in products:
        table.add_row(str(product.id), product.product_id, product.name, product.price)
    console.print(table)
