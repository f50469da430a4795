"""Main CLI application module."""

import typer

from .commands import db_app, serve, show_products

app = typer.Typer(
    help="Product Catalog CLI - serve the API and inspect the product store",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="serve")(serve)
app.command(name="products")(show_products)
app.add_typer(db_app, name="db")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
