"""Product scraper CLI — entry-point for one-off scrapes and the API server.

Usage:
    productscraper --help

Commands:
    scrape    → fetch one product page and print its name & price
    serve     → run the HTTP API under uvicorn
"""

from __future__ import annotations

import json
from typing import Optional

import typer

from productscraper.config import settings
from productscraper.logs import configure_logging

app = typer.Typer(
    name="productscraper",
    help="Product page scraper CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: str = typer.Option(
        settings.log_level, "--log-level", help="DEBUG | INFO | WARNING | ERROR."
    ),
) -> None:
    configure_logging(log_level.upper())


# ---------------------------------------------------------------------------
# Scrape
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: str = typer.Option(..., help="Product page URL to scrape."),
    strategy: Optional[str] = typer.Option(
        None, help="Acquisition strategy: direct | rendered | auto."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result."),
) -> None:
    """Scrape a product page and print its name and price."""
    from productscraper.scraper import AcquisitionStrategy, scrape_product

    try:
        chosen = AcquisitionStrategy.parse(strategy or settings.acquisition_strategy)
    except ValueError as exc:
        typer.echo(f"[scrape] {exc}")
        raise typer.Exit(2)

    if not as_json:
        typer.echo(f"[scrape] Fetching {url!r} (strategy={chosen.value}) …")
    result = scrape_product(url, chosen)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False))
    elif result.error:
        typer.echo(f"[scrape] Failed: {result.error}")
    else:
        typer.echo(f"[scrape] Name  : {result.product_name or '(none)'}")
        typer.echo(f"[scrape] Price : {result.product_price or '(none)'}")

    if result.error:
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Serve
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: str = typer.Option(settings.host, help="Bind address."),
    port: int = typer.Option(settings.port, help="Bind port."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the scrape API with uvicorn."""
    import uvicorn

    typer.echo(f"[serve] API at http://{host}:{port}/scrape")
    uvicorn.run("productscraper.api.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
