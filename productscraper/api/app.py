"""FastAPI application factory.

Routers
-------
    /         — plain-text liveness check
    /scrape   — product name & price extraction for one URL

The app holds no state between requests; each scrape is independent.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from productscraper.config import settings
from productscraper.logs import configure_logging

from productscraper.api.routers import scrape as scrape_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Product Scraper API",
        description=(
            "Extracts a product's display name and numeric price from an "
            "e-commerce product page, using a direct fetch or a headless "
            "browser render."
        ),
        version="0.1.0",
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "Product Scraper API is running!"

    app.include_router(scrape_router.router, prefix="/scrape", tags=["scrape"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn productscraper.api.app:app --reload
app = create_app()
