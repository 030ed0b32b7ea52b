"""Scrape endpoint.

Routes
------
POST /scrape    Body: {"url": "https://..."}    → scrape_product
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from productscraper.scraper.service import scrape_product

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ScrapeRequest(BaseModel):
    # Optional so a missing url is answered with our own 400, not a 422
    url: Optional[str] = None


class ScrapeResponse(BaseModel):
    productName: Optional[str] = None
    productPrice: Optional[str] = None
    error: Optional[str] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _is_absolute_http_url(url: str) -> bool:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.host)


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.post("", response_model=ScrapeResponse)
def scrape_endpoint(body: Optional[ScrapeRequest] = None) -> Any:
    """Scrape a product page and return its name and price.

    Declared sync so it runs in the threadpool; the rendered strategy
    drives Playwright's sync API, which refuses to run on the event loop.
    """
    url = ((body.url if body else None) or "").strip()
    if not url:
        return _error(400, "URL is required in the request body.")
    if not _is_absolute_http_url(url):
        return _error(422, "URL must be an absolute http(s) URL.")

    logger.info("Received scrape request for URL: %s", url)
    result = scrape_product(url)

    if result.error:
        return _error(500, f"Scraping failed: {result.error}")

    return result.to_dict()
