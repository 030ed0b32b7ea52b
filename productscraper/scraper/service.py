"""Scrape pipeline — URL variant.

``scrape_product`` orchestrates one request end to end:

    acquire → extract → ScrapeResult
"""

from __future__ import annotations

import logging

from productscraper.config import settings
from productscraper.scraper.errors import AcquisitionError
from productscraper.scraper.extractor import extract_fields
from productscraper.scraper.fetcher import acquire, fetch_rendered
from productscraper.scraper.models import AcquisitionStrategy, ScrapeResult

logger = logging.getLogger(__name__)


def scrape_product(
    url: str,
    strategy: AcquisitionStrategy | str | None = None,
) -> ScrapeResult:
    """Scrape the product name and price from *url*.

    Pipeline:
        1. :func:`~productscraper.scraper.fetcher.acquire` — direct fetch,
           or a headless render when the strategy is ``rendered``.
        2. :func:`~productscraper.scraper.extractor.extract_fields` —
           ordered selector rules for name and price.
        3. With the ``auto`` strategy, if the direct page yielded neither
           field, render the page and extract again.

    Acquisition failures come back as ``ScrapeResult.error`` rather than
    being raised.  A failed render during the ``auto`` fallback is not an
    error: the direct HTML was usable, so its (empty) result is returned.

    Args:
        url: Absolute URL of the product page.
        strategy: Overrides ``settings.acquisition_strategy`` for this call.

    Returns:
        A :class:`~productscraper.scraper.models.ScrapeResult`.
    """
    chosen = AcquisitionStrategy.parse(strategy or settings.acquisition_strategy)

    try:
        page = acquire(url, chosen)
    except AcquisitionError as exc:
        logger.warning(
            "Acquisition failed",
            extra={"url": url, "strategy": chosen.value, "error": str(exc)},
        )
        return ScrapeResult.failure(str(exc))

    fields = extract_fields(page.html)

    if chosen is AcquisitionStrategy.AUTO and fields.is_empty:
        logger.info("No fields in direct HTML, rendering", extra={"url": url})
        try:
            rendered = fetch_rendered(url)
        except AcquisitionError as exc:
            logger.warning(
                "Rendering fallback failed",
                extra={"url": url, "error": str(exc)},
            )
        else:
            fields = extract_fields(rendered.html)

    return ScrapeResult.from_fields(fields)
