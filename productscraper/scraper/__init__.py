"""Scraper package — page acquisition & product field extraction."""

from productscraper.scraper.errors import AcquisitionError, FetchError
from productscraper.scraper.extractor import extract_fields
from productscraper.scraper.fetcher import acquire, fetch_direct, fetch_rendered
from productscraper.scraper.models import (
    AcquisitionStrategy,
    ExtractedFields,
    ExtractionMode,
    RawPage,
    ScrapeResult,
    SelectorRule,
)
from productscraper.scraper.service import scrape_product

__all__ = [
    "acquire",
    "fetch_direct",
    "fetch_rendered",
    "extract_fields",
    "scrape_product",
    "AcquisitionError",
    "FetchError",
    "AcquisitionStrategy",
    "ExtractedFields",
    "ExtractionMode",
    "RawPage",
    "ScrapeResult",
    "SelectorRule",
]
