"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class AcquisitionStrategy(str, Enum):
    """How the page HTML is obtained."""

    DIRECT = "direct"
    RENDERED = "rendered"
    AUTO = "auto"

    @classmethod
    def parse(cls, value: str | AcquisitionStrategy) -> AcquisitionStrategy:
        """Coerce a config/CLI string into a strategy, rejecting unknown names."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = " | ".join(s.value for s in cls)
            raise ValueError(
                f"Unknown acquisition strategy {value!r}. Use: {choices}"
            ) from None


class ExtractionMode(str, Enum):
    """How a matched element is turned into a raw string."""

    TEXT_CONTENT = "text-content"
    ATTRIBUTE_CONTENT = "attribute-content"
    ATTRIBUTE_CONTENT_SPLIT = "attribute-content-split"


@dataclass(frozen=True)
class SelectorRule:
    """One entry of a field's priority-ordered selector list."""

    selector: str
    mode: ExtractionMode = ExtractionMode.TEXT_CONTENT
    attribute: str = "content"


@dataclass
class RawPage:
    """The HTML obtained for a single URL, and which strategy produced it."""

    url: str
    html: str
    status_code: int
    strategy: AcquisitionStrategy = AcquisitionStrategy.DIRECT


@dataclass
class ExtractedFields:
    """Normalized field values found in a page; ``None`` means not found."""

    product_name: str | None = None
    product_price: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.product_name is None and self.product_price is None


@dataclass
class ScrapeResult:
    """Outcome of one scrape.

    ``error`` is set only when no usable HTML could be obtained; missing
    name or price on its own is a valid partial result.
    """

    product_name: str | None = None
    product_price: str | None = None
    error: str | None = None

    @classmethod
    def from_fields(cls, fields: ExtractedFields) -> ScrapeResult:
        return cls(product_name=fields.product_name, product_price=fields.product_price)

    @classmethod
    def failure(cls, message: str) -> ScrapeResult:
        return cls(error=message)

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        """Serialise with the camelCase keys used on the wire."""
        return {
            "productName": self.product_name,
            "productPrice": self.product_price,
            "error": self.error,
        }
