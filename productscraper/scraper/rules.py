"""Priority-ordered selector rules for each product field.

Order matters: earlier rules target more specific, more trusted markup and
win over later ones.  The extractor stops at the first rule whose
normalized value is non-empty.
"""

from __future__ import annotations

from typing import Tuple

from productscraper.scraper.models import ExtractionMode, SelectorRule

NAME_RULES: Tuple[SelectorRule, ...] = (
    SelectorRule("h1.pdp-mod-product-title"),
    SelectorRule("div.pdp-product-title__text"),
    SelectorRule("span.pdp-product-title__item"),
    # "Product Name - Brand - Site" -> "Product Name"
    SelectorRule('meta[property="og:title"]', ExtractionMode.ATTRIBUTE_CONTENT_SPLIT),
    SelectorRule('h1[data-spm="product_title"]'),
    SelectorRule("div.product-title"),
)

PRICE_RULES: Tuple[SelectorRule, ...] = (
    SelectorRule(".pdp-product-price"),
    SelectorRule(
        ".notranslate.pdp-price.pdp-price_type_normal"
        ".pdp-price_color_orange.pdp-price_size_xl"
    ),
    SelectorRule("span.pdp-price_type_normal"),
    SelectorRule("div.pdp-price__main-price span"),
    SelectorRule("span.pdp-price__text"),
    SelectorRule(".pdp-price"),
    SelectorRule(".current-price"),
    SelectorRule("div.price-block span.price"),
    SelectorRule('meta[property="product:price:amount"]', ExtractionMode.ATTRIBUTE_CONTENT),
)

__all__ = ["NAME_RULES", "PRICE_RULES"]
