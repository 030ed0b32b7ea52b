"""Field extraction: turns page HTML into an :class:`ExtractedFields`."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from bs4 import BeautifulSoup

from productscraper.scraper.models import ExtractedFields, ExtractionMode, SelectorRule
from productscraper.scraper.normalize import normalize_name, normalize_price
from productscraper.scraper.rules import NAME_RULES, PRICE_RULES

logger = logging.getLogger(__name__)

TITLE_SEPARATOR = " - "


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _attribute(element, name: str) -> str:
    value = element.get(name)
    if value is None:
        return ""
    # bs4 hands back multi-valued attributes (class, rel, ...) as lists
    if isinstance(value, list):
        return " ".join(value)
    return value


def apply_rule(soup: BeautifulSoup, rule: SelectorRule) -> Optional[str]:
    """Return the raw string *rule* yields for *soup*, or ``None`` if nothing matches.

    ``text-content`` joins the text of every matched element, the way a
    jQuery-style ``.text()`` does on a multi-element selection.  The
    attribute modes read the first match only.
    """
    elements = soup.select(rule.selector)
    if not elements:
        return None

    if rule.mode is ExtractionMode.TEXT_CONTENT:
        return "".join(el.get_text() for el in elements).strip()

    value = _attribute(elements[0], rule.attribute)
    if rule.mode is ExtractionMode.ATTRIBUTE_CONTENT_SPLIT:
        value = value.split(TITLE_SEPARATOR)[0]
    return value.strip()


def extract_field(
    soup: BeautifulSoup,
    rules: Iterable[SelectorRule],
    normalize: Callable[[str], str],
) -> Optional[str]:
    """Walk *rules* in order and return the first non-empty normalized value.

    A rule whose selector blows up is treated as a miss for that rule only.
    """
    for rule in rules:
        try:
            raw = apply_rule(soup, rule)
        except Exception as exc:
            logger.debug(
                "Selector evaluation failed",
                extra={"selector": rule.selector, "error": str(exc)},
            )
            continue
        if raw is None:
            continue
        value = normalize(raw)
        if value:
            return value
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_fields(html: str) -> ExtractedFields:
    """Extract product name and price from *html*.

    Never raises: unparseable markup and unmatched layouts both come back
    as absent fields.
    """
    try:
        soup = BeautifulSoup(html or "", "html.parser")
    except Exception as exc:
        logger.debug("HTML parse failed", extra={"error": str(exc)})
        return ExtractedFields()

    return ExtractedFields(
        product_name=extract_field(soup, NAME_RULES, normalize_name),
        product_price=extract_field(soup, PRICE_RULES, normalize_price),
    )
