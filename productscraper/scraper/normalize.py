"""Field normalizers applied to raw strings pulled out of the page."""

from __future__ import annotations

import re

# Dong glyphs, thousands separators, decimal points and whitespace.
_PRICE_NOISE = re.compile(r"[₫đ,.\s]")
_DIGIT_RUN = re.compile(r"[0-9]+")


def normalize_price(text: str) -> str:
    """Reduce localized price text to a bare digit string.

    Every run of ASCII digits left after stripping is concatenated in order,
    so ``"1.234.567 ₫"`` becomes ``"1234567"``.  Any other non-digit
    characters are dropped silently.  Disjoint runs are merged as well:
    ``"₫100.000 ₫80.000"`` becomes ``"10000080000"``.  Returns ``""`` when
    no digits are present.
    """
    stripped = _PRICE_NOISE.sub("", text)
    return "".join(_DIGIT_RUN.findall(stripped))


def normalize_name(text: str) -> str:
    """Trim surrounding whitespace; case and inner characters are kept."""
    return text.strip()
