"""Page acquisition: a plain HTTP fetch or a headless Playwright render."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from productscraper.config import settings
from productscraper.scraper.errors import AcquisitionError
from productscraper.scraper.models import AcquisitionStrategy, RawPage

logger = logging.getLogger(__name__)

_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,"
    "image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.9"
)


def _browser_headers() -> dict[str, str]:
    """Headers a desktop Chrome would send; plain bot headers get thin markup."""
    return {
        "User-Agent": settings.user_agent,
        "Accept": _ACCEPT,
        "Accept-Language": settings.accept_language,
        "Connection": "keep-alive",
        "Upgrade-Insecure-Requests": "1",
        "Cache-Control": "max-age=0",
    }


def _describe(exc: BaseException) -> str:
    # Some httpx timeouts stringify to ""
    return str(exc) or type(exc).__name__


def _status_error(status: int, reason: str) -> AcquisitionError:
    return AcquisitionError(f"Failed to fetch page: {status} {reason}".rstrip())


def fetch_direct(url: str, timeout: Optional[float] = None) -> RawPage:
    """Fetch *url* with a single ``httpx`` GET.

    Raises:
        AcquisitionError: On a transport failure, a timeout, or a non-2xx
            status (the message carries the status code and reason phrase).
    """
    logger.debug("Fetching page", extra={"url": url, "strategy": "direct"})
    try:
        with httpx.Client(
            headers=_browser_headers(),
            timeout=timeout if timeout is not None else settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise AcquisitionError(f"Failed to fetch page: {_describe(exc)}") from exc

    if not response.is_success:
        logger.warning(
            "Non-success status",
            extra={"url": url, "status_code": response.status_code},
        )
        raise _status_error(response.status_code, response.reason_phrase)

    return RawPage(
        url=url,
        html=response.text,
        status_code=response.status_code,
        strategy=AcquisitionStrategy.DIRECT,
    )


def fetch_rendered(url: str, timeout: Optional[float] = None) -> RawPage:
    """Render *url* in a headless Chromium browser and return the final HTML.

    Navigation waits for network idle, bounded by *timeout*.  The browser
    is closed on every path out once it has been launched.

    Playwright is imported lazily so tests that don't exercise the render
    path don't need a browser installed.

    Raises:
        AcquisitionError: If the browser cannot start, navigation times out,
            or the document response has a non-success status.
    """
    from playwright.sync_api import Error as PlaywrightError  # noqa: PLC0415
    from playwright.sync_api import sync_playwright  # noqa: PLC0415

    timeout_ms = int((timeout if timeout is not None else settings.request_timeout) * 1000)
    logger.debug("Fetching page", extra={"url": url, "strategy": "rendered"})

    try:
        with sync_playwright() as pw:
            browser = pw.chromium.launch(headless=True)
            try:
                page = browser.new_page(
                    user_agent=settings.user_agent,
                    extra_http_headers={"Accept-Language": settings.accept_language},
                )
                response = page.goto(url, timeout=timeout_ms, wait_until="networkidle")
                if response is not None and not response.ok:
                    logger.warning(
                        "Non-success status",
                        extra={"url": url, "status_code": response.status},
                    )
                    raise _status_error(response.status, response.status_text)
                html = page.content()
            finally:
                browser.close()
    except PlaywrightError as exc:
        raise AcquisitionError(f"Page rendering failed: {_describe(exc)}") from exc

    return RawPage(
        url=url,
        html=html,
        status_code=response.status if response is not None else 200,
        strategy=AcquisitionStrategy.RENDERED,
    )


def acquire(
    url: str,
    strategy: AcquisitionStrategy | str | None = None,
    timeout: Optional[float] = None,
) -> RawPage:
    """Return the HTML for *url* using *strategy* (default: from settings).

    ``auto`` acquires directly here; falling back to rendering depends on
    what extraction finds, so that decision lives in
    :func:`~productscraper.scraper.service.scrape_product`.
    """
    chosen = AcquisitionStrategy.parse(strategy or settings.acquisition_strategy)
    if chosen is AcquisitionStrategy.RENDERED:
        return fetch_rendered(url, timeout=timeout)
    return fetch_direct(url, timeout=timeout)
