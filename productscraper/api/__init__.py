"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from productscraper.api import app

    uvicorn productscraper.api:app --reload
"""

from productscraper.api.app import app

__all__ = ["app"]
