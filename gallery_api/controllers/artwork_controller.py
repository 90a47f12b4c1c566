"""
Artwork Controller Module

This module sits between the API routes and the artwork service. Each
controller runs one service call in the threadpool, wraps it in a single
try/except and turns the outcome into a JSON response:

- success: status 200 with the (patched) upstream body
- any exception: logged with its traceback, status 500 with a static
  error body

No distinction is made between upstream and internal failures, and
nothing is retried.
"""

import logging
from typing import Any, Callable, Mapping

from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from gallery_api.schemas import ErrorResponse
from gallery_api.services import artwork_service

logger = logging.getLogger(__name__)

SEARCH_ERROR = "cannot get all artworks"
NEXT_PAGE_ERROR = "cannot get next page of artworks"
ARTWORK_ERROR = "cannot get artwork"
FILTER_OPTIONS_ERROR = "cannot get filter options"


async def _relay(error_message: str, func: Callable[..., Any], *args: Any) -> JSONResponse:
    try:
        content = await run_in_threadpool(func, *args)
    except Exception:
        logger.exception(error_message)
        return JSONResponse(status_code=500, content=ErrorResponse(error=error_message).model_dump())
    return JSONResponse(status_code=200, content=content)


async def search_artworks(query: Mapping[str, Any]) -> JSONResponse:
    """
    Controller for artwork searches.

    Forwards the flat, already pipe-joined query to the upstream API and
    relays the response with its "next" link masked and "prev" cleared.

    Args:
        query: Flat mapping of filter name to value (e.g. {"size": "12", "medium": "1|2"})

    Returns:
        JSONResponse with status 200 and the upstream body, or status 500
        and {"error": "cannot get all artworks"}
    """
    return await _relay(SEARCH_ERROR, artwork_service.fetch_artworks, dict(query))


async def get_next_page(next_url: str) -> JSONResponse:
    """Controller for following a masked "next" pagination link."""
    return await _relay(NEXT_PAGE_ERROR, artwork_service.fetch_next_page, next_url)


async def get_artwork(object_id: int) -> JSONResponse:
    return await _relay(ARTWORK_ERROR, artwork_service.fetch_artwork, object_id)


async def get_filter_options(category: str, size: int) -> JSONResponse:
    """
    Controller for listing the values of a filter category.

    Returns:
        JSONResponse with {"category": ..., "options": [{"id", "name"}, ...]},
        or status 500 and {"error": "cannot get filter options"}
    """
    return await _relay(FILTER_OPTIONS_ERROR, _filter_options_payload, category, size)


def _filter_options_payload(category: str, size: int) -> dict:
    return {"category": category, "options": artwork_service.fetch_filter_options(category, size)}
