"""
Artwork API Routes Module

This module defines the FastAPI routes the frontend calls. Query strings
are taken as-is: multi-select filters arrive already pipe-joined
(e.g. ?size=12&medium=2028390|54321) and are forwarded in the order the
client sent them.

Routes:
- GET /artworks/search: Filtered artwork search relayed to the upstream API
- GET /artworks/next: Follow a masked "next" pagination link
- GET /artworks/{object_id}: Single artwork record
- GET /filters/{category}: Selectable values of a filter category
"""

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from gallery_api import config
from gallery_api.controllers.artwork_controller import (
    search_artworks,
    get_next_page,
    get_artwork,
    get_filter_options,
)
from gallery_api.schemas import ArtworkSearchResponse, ErrorResponse, FilterOptionsResponse

router = APIRouter(tags=["artworks"])

ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Upstream call failed"}}


@router.get(
    "/artworks/search",
    response_model=ArtworkSearchResponse,
    responses=ERROR_RESPONSES,
)
async def search_artworks_endpoint(request: Request) -> JSONResponse:
    """
    Search artworks with the filters given in the query string.

    Every query parameter is forwarded to the upstream object search; no
    validation of filter values is performed.

    Returns:
        Upstream response with "info.next" masked and "info.prev" cleared,
        or status 500 with {"error": "cannot get all artworks"}
    """
    return await search_artworks(dict(request.query_params))


@router.get(
    "/artworks/next",
    response_model=ArtworkSearchResponse,
    responses=ERROR_RESPONSES,
)
async def next_page_endpoint(
    url: str = Query(..., min_length=1, description="Masked 'info.next' link from a previous response"),
) -> JSONResponse:
    return await get_next_page(url)


@router.get("/artworks/{object_id}", responses=ERROR_RESPONSES)
async def artwork_endpoint(object_id: int) -> JSONResponse:
    return await get_artwork(object_id)


@router.get(
    "/filters/{category}",
    response_model=FilterOptionsResponse,
    responses=ERROR_RESPONSES,
)
async def filter_options_endpoint(
    category: str,
    size: int = Query(100, ge=1, le=100, description="Maximum number of values"),
) -> JSONResponse:
    """
    List the values a filter category can take.

    Raises:
        HTTPException: 404 if the category is not one of the supported facets
    """
    if category not in config.FILTER_CATEGORIES:
        raise HTTPException(status_code=404, detail=f"Unknown filter category: {category}")
    return await get_filter_options(category, size)
