"""
Pydantic Schema Definitions for API Request/Response Models

This module defines the data structures the backend exposes. Upstream
payloads are relayed as-is, so the models name the fields clients rely on
and keep everything else.

Schema Categories:
- Artwork search: pagination info and records
- Filter options: facet values the UI can select
- Errors: static failure bodies
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class PageInfo(BaseModel):
    """
    Pagination block of an upstream search response.

    Attributes:
        next: Link to the next page, with the API key masked
        prev: Always empty once relayed
        totalrecords: Number of records matching the query
        pages: Number of pages at the requested size
        page: Current page number
    """
    model_config = ConfigDict(extra="allow")

    next: Optional[str] = Field(None, description="Masked link to the next page")
    prev: Optional[str] = Field(None, description="Previous page link (cleared)")
    totalrecords: Optional[int] = Field(None, description="Total matching records")
    pages: Optional[int] = Field(None, description="Total number of pages")
    page: Optional[int] = Field(None, description="Current page number")


class ArtworkSearchResponse(BaseModel):
    """Relayed search result: pagination info plus the matching records."""
    model_config = ConfigDict(extra="allow")

    info: PageInfo = Field(..., description="Pagination information")
    records: List[Dict[str, Any]] = Field(default_factory=list, description="Matching artwork records")


class FilterOption(BaseModel):
    """A single selectable value of a filter category."""
    id: int = Field(..., description="Upstream identifier used in queries")
    name: str = Field(..., description="Display label")


class FilterOptionsResponse(BaseModel):
    category: str = Field(..., description="Filter category name")
    options: List[FilterOption] = Field(..., description="Selectable values")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Static error message")
