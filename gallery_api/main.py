"""
Gallery Search API Main Application

This module initializes the FastAPI application that relays filtered
artwork searches to the Harvard Art Museums collection API. The frontend
sends its filter selection as a flat query string; the API forwards it
with the server-side API key and hides that key in the pagination links
it returns.

Router modules:
- artworks: search, pagination, single artwork and filter options

Run locally with:
    uvicorn gallery_api.main:app --reload
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gallery_api import config
from gallery_api.routes import artworks

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if not config.API_KEY:
    logger.warning("HAM_API_KEY is not set; upstream calls will be rejected")

app = FastAPI(
    title="Gallery Search API",
    description="Relays filtered artwork searches to the Harvard Art Museums API",
    version="1.0.0"
)

# Browser frontends call the API directly
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# All endpoints will be prefixed with "/api"
app.include_router(artworks.router, prefix="/api")


@app.get("/health")
async def health():
    return {"ok": True}


if __name__ == "__main__":
    uvicorn.run("gallery_api.main:app", host="0.0.0.0", port=8000)
