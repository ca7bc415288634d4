"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reading_proxy.api.cache_routes import router as cache_router
from reading_proxy.api.reading import router as reading_router
from reading_proxy.config import HOST, PORT, UPSTREAM_TIMEOUT, require_api_key
from reading_proxy.errors import ConfigurationError, register_error_handlers
from reading_proxy.services.cache import ReadingCache
from reading_proxy.services.reading_fetcher import ReadingFetcher
from reading_proxy.services.reading_service import ReadingService

logger = logging.getLogger(__name__)

ENDPOINTS = """
Endpoints:
  GET  /reading                            - Get today's OYCB reading
  GET  /reading?date=YYYY-MM-DD            - Get reading for specific date
  GET  /health                             - Health check
  GET  /cache/stats                        - View cache statistics
  POST /cache/clear                        - Clear the cache
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    api_key = require_api_key()
    async with httpx.AsyncClient(timeout=UPSTREAM_TIMEOUT) as client:
        app.state.reading_service = ReadingService(
            cache=ReadingCache(),
            fetcher=ReadingFetcher(client, api_key),
        )
        logger.info(f"NLT Reading API running on port {PORT}\n{ENDPOINTS}")
        yield


def create_app() -> FastAPI:
    app = FastAPI(title="NLT Reading API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Cache", "X-Cache-Date"],
    )

    register_error_handlers(app)

    app.include_router(reading_router)
    app.include_router(cache_router)
    return app


app = create_app()


def run() -> None:
    """Console entry point: refuse to start without an API key."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        require_api_key()
    except ConfigurationError as e:
        logger.error(f"ERROR: {e}")
        sys.exit(1)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
