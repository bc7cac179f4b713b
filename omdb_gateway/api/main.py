"""
FastAPI application entry point for the OMDb Gateway API.
"""

import json
import logging
import sys
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from omdb_gateway import __version__
from omdb_gateway.api.config import (
    get_api_host,
    get_api_port,
    get_log_file,
    get_log_level,
    get_omdb_api_key,
)
from omdb_gateway.api.routers import movies, series, recommendations, system
from omdb_gateway.core.errors import GatewayError
from omdb_gateway.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


class PrettyJSONResponse(JSONResponse):
    """JSON response indented with two spaces."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


app = FastAPI(
    title="OMDb Gateway API",
    description="Movie, series and recommendation views built on the OMDb API",
    version=__version__,
    default_response_class=PrettyJSONResponse,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(series.router)
app.include_router(recommendations.router)
app.include_router(system.router)


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError) -> PlainTextResponse:
    """Report gateway errors as plain-text bodies with the error's status."""
    logger.info(f"{request.url.path} -> {exc.status_code}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "OMDb Gateway API",
        "docs": "/docs",
        "health": "/api/health",
    }


def run() -> None:
    """Start the API server with uvicorn."""
    configure_api_logging(level=get_log_level(), log_file=get_log_file())
    if not get_omdb_api_key():
        logger.error("OMDB_API_KEY not set in environment")
        sys.exit(1)
    host, port = get_api_host(), get_api_port()
    logger.info(f"Server running on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    run()
