"""
Recommendation Engine: FastAPI app.

Internal service (not publicly exposed). Scores candidate books against a
user's swipe history.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest
from starlette.responses import Response

from bookswipe.config import get_settings
from bookswipe.domain import MalformedBookError
from bookswipe.logging_config import setup_logging
from bookswipe.routers import recommend

settings = get_settings()
setup_logging(settings.log_level, settings.log_format)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "recommendation_engine_starting",
        environment=settings.environment,
        min_interactions=settings.min_interactions,
        seeded=settings.cold_start_seed is not None,
    )
    yield
    logger.info("recommendation_engine_shutting_down")


app = FastAPI(
    title="Book Recommendation Engine",
    description="Internal swipe-based recommendation service",
    version="1.0.0",
    docs_url="/docs",
    lifespan=lifespan,
)

app.include_router(recommend.router)


@app.exception_handler(MalformedBookError)
async def malformed_book_handler(request: Request, exc: MalformedBookError):
    logger.warning("malformed_book_rejected", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health")
async def health():
    return {"status": "healthy", "service": "recommendation_engine"}


@app.get("/metrics")
async def metrics():
    return Response(content=generate_latest(), media_type="text/plain")
