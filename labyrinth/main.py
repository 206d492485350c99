"""Labyrinth Solver API - Main FastAPI Application."""

import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from labyrinth.api.rate_limit import limiter, rate_limit_exceeded_handler
from labyrinth.api.routes import solve
from labyrinth.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("labyrinth")

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Shortest-path solver for character-grid mazes",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log each request once with its status, timing and a short request id."""
    request_id = uuid.uuid4().hex[:8]
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"[{request_id}] {request.method} {request.url.path} "
        f"-> {response.status_code} ({elapsed_ms:.1f}ms)"
    )
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "version": settings.app_version}


@app.get("/")
async def root() -> dict:
    """API info, including the solve limits clients must respect."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "max_grid_cells": settings.max_grid_cells,
        "rate_limit_per_minute": settings.rate_limit_requests,
    }


app.include_router(solve.router, prefix="/v1")
