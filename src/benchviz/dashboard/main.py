"""
FastAPI application for the benchviz dashboard
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from benchviz.config import is_dev_mode

from .dependencies import close_loader
from .router import router

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle.

    On shutdown, close the HTTP client of the shared loader.
    """
    if is_dev_mode():
        logger.info("[DEV MODE] Serving benchviz API with auto-reload")
    yield
    await close_loader()


app = FastAPI(
    title="benchviz",
    description="Benchmark history charts for a Go project's nightly benchmarks",
    docs_url="/docs/api",
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(SecurityHeadersMiddleware)  # ty: ignore[invalid-argument-type]

# Read-only API: any origin may GET
app.add_middleware(
    CORSMiddleware,  # ty: ignore[invalid-argument-type]
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["Content-Type"],
)

app.include_router(router)
