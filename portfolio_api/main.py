"""FastAPI application entrypoint."""

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_api import __version__
from portfolio_api.core.config import resolve_cors_origins, resolve_host, resolve_port
from portfolio_api.core.logging_config import configure_logging
from portfolio_api.core.store import MockStore
from portfolio_api.routes import (
    chat,
    cloud,
    devices,
    health,
    nlp,
    payments,
    portfolio,
    prediction,
    projects,
    root,
    status,
)

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start from a freshly seeded store and clear it on shutdown."""
    app.state.store.reset()
    logger.info("Portfolio backend started")
    yield
    app.state.store.clear()
    logger.info("Portfolio backend stopped")


configure_logging()

app = FastAPI(
    title="Portfolio API",
    description="Demo backend for portfolio projects and mock finance endpoints",
    version=__version__,
    lifespan=lifespan,
)

# Owned by the app so tests and handlers share one instance
app.state.store = MockStore()

app.add_middleware(
    CORSMiddleware,
    allow_origins=resolve_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log one line per request and attach basic security headers."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
    )
    return response


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Error bodies are {"error": message}, including unknown routes."""
    message = exc.detail
    if exc.status_code == 404 and message == "Not Found":
        message = "Not found"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are invalid input (400), not 422."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()) if p != 'body')}: {err.get('msg')}"
        for err in errors
    )
    logger.warning(f"Invalid request to {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message or "Invalid request"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal error"})


app.include_router(root.router)
app.include_router(health.router, prefix="/api/health", tags=["health"])
app.include_router(projects.router, prefix="/api/projects", tags=["projects"])
app.include_router(prediction.router, prefix="/api", tags=["prediction"])
app.include_router(portfolio.router, prefix="/api/portfolio", tags=["portfolio"])
app.include_router(nlp.router, prefix="/api/nlp", tags=["nlp"])
app.include_router(chat.router, prefix="/api/chat", tags=["chat"])
app.include_router(payments.router, prefix="/api/payments", tags=["payments"])
app.include_router(devices.router, prefix="/api")
app.include_router(cloud.router, prefix="/api/cloud-migration", tags=["cloud"])
app.include_router(status.router, prefix="/api")


def run() -> None:
    """Run the server with uvicorn (HOST/PORT from the environment)."""
    uvicorn.run("portfolio_api.main:app", host=resolve_host(), port=resolve_port())


if __name__ == "__main__":
    run()
