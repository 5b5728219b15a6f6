"""Boilerplate FastAPI application assembly.

Wires resource routers, request logging, envelope-shaped error handlers,
and CORS middleware.
Run: uvicorn boilerplate.main:app --reload
"""

import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from boilerplate.api.responses import envelope_json
from boilerplate.config import Settings, get_settings
from boilerplate.logging_config import configure_logging
from boilerplate.membership.router import router as membership_router
from boilerplate.organisation.router import router as organisation_router
from boilerplate.record.router import router as record_router
from boilerplate.todo.router import router as todo_router

logger = structlog.get_logger("boilerplate.http")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. Settings are loaded from the environment if not given."""
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level,
        json=settings.log_json,
        static_fields={"service": "boilerplate", "environment": settings.env},
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Dispose of the pooled engine on shutdown."""
        yield
        from boilerplate.db import engine as engine_module

        if engine_module._engine is not None:
            engine_module._engine.dispose()

    app = FastAPI(title="Boilerplate", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """One http_request line per request, tagged with a request id."""
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start = time.perf_counter()
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        logger.info(
            "http_request",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        response = envelope_json(exc.status_code, error=str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return envelope_json(400, message="invalid request options", error=str(exc.errors()))

    app.include_router(todo_router)
    app.include_router(organisation_router)
    app.include_router(membership_router)
    app.include_router(record_router)

    @app.get("/healthz")
    def healthz() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
