# src/reloc_community/main.py
"""Main entry point for the Reloc community API."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from reloc_community.api.v1 import (
    comments_router,
    messages_router,
    notifications_router,
    posts_router,
    users_router,
)
from reloc_community.api.v1.dependencies import SessionDep
from reloc_community.core.errors import (
    MalformedIdentifier,
    NotFound,
    ServiceError,
    StoreUnavailable,
    ValidationError,
)
from reloc_community.core.settings import settings
from reloc_community.db.session import SessionLocal, dispose_engine, ping
from reloc_community.services.fanout import NotificationDispatcher, NotificationFanout

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Community posts, comments, direct messages and notifications",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(posts_router, prefix="/api/v1")
app.include_router(comments_router, prefix="/api/v1")
app.include_router(messages_router, prefix="/api/v1")
app.include_router(notifications_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")

_ERROR_STATUS: dict[type[ServiceError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    MalformedIdentifier: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    StoreUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Translate domain errors raised by services into HTTP responses."""
    status_code = next(
        (code for error_type, code in _ERROR_STATUS.items() if isinstance(exc, error_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.on_event("startup")
async def on_startup() -> None:
    dispatcher = NotificationDispatcher(
        NotificationFanout(SessionLocal),
        max_queue_size=settings.notification_queue_size,
    )
    await dispatcher.start()
    app.state.notification_dispatcher = dispatcher


@app.on_event("shutdown")
async def on_shutdown() -> None:
    dispatcher: NotificationDispatcher | None = getattr(app.state, "notification_dispatcher", None)
    if dispatcher:
        await dispatcher.stop()
    app.state.notification_dispatcher = None
    dispose_engine()


@app.get("/health")
def health_check(db: SessionDep) -> JSONResponse:
    """Health check reporting whether the database answers."""
    connected = ping(db)
    if connected:
        body = {"status": "ok", "database": "connected"}
        return JSONResponse(status_code=status.HTTP_200_OK, content=body)
    body = {"status": "degraded", "database": "disconnected"}
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "endpoints": {
            "posts": "/api/v1/posts",
            "messages": "/api/v1/messages",
            "notifications": "/api/v1/notifications",
            "users": "/api/v1/users",
            "health": "/health",
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("reloc_community.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
