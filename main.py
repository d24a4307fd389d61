from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortener_app.api.v1 import shortener
from shortener_app.config import Settings, settings
from shortener_app.dependencies import build_url_store
from shortener_app.logging_config import setup_logging
from shortener_app.middleware import LoggingMiddleware
from shortener_app.storage.url_store import URLStore


def create_app(
    store: Optional[URLStore] = None,
    app_settings: Optional[Settings] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: URL store to serve from (a fresh one is built if omitted)
        app_settings: Settings to use (defaults to the global settings)

    Returns:
        Configured FastAPI app
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level)

    # Every GET path is a potential short code, so no docs routes
    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        description="An in-memory URL shortener service built with FastAPI",
        debug=app_settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None
    )

    app.state.settings = app_settings
    app.state.url_store = store if store is not None else build_url_store(app_settings)

    app.add_middleware(LoggingMiddleware)

    @app.exception_handler(StarletteHTTPException)
    async def plain_text_http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render every HTTP error as a short plain-text message"""
        # Starlette's own 405 (methods no route lists) says "Method Not Allowed"
        if exc.status_code == 405:
            detail = "Method not allowed"
        else:
            detail = str(exc.detail)
        return PlainTextResponse(
            detail,
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None)
        )

    @app.get("/health")
    def health_check(request: Request):
        """Health check endpoint"""
        return {
            "status": "healthy",
            "environment": request.app.state.settings.environment,
            "urls": len(request.app.state.url_store)
        }

    ######## Include routers
    app.include_router(shortener.router)

    return app


app = create_app()


def run():
    """Serve the app with uvicorn on the configured host and port"""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
