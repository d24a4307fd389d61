"""
FastAPI dependencies for dependency injection.

The URL store is built once per application by create_app() and kept on
app.state; routes reach it through these dependencies instead of a
module-level global.

Pattern: Dependency Injection
- Loose coupling between components
- Easy to test (inject a fresh store per app)
"""

from typing import Optional

from fastapi import Depends, Request

from shortener_app.config import Settings, settings
from shortener_app.services.short_code_factory import (
    ShortCodeFactory,
    ShortCodeStrategyType
)
from shortener_app.services.url_service import URLService
from shortener_app.storage.url_store import URLStore


def build_url_store(app_settings: Optional[Settings] = None) -> URLStore:
    """
    Create a new, empty URL store configured from settings.

    Args:
        app_settings: Settings to use (defaults to the global settings)

    Returns:
        URLStore wired with the configured short code strategy
    """
    app_settings = app_settings or settings
    strategy = ShortCodeFactory.create_strategy(
        ShortCodeStrategyType(app_settings.short_code_strategy)
    )
    return URLStore(
        base_url=app_settings.base_url,
        strategy=strategy,
        short_code_length=app_settings.short_url_length,
        max_retries=app_settings.max_retries
    )


def get_url_store(request: Request) -> URLStore:
    """Get the store owned by the running application"""
    return request.app.state.url_store


def get_url_service(store: URLStore = Depends(get_url_store)) -> URLService:
    """
    Get URLService with the store injected.

    Controller depends on service, service depends on the store.
    """
    return URLService(store=store)
