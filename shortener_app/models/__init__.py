"""
Data models for URL shortener.

Pairs live in memory only; see shortener_app.storage.url_store.
"""

from .url import URLPair

__all__ = ["URLPair"]
