"""
Storage module for URL shortener.
Holds short code -> URL pairs in process memory.
"""

from .url_store import URLStore

__all__ = [
    "URLStore",
]
