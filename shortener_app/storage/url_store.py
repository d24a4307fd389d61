"""
In-memory URL store.

Thread-safe mapping from short code to URLPair. One coarse lock guards
the whole dict: both add() and get() are tiny critical sections (a
dict insert or lookup), so there is no per-key locking and no
reader/writer split.
"""

import logging
import threading
from typing import Dict, Optional, Tuple

from shortener_app.exceptions import ShortCodeExhaustedError
from shortener_app.models.url import URLPair
from shortener_app.services.short_code_strategies import ShortCodeStrategy

logger = logging.getLogger(__name__)


class URLStore:
    """
    Process-local store of short code -> original URL pairs.

    Entries go from absent to present and stay there for the life of
    the process. Nothing is ever updated or deleted.
    """

    def __init__(
        self,
        base_url: str,
        strategy: ShortCodeStrategy,
        short_code_length: int = 8,
        max_retries: int = 5
    ):
        """
        Initialize an empty store.

        Args:
            base_url: Scheme + host prefix used to build short URLs
            strategy: Short code generator
            short_code_length: Number of characters per short code
            max_retries: Generation attempts before giving up on a collision
        """
        if max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {max_retries}")

        self.base_url = base_url.rstrip("/")
        self.strategy = strategy
        self.short_code_length = short_code_length
        self.max_retries = max_retries
        self._urls: Dict[str, URLPair] = {}
        self._lock = threading.Lock()

    def add(self, original: str) -> str:
        """
        Store a new pair and return its fully qualified short URL.

        The short code is generated while the lock is held, so checking
        for a collision and inserting are one atomic step. A taken code
        is regenerated; an existing pair is never overwritten.

        Raises:
            ValueError: If original is empty
            ShortCodeExhaustedError: If every attempt collided
        """
        if not original:
            raise ValueError("Original URL must be a non-empty string")

        with self._lock:
            for attempt in range(1, self.max_retries + 1):
                short = self.strategy.generate(self.short_code_length)
                if short not in self._urls:
                    self._urls[short] = URLPair(original=original, short=short)
                    break
                logger.warning(
                    "Short code collision on attempt %d/%d", attempt, self.max_retries
                )
            else:
                raise ShortCodeExhaustedError(self.max_retries)

        logger.debug("Stored %s -> %s", short, original)
        return self.short_url(short)

    def get(self, short: str) -> Tuple[str, bool]:
        """
        Look up the original URL for a short code.

        Returns:
            (original, True) when found, ("", False) otherwise
        """
        with self._lock:
            pair: Optional[URLPair] = self._urls.get(short)

        if pair is None:
            return "", False
        return pair.original, True

    def short_url(self, short: str) -> str:
        """Build the public short URL for a short code"""
        return f"{self.base_url}/{short}"

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)
