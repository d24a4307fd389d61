from shortener_app.exceptions import InvalidURLError, ShortURLNotFoundError
from shortener_app.storage.url_store import URLStore

ALLOWED_SCHEMES = ("http://", "https://")


class URLService:
    """
    URL Service with the store injected.

    The store only knows how to add and look up pairs; this layer owns
    the request-level rules (accepted schemes, not-found semantics) so
    routes stay thin.
    """

    def __init__(self, store: URLStore):
        """
        Initialize URL service with dependencies.

        Args:
            store: In-memory URL store shared by every request
        """
        self.store = store

    def create_short_url(self, original_url: str) -> str:
        """Create a new short URL

        Note: Always creates a new short URL even if the original URL was
        submitted before. The body is used verbatim, no trimming.

        Raises:
            InvalidURLError: If the URL does not start with http:// or https://
            ShortCodeExhaustedError: If no free short code could be generated
        """
        if not original_url.startswith(ALLOWED_SCHEMES):
            raise InvalidURLError("Invalid URL format")

        return self.store.add(original_url)

    def get_long_url_for_redirect(self, short_code: str) -> str:
        """Get the original URL for a short code

        Raises:
            ShortURLNotFoundError: If the short code is unknown
        """
        original, found = self.store.get(short_code)
        if not found:
            raise ShortURLNotFoundError(short_code)
        return original
