"""
Domain errors raised by the store and the service layer.
Routes translate them into HTTP responses.
"""


class ShortenerError(Exception):
    """Base class for URL shortener errors"""


class InvalidURLError(ShortenerError):
    """Submitted URL is empty, unreadable or lacks an http(s) scheme"""


class ShortURLNotFoundError(ShortenerError):
    """No original URL is stored under the requested short code"""

    def __init__(self, short_code: str):
        super().__init__(f"Short URL not found: {short_code}")
        self.short_code = short_code


class ShortCodeExhaustedError(ShortenerError):
    """Every generated short code collided with an existing one"""

    def __init__(self, attempts: int):
        super().__init__(
            f"Could not generate unique short code after {attempts} attempts"
        )
        self.attempts = attempts
