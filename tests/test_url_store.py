"""
Tests for the in-memory URL store.
"""
import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from shortener_app.exceptions import ShortCodeExhaustedError
from shortener_app.services.short_code_strategies import ShortCodeStrategy
from shortener_app.storage.url_store import URLStore

SHORT_URL_PATTERN = re.compile(r"^http://localhost:8080/([A-Za-z0-9]{8})$")


class ScriptedStrategy(ShortCodeStrategy):
    """Returns pre-defined codes in order, to force collisions"""

    def __init__(self, codes):
        self.codes = list(codes)
        self.calls = 0

    def generate(self, length: int) -> str:
        code = self.codes[self.calls]
        self.calls += 1
        return code

    def _choice(self, characters: str) -> str:
        raise NotImplementedError


def short_code_of(short_url: str) -> str:
    return short_url.rsplit("/", 1)[1]


class TestURLStore:
    """Test add/get behaviour"""

    def test_add_returns_fully_qualified_short_url(self, url_store):
        """Test short URL is base URL + 8 character code"""
        short_url = url_store.add("https://example.com/")

        assert SHORT_URL_PATTERN.match(short_url)

    def test_round_trip(self, url_store):
        """Test that a stored URL is found under its short code"""
        original = "https://example.com/some/long/path?q=1"
        short_url = url_store.add(original)

        assert url_store.get(short_code_of(short_url)) == (original, True)

    def test_unknown_short_code(self, url_store):
        """Test lookup of a short code that was never generated"""
        assert url_store.get("doesNotExist") == ("", False)

    def test_same_url_twice_gets_two_codes(self, url_store):
        """Test that resubmitting a URL creates a new entry"""
        first = url_store.add("https://example.com/")
        second = url_store.add("https://example.com/")

        assert first != second
        assert len(url_store) == 2

    def test_rejects_empty_url(self, url_store):
        """Test that an empty original URL is refused"""
        with pytest.raises(ValueError):
            url_store.add("")

    def test_get_does_not_mutate(self, url_store):
        """Test that lookups never add entries"""
        url_store.add("https://example.com/")

        url_store.get("missing1")
        url_store.get("missing2")

        assert len(url_store) == 1

    def test_base_url_trailing_slash(self):
        """Test that a trailing slash on the base URL is not doubled"""
        store = URLStore(
            base_url="http://localhost:8080/",
            strategy=ScriptedStrategy(["AbCd1234"])
        )

        assert store.add("https://example.com/") == "http://localhost:8080/AbCd1234"


class TestCollisions:
    """Test regenerate-and-retry on short code collisions"""

    def test_collision_is_regenerated(self):
        """Test that a taken code is retried, not overwritten"""
        strategy = ScriptedStrategy(["AAAAAAAA", "AAAAAAAA", "BBBBBBBB"])
        store = URLStore(base_url="http://localhost:8080", strategy=strategy)

        store.add("https://first.example/")
        short_url = store.add("https://second.example/")

        assert short_url == "http://localhost:8080/BBBBBBBB"
        assert store.get("AAAAAAAA") == ("https://first.example/", True)
        assert store.get("BBBBBBBB") == ("https://second.example/", True)
        assert strategy.calls == 3

    def test_exhaustion_raises(self):
        """Test that running out of attempts raises and stores nothing"""
        strategy = ScriptedStrategy(["AAAAAAAA"] * 4)
        store = URLStore(base_url="http://localhost:8080", strategy=strategy, max_retries=3)

        store.add("https://first.example/")
        with pytest.raises(ShortCodeExhaustedError) as exc_info:
            store.add("https://second.example/")

        assert exc_info.value.attempts == 3
        assert len(store) == 1
        assert store.get("AAAAAAAA") == ("https://first.example/", True)

    def test_max_retries_must_be_positive(self):
        """Test that a store needs at least one attempt"""
        with pytest.raises(ValueError):
            URLStore(
                base_url="http://localhost:8080",
                strategy=ScriptedStrategy([]),
                max_retries=0
            )


class TestConcurrency:
    """Test the store under parallel access"""

    def test_concurrent_adds_are_not_lost(self, url_store):
        """Test that 100 parallel writers each get a retrievable entry"""
        originals = [f"https://example.com/page/{i}" for i in range(100)]

        with ThreadPoolExecutor(max_workers=20) as executor:
            short_urls = list(executor.map(url_store.add, originals))

        assert len(url_store) == 100
        assert len(set(short_urls)) == 100
        for original, short_url in zip(originals, short_urls):
            assert url_store.get(short_code_of(short_url)) == (original, True)

    def test_concurrent_reads_and_writes(self, url_store):
        """Test interleaved adds and gets from many threads"""
        seeded = {url_store.add(f"https://seed.example/{i}"): f"https://seed.example/{i}"
                  for i in range(20)}

        def read(short_url):
            return url_store.get(short_code_of(short_url))

        with ThreadPoolExecutor(max_workers=16) as executor:
            writes = [executor.submit(url_store.add, f"https://new.example/{i}") for i in range(50)]
            reads = {executor.submit(read, short_url): original
                     for short_url, original in seeded.items()}

            for future, original in reads.items():
                assert future.result() == (original, True)
            for future in writes:
                assert SHORT_URL_PATTERN.match(future.result())

        assert len(url_store) == 70
