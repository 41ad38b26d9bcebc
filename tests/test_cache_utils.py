"""Tests for the token cache."""

from __future__ import annotations

import threading

from json2sections.cache_utils import TokenCache
from json2sections.tokenizer import tokenize


def _key(text: str, level: int = 0) -> tuple:
    return (text, level, ("fingerprint",))


class TestTokenCacheLookup:
    """Tests for get/put bookkeeping."""

    def test_miss_returns_none(self) -> None:
        """Unknown keys return None and count as a miss."""
        cache = TokenCache(max_size=4)

        assert cache.get(_key("absent")) is None
        assert cache.misses == 1
        assert cache.hits == 0

    def test_put_then_get_returns_tokens(self) -> None:
        """Stored token streams come back unchanged."""
        cache = TokenCache(max_size=4)
        tokens = tokenize("Reach: high")

        cache.put(_key("Reach: high"), tokens)

        assert cache.get(_key("Reach: high")) == tuple(tokens)
        assert cache.hits == 1
        assert _key("Reach: high") in cache

    def test_level_is_part_of_key(self) -> None:
        """The same text at another level is a separate entry."""
        cache = TokenCache(max_size=4)
        cache.put(_key("text", 0), tokenize("text"))

        assert cache.get(_key("text", 1)) is None

    def test_clear_resets_entries_and_counters(self) -> None:
        """clear() empties the cache and zeroes the statistics."""
        cache = TokenCache(max_size=4)
        cache.put(_key("a"), tokenize("a"))
        cache.get(_key("a"))
        cache.get(_key("b"))

        cache.clear()

        assert len(cache) == 0
        assert cache.hits == 0
        assert cache.misses == 0


class TestTokenCacheEviction:
    """Tests for the size bound."""

    def test_evicts_least_recently_used(self) -> None:
        """A read refreshes an entry so the untouched one is evicted."""
        cache = TokenCache(max_size=2)
        cache.put(_key("a"), tokenize("a"))
        cache.put(_key("b"), tokenize("b"))
        cache.get(_key("a"))

        cache.put(_key("c"), tokenize("c"))

        assert _key("a") in cache
        assert _key("b") not in cache
        assert _key("c") in cache
        assert len(cache) == 2

    def test_zero_size_disables_storage(self) -> None:
        """A non-positive size never stores anything."""
        cache = TokenCache(max_size=0)
        cache.put(_key("a"), tokenize("a"))

        assert len(cache) == 0
        assert cache.get(_key("a")) is None

    def test_concurrent_puts_respect_bound(self) -> None:
        """Parallel writers never push the cache past its size."""
        cache = TokenCache(max_size=16)

        def writer(offset: int) -> None:
            for index in range(200):
                text = f"text {offset} {index}"
                cache.put(_key(text), tokenize(text))

        threads = [threading.Thread(target=writer, args=(offset,)) for offset in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cache) == 16
