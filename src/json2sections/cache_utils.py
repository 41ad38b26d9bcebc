"""Bounded token cache shared between decode calls."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Hashable

from json2sections.config import JSON2SECTIONS_TOKEN_CACHE_SIZE
from json2sections.tokenizer import Token

CacheKey = tuple[str, int, Hashable]


class TokenCache:
    """Least-recently-used cache of token streams.

    Keys are ``(normalized_text, nesting_level, options_fingerprint)``. The
    cache is guarded by a lock so a single instance can be shared between
    threads; a ``max_size`` of zero or less disables storage.
    """

    def __init__(self, max_size: int = JSON2SECTIONS_TOKEN_CACHE_SIZE) -> None:
        self.max_size = max_size
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[CacheKey, tuple[Token, ...]] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: CacheKey) -> tuple[Token, ...] | None:
        """Return cached tokens for ``key`` and mark them recently used."""
        with self._lock:
            tokens = self._entries.get(key)
            if tokens is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return tokens

    def put(self, key: CacheKey, tokens: list[Token] | tuple[Token, ...]) -> None:
        """Store tokens, evicting the least recently used entry when full."""
        if self.max_size <= 0:
            return
        with self._lock:
            self._entries[key] = tuple(tokens)
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
