"""In-memory TTL cache implementation."""

import logging
import threading
import time
from collections.abc import Callable, Hashable
from typing import TypeVar

from miqat.services.ports import CachePort

logger = logging.getLogger(__name__)

V = TypeVar("V")

ONE_DAY_SECONDS = 24 * 60 * 60
ONE_WEEK_SECONDS = 7 * ONE_DAY_SECONDS


class InMemoryTTLCache(CachePort[V]):
    """Süre dolunca kaydı geçersiz sayan basit in-memory önbellek."""

    def __init__(
        self,
        ttl_seconds: float,
        *,
        max_entries: int = 1024,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize cache.

        Args:
            ttl_seconds: Kayıt ömrü (saniye)
            max_entries: En fazla kayıt sayısı, aşılınca en eski kayıt silinir
            clock: Zaman kaynağı (testlerde değiştirilebilir)
        """
        if ttl_seconds <= 0:
            raise ValueError(f"Geçersiz TTL: {ttl_seconds}")
        if max_entries < 1:
            raise ValueError(f"Geçersiz kayıt sınırı: {max_entries}")
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._entries: dict[Hashable, tuple[float, V]] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        """Kayıt ömrü."""
        return self._ttl

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: Hashable) -> V | None:
        """Süresi dolmamış değeri döndür, yoksa None."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                logger.debug(f"Önbellek kaydı süresi doldu: {key}")
                return None
            return value

    def set(self, key: Hashable, value: V) -> None:
        """Değeri kaydet."""
        with self._lock:
            self._entries.pop(key, None)
            if len(self._entries) >= self._max_entries:
                oldest = next(iter(self._entries))
                del self._entries[oldest]
                logger.debug(f"Önbellek dolu, en eski kayıt silindi: {oldest}")
            self._entries[key] = (self._clock() + self._ttl, value)

    def get_or_set(self, key: Hashable, factory: Callable[[], V]) -> V:
        """Kayıt yoksa factory ile oluştur ve sakla."""
        value = self.get(key)
        if value is None:
            value = factory()
            self.set(key, value)
        return value

    def clear(self) -> None:
        """Tüm kayıtları sil."""
        with self._lock:
            self._entries.clear()
