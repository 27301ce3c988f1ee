"""Service layer interfaces (ports)."""

from abc import ABC, abstractmethod
from collections.abc import Hashable
from datetime import date
from typing import Generic, TypeVar

from miqat.domain.models import PrayerTimeSet

V = TypeVar("V")


class PrayerTimeCalculatorPort(ABC):
    """Namaz vakti hesaplama arayüzü (port)."""

    @abstractmethod
    def calculate(self, target_date: date) -> PrayerTimeSet:
        """Belirtilen tarih için namaz vakitlerini hesapla."""

    @abstractmethod
    def calculate_range(self, start_date: date, days: int) -> list[PrayerTimeSet]:
        """Belirtilen tarihten itibaren n gün için vakitleri hesapla."""


class CachePort(ABC, Generic[V]):
    """Süreli önbellek arayüzü (port)."""

    @abstractmethod
    def get(self, key: Hashable) -> V | None:
        """Süresi dolmamış değeri döndür, yoksa None."""

    @abstractmethod
    def set(self, key: Hashable, value: V) -> None:
        """Değeri kaydet."""

    @abstractmethod
    def clear(self) -> None:
        """Tüm kayıtları sil."""
