"""Service layer - Calculation engine and business logic."""

from miqat.services.calculator import (
    compute_distance_to_mecca,
    compute_prayer_times,
    compute_qibla,
    compute_qibla_direction,
)
from miqat.services.ports import CachePort, PrayerTimeCalculatorPort
from miqat.services.prayer_service import PrayerService

__all__ = [
    "CachePort",
    "PrayerService",
    "PrayerTimeCalculatorPort",
    "compute_distance_to_mecca",
    "compute_prayer_times",
    "compute_qibla",
    "compute_qibla_direction",
]
