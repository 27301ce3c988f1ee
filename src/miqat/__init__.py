"""Miqat - Offline prayer time and Qibla calculator."""

from miqat.domain.models import AsrSchool, CalculationMethod, PrayerName, PrayerTimeSet, QiblaResult
from miqat.services.calculator import (
    compute_distance_to_mecca,
    compute_prayer_times,
    compute_qibla,
    compute_qibla_direction,
)

__version__ = "0.1.0"

__all__ = [
    "AsrSchool",
    "CalculationMethod",
    "PrayerName",
    "PrayerTimeSet",
    "QiblaResult",
    "__version__",
    "compute_distance_to_mecca",
    "compute_prayer_times",
    "compute_qibla",
    "compute_qibla_direction",
]
