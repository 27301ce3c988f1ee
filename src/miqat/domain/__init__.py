"""Domain layer - Value objects, enums and solar math."""

from miqat.domain.hijri import HijriDate, format_hijri, to_hijri
from miqat.domain.models import (
    KAABA_LATITUDE,
    KAABA_LONGITUDE,
    AsrSchool,
    CalculationMethod,
    ExtraTimes,
    Language,
    Location,
    MethodParams,
    PrayerName,
    PrayerInstant,
    PrayerOffsets,
    PrayerTime,
    PrayerTimeSet,
    QiblaResult,
)

__all__ = [
    "KAABA_LATITUDE",
    "KAABA_LONGITUDE",
    "AsrSchool",
    "CalculationMethod",
    "ExtraTimes",
    "HijriDate",
    "Language",
    "Location",
    "MethodParams",
    "PrayerName",
    "PrayerInstant",
    "PrayerOffsets",
    "PrayerTime",
    "PrayerTimeSet",
    "QiblaResult",
    "format_hijri",
    "to_hijri",
]
