"""Pydantic schemas for API."""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, Field

from miqat.domain.models import AsrSchool, CalculationMethod, PrayerName


class LocationSchema(BaseModel):
    """Konum şeması."""

    latitude: Annotated[float, Field(ge=-90, le=90, description="Enlem")]
    longitude: Annotated[float, Field(ge=-180, le=180, description="Boylam")]
    city: str = Field(default="", description="Şehir adı")


class PrayerTimeSchema(BaseModel):
    """Tek namaz vakti şeması."""

    name: PrayerName
    name_arabic: str
    name_english: str
    display_name: str
    time: str  # HH:MM formatında, oluşmayan vakitte "--:--"
    timestamp: float | None = Field(default=None, description="Kesirli saat")
    is_polar: bool = False


class ExtraTimesSchema(BaseModel):
    """Ek vakitler şeması."""

    imsak: str
    sunset: str
    midnight: str
    first_third: str
    last_third: str


class PrayerTimesSchema(BaseModel):
    """Günlük namaz vakitleri şeması."""

    date: date
    date_formatted: str
    hijri_date: str
    location: LocationSchema
    timezone: str
    method: CalculationMethod
    asr_school: AsrSchool
    prayers: list[PrayerTimeSchema]
    extras: ExtraTimesSchema


class NextPrayerSchema(BaseModel):
    """Mevcut/sonraki vakit şeması."""

    current_time: str
    timezone: str
    current_prayer: PrayerName
    current_prayer_display: str
    next_prayer: PrayerName
    next_prayer_display: str
    next_prayer_time: str
    countdown: str


class QiblaSchema(BaseModel):
    """Kıble şeması."""

    location: LocationSchema
    direction: Annotated[float, Field(ge=0, lt=360, description="Kuzeyden saat yönünde derece")]
    distance: Annotated[float, Field(ge=0, description="Kabe'ye uzaklık (km)")]
    compass_point: str


class MethodSchema(BaseModel):
    """Hesaplama metodu şeması."""

    value: CalculationMethod
    api_id: int
    label: str
    region: str
    fajr_angle: float
    isha_angle: float
    isha_minutes: float


class AsrSchoolSchema(BaseModel):
    """İkindi mezhebi şeması."""

    value: AsrSchool
    display_name: str
    shadow_factor: int


class PrayerNameSchema(BaseModel):
    """Vakit adı şeması."""

    value: PrayerName
    name_arabic: str
    name_english: str
