"""API Routes."""

import logging
from datetime import date, datetime, timedelta
from typing import Annotated

from babel.dates import format_date
from fastapi import APIRouter, Depends, HTTPException, Query, status

from miqat.api.dependencies import AppState, get_app_state
from miqat.api.schemas import (
    AsrSchoolSchema,
    ExtraTimesSchema,
    LocationSchema,
    MethodSchema,
    NextPrayerSchema,
    PrayerNameSchema,
    PrayerTimeSchema,
    PrayerTimesSchema,
    QiblaSchema,
)
from miqat.domain.hijri import format_hijri
from miqat.domain.models import (
    AsrSchool,
    CalculationMethod,
    Language,
    Location,
    PrayerName,
    PrayerOffsets,
    PrayerTimeSet,
)
from miqat.services.calculator import compute_qibla
from miqat.services.prayer_service import PrayerService

logger = logging.getLogger(__name__)

router = APIRouter()

Latitude = Annotated[float, Query(ge=-90, le=90, description="Enlem")]
Longitude = Annotated[float, Query(ge=-180, le=180, description="Boylam")]
TimezoneOffset = Annotated[
    float | None, Query(ge=-14, le=14, description="UTC farkı (saat), boşsa konumdan bulunur")
]
MethodName = Annotated[str | None, Query(description="Hesaplama metodu (bilinmeyen isim MWL olur)")]
SchoolParam = Annotated[AsrSchool | None, Query(description="İkindi mezhebi")]
LanguageParam = Annotated[Language | None, Query(description="Görüntüleme dili")]
TuneParam = Annotated[
    str | None, Query(description="Dakika ayarları: Fajr,Sunrise,Dhuhr,Asr,Maghrib,Isha")
]


def _format_timedelta(td: timedelta) -> str:
    """Timedelta'yı okunabilir formata çevir."""
    total_seconds = int(td.total_seconds())
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def _build_service(
    state: AppState,
    lat: float,
    lng: float,
    tz: float | None,
    method: str | None,
    school: AsrSchool | None,
    tune: str | None,
) -> PrayerService:
    """İstek parametrelerinden servis oluştur."""
    try:
        offsets = PrayerOffsets.from_tune(tune) if tune else None
        return PrayerService(
            Location(latitude=lat, longitude=lng),
            method=method or state.config.method,
            asr_school=school or state.config.asr_school,
            offsets=offsets,
            timezone_offset=tz,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


def _cached_day(
    state: AppState,
    service: PrayerService,
    target_date: date,
    tune: str | None,
) -> PrayerTimeSet:
    """Günlük vakitleri önbellekten getir veya hesapla."""
    key = (
        service.location.latitude,
        service.location.longitude,
        target_date,
        service.timezone_name,
        service.method,
        service.asr_school,
        tune or "",
    )
    return state.times_cache.get_or_set(key, lambda: service.calculate(target_date))


def _to_schema(times: PrayerTimeSet, language: Language) -> PrayerTimesSchema:
    """PrayerTimeSet'i API şemasına çevir."""
    hijri_date = times.hijri_date or format_hijri(times.date, language)
    return PrayerTimesSchema(
        date=times.date,
        date_formatted=format_date(times.date, "d MMMM yyyy, EEEE", locale=language.value),
        hijri_date=hijri_date,
        location=LocationSchema(
            latitude=times.latitude, longitude=times.longitude, city=times.city
        ),
        timezone=times.timezone,
        method=times.method,
        asr_school=times.asr_school,
        prayers=[
            PrayerTimeSchema(
                name=prayer.name,
                name_arabic=prayer.arabic_name,
                name_english=prayer.english_name,
                display_name=prayer.name.label(language),
                time=prayer.time,
                timestamp=prayer.value,
                is_polar=prayer.is_polar,
            )
            for prayer in times.prayers
        ],
        extras=ExtraTimesSchema(**times.extras.to_dict()),
    )


# ============== Prayer Times ==============


@router.get("/times", response_model=PrayerTimesSchema)
async def get_times(
    state: Annotated[AppState, Depends(get_app_state)],
    lat: Latitude,
    lng: Longitude,
    target_date: Annotated[date | None, Query(alias="date", description="YYYY-MM-DD")] = None,
    tz: TimezoneOffset = None,
    method: MethodName = None,
    school: SchoolParam = None,
    lang: LanguageParam = None,
    tune: TuneParam = None,
) -> PrayerTimesSchema:
    """Bir günün namaz vakitlerini getir."""
    service = _build_service(state, lat, lng, tz, method, school, tune)
    if target_date is None:
        target_date = datetime.now(service.timezone).date()

    times = _cached_day(state, service, target_date, tune)
    return _to_schema(times, lang or state.config.language)


@router.get("/times/month", response_model=list[PrayerTimesSchema])
async def get_month_times(
    state: Annotated[AppState, Depends(get_app_state)],
    lat: Latitude,
    lng: Longitude,
    year: Annotated[int, Query(ge=1900, le=2200)],
    month: Annotated[int, Query(ge=1, le=12)],
    tz: TimezoneOffset = None,
    method: MethodName = None,
    school: SchoolParam = None,
    lang: LanguageParam = None,
    tune: TuneParam = None,
) -> list[PrayerTimesSchema]:
    """Aylık namaz vakitlerini getir."""
    service = _build_service(state, lat, lng, tz, method, school, tune)
    language = lang or state.config.language
    return [_to_schema(times, language) for times in service.calculate_month(year, month)]


@router.get("/times/next", response_model=NextPrayerSchema)
async def get_next_prayer(
    state: Annotated[AppState, Depends(get_app_state)],
    lat: Latitude,
    lng: Longitude,
    tz: TimezoneOffset = None,
    method: MethodName = None,
    school: SchoolParam = None,
    lang: LanguageParam = None,
    tune: TuneParam = None,
) -> NextPrayerSchema:
    """Mevcut vakti ve sonraki vakte kalan süreyi getir."""
    service = _build_service(state, lat, lng, tz, method, school, tune)
    language = lang or state.config.language

    now = datetime.now(service.timezone)
    current = service.get_current_prayer(now)
    next_prayer = service.get_next_prayer(now)

    return NextPrayerSchema(
        current_time=now.strftime("%H:%M:%S"),
        timezone=service.timezone_name,
        current_prayer=current,
        current_prayer_display=current.label(language),
        next_prayer=next_prayer.name,
        next_prayer_display=next_prayer.name.label(language),
        next_prayer_time=next_prayer.time_str,
        countdown=_format_timedelta(next_prayer.at - now),
    )


# ============== Qibla ==============


@router.get("/qibla", response_model=QiblaSchema)
async def get_qibla(
    state: Annotated[AppState, Depends(get_app_state)],
    lat: Latitude,
    lng: Longitude,
) -> QiblaSchema:
    """Kıble yönünü ve Kabe'ye uzaklığı getir."""
    qibla = state.qibla_cache.get_or_set((lat, lng), lambda: compute_qibla(lat, lng))
    return QiblaSchema(
        location=LocationSchema(latitude=lat, longitude=lng),
        direction=qibla.direction,
        distance=qibla.distance_km,
        compass_point=qibla.compass_point,
    )


# ============== Utility ==============


@router.get("/methods", response_model=list[MethodSchema])
async def get_methods() -> list[MethodSchema]:
    """Hesaplama metotlarını listele."""
    return [
        MethodSchema(
            value=method,
            api_id=method.api_id,
            label=method.label,
            region=method.region,
            fajr_angle=method.params.fajr_angle,
            isha_angle=method.params.isha_angle,
            isha_minutes=method.params.maghrib_minutes,
        )
        for method in CalculationMethod
    ]


@router.get("/schools", response_model=list[AsrSchoolSchema])
async def get_schools() -> list[AsrSchoolSchema]:
    """İkindi mezheplerini listele."""
    return [
        AsrSchoolSchema(value=s, display_name=s.display_name, shadow_factor=s.shadow_factor)
        for s in AsrSchool
    ]


@router.get("/prayers", response_model=list[PrayerNameSchema])
async def get_prayer_names() -> list[PrayerNameSchema]:
    """Namaz vakti isimlerini listele."""
    return [
        PrayerNameSchema(value=p, name_arabic=p.arabic_name, name_english=p.english_name)
        for p in PrayerName
    ]
