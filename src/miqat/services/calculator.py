"""Offline prayer time and Qibla calculation engine."""

import logging
from datetime import date, datetime

from miqat.domain.astronomy import (
    SUNRISE_ANGLE,
    Direction,
    asr_time,
    equation_of_time,
    fix_hour,
    haversine_distance,
    initial_bearing,
    julian_date,
    mid_day,
    sun_angle_time,
    sun_declination,
    time_diff,
)
from miqat.domain.models import (
    KAABA_LATITUDE,
    KAABA_LONGITUDE,
    AsrSchool,
    CalculationMethod,
    ExtraTimes,
    PrayerName,
    PrayerTime,
    PrayerTimeSet,
    QiblaResult,
    format_timezone,
)

logger = logging.getLogger(__name__)

# Öğle için güvenlik payı (saat)
DHUHR_MARGIN_HOURS = 1 / 60

# İmsak, sabahtan bu kadar dakika önce
IMSAK_MINUTES = 10


def _extra_times(
    method: CalculationMethod,
    fajr: float | None,
    sunrise: float | None,
    sunset: float | None,
) -> ExtraTimes:
    """İmsak, gece yarısı ve gecenin üçte birlerini hesapla."""
    imsak = fix_hour(fajr - IMSAK_MINUTES / 60) if fajr is not None else None
    if sunset is None or sunrise is None:
        return ExtraTimes(imsak=imsak, sunset=sunset)

    night = time_diff(sunset, sunrise)
    if method is CalculationMethod.JAFARI and fajr is not None:
        midnight = sunset + time_diff(sunset, fajr) / 2
    else:
        midnight = sunset + night / 2

    return ExtraTimes(
        imsak=imsak,
        sunset=sunset,
        midnight=fix_hour(midnight),
        first_third=fix_hour(sunset + night / 3),
        last_third=fix_hour(sunset + 2 * night / 3),
    )


def compute_prayer_times(
    target_date: date,
    latitude: float,
    longitude: float,
    timezone_offset: float,
    method: str | CalculationMethod = CalculationMethod.MWL,
    asr_school: AsrSchool = AsrSchool.SHAFI,
) -> PrayerTimeSet:
    """
    Bir gün için namaz vakitlerini hesapla.

    Args:
        target_date: Takvim günü (saat bilgisi yok sayılır)
        latitude: Enlem (derece)
        longitude: Boylam (derece, doğu pozitif)
        timezone_offset: UTC'ye göre saat farkı (ör. 5.5)
        method: Hesaplama metodu adı veya CalculationMethod, bilinmeyen isim MWL olur
        asr_school: İkindi mezhebi (gölge çarpanı)

    Returns:
        Altı vakitlik PrayerTimeSet. Kutup bölgelerinde oluşmayan vakitlerin
        değeri None'dır.
    """
    method = CalculationMethod.from_name(method)
    params = method.params
    if isinstance(target_date, datetime):
        target_date = target_date.date()

    jd = julian_date(target_date.year, target_date.month, target_date.day)
    declination = sun_declination(jd)
    eq_time = equation_of_time(jd)

    noon = mid_day(eq_time, longitude, timezone_offset)

    morning, evening = Direction.COUNTER_CLOCKWISE, Direction.CLOCKWISE
    fajr = sun_angle_time(params.fajr_angle, noon, latitude, declination, morning)
    sunrise = sun_angle_time(SUNRISE_ANGLE, noon, latitude, declination, morning)
    dhuhr = noon + DHUHR_MARGIN_HOURS
    asr = asr_time(asr_school.shadow_factor, noon, latitude, declination)
    maghrib = sun_angle_time(SUNRISE_ANGLE, noon, latitude, declination, evening)

    if params.uses_isha_interval:
        isha = maghrib + params.maghrib_minutes / 60 if maghrib is not None else None
    else:
        isha = sun_angle_time(params.isha_angle, noon, latitude, declination, evening)

    values = {
        PrayerName.FAJR: fajr,
        PrayerName.SUNRISE: sunrise,
        PrayerName.DHUHR: dhuhr,
        PrayerName.ASR: asr,
        PrayerName.MAGHRIB: maghrib,
        PrayerName.ISHA: isha,
    }
    missing = [name.value for name, value in values.items() if value is None]
    if missing:
        logger.debug(
            f"{target_date} ({latitude:.4f}, {longitude:.4f}) için oluşmayan vakitler: {missing}"
        )

    return PrayerTimeSet(
        date=target_date,
        prayers=tuple(PrayerTime(name=name, value=value) for name, value in values.items()),
        latitude=latitude,
        longitude=longitude,
        timezone=format_timezone(timezone_offset),
        method=method,
        asr_school=asr_school,
        extras=_extra_times(method, fajr, sunrise, maghrib),
    )


def compute_qibla_direction(latitude: float, longitude: float) -> float:
    """
    Kıble yönü, gerçek kuzeyden saat yönünde [0, 360).

    Kabe'nin kendisinde yön tanımsızdır, 0.0 döner.
    """
    if latitude == KAABA_LATITUDE and longitude == KAABA_LONGITUDE:
        logger.debug("Konum Kabe ile aynı, kıble yönü tanımsız.")
        return 0.0
    return initial_bearing(latitude, longitude, KAABA_LATITUDE, KAABA_LONGITUDE)


def compute_distance_to_mecca(latitude: float, longitude: float) -> float:
    """Kabe'ye büyük daire uzaklığı (km)."""
    return haversine_distance(latitude, longitude, KAABA_LATITUDE, KAABA_LONGITUDE)


def compute_qibla(latitude: float, longitude: float) -> QiblaResult:
    """Kıble yönü ve uzaklığı birlikte."""
    return QiblaResult(
        latitude=latitude,
        longitude=longitude,
        direction=compute_qibla_direction(latitude, longitude),
        distance_km=compute_distance_to_mecca(latitude, longitude),
    )
