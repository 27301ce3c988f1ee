"""Solar position math for prayer time calculation.

All angles are in degrees and all times are fractional hours unless noted.
Formulas follow the low-precision solar coordinates used by the PrayTimes
algorithm family (accurate to about one arcminute for this era).
"""

import math
from enum import Enum

J2000 = 2451545.0

# Güneş yarıçapı + atmosferik kırılma
SUNRISE_ANGLE = 0.833

EARTH_RADIUS_KM = 6371.0


class Direction(str, Enum):
    """Öğleye göre olay yönü."""

    COUNTER_CLOCKWISE = "ccw"  # öğleden önce
    CLOCKWISE = "cw"  # öğleden sonra


def fix_hour(hours: float) -> float:
    """Saati [0, 24) aralığına sar."""
    return ((hours % 24) + 24) % 24


def fix_angle(degrees: float) -> float:
    """Açıyı [0, 360) aralığına sar."""
    return ((degrees % 360) + 360) % 360


def julian_date(year: int, month: int, day: int) -> float:
    """Gregoryen tarihi Julian tarihine çevir."""
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5


def _julian_centuries(jd: float) -> float:
    return (jd - J2000) / 36525


def _obliquity(jd: float) -> float:
    return 23.439 - 0.00000036 * (jd - J2000)


def sun_declination(jd: float) -> float:
    """Güneşin deklinasyonu (derece)."""
    t = _julian_centuries(jd)
    mean_longitude = 280.46646 + 36000.76983 * t + 0.0003032 * t * t
    mean_anomaly = 357.52911 + 35999.05029 * t - 0.0001537 * t * t

    center = (
        (1.914602 - 0.004817 * t - 0.000014 * t * t) * math.sin(math.radians(mean_anomaly))
        + (0.019993 - 0.000101 * t) * math.sin(math.radians(2 * mean_anomaly))
        + 0.000289 * math.sin(math.radians(3 * mean_anomaly))
    )

    true_longitude = mean_longitude + center
    omega = 125.04 - 1934.136 * t
    apparent_longitude = true_longitude - 0.00569 - 0.00478 * math.sin(math.radians(omega))

    return math.degrees(
        math.asin(
            math.sin(math.radians(_obliquity(jd))) * math.sin(math.radians(apparent_longitude))
        )
    )


def equation_of_time(jd: float) -> float:
    """Zaman denklemi (dakika)."""
    t = _julian_centuries(jd)
    mean_longitude = math.radians(280.46646 + 36000.76983 * t)
    mean_anomaly = math.radians(357.52911 + 35999.05029 * t)
    eccentricity = 0.016708634 - 0.000042037 * t

    y = math.tan(math.radians(_obliquity(jd)) / 2) ** 2

    eq_time = (
        y * math.sin(2 * mean_longitude)
        - 2 * eccentricity * math.sin(mean_anomaly)
        + 4 * eccentricity * y * math.sin(mean_anomaly) * math.cos(2 * mean_longitude)
        - 0.5 * y * y * math.sin(4 * mean_longitude)
        - 1.25 * eccentricity * eccentricity * math.sin(2 * mean_anomaly)
    )

    return math.degrees(eq_time) * 4


def mid_day(eq_time: float, longitude: float, timezone: float) -> float:
    """Yerel saatle güneşin meridyen geçişi."""
    return fix_hour(12 - eq_time / 60 - longitude / 15 + timezone)


def sun_angle_time(
    angle: float,
    noon: float,
    latitude: float,
    declination: float,
    direction: Direction,
) -> float | None:
    """
    Güneşin ufkun `angle` derece altına indiği saati bul.

    Negatif açı ufkun üstündeki bir yüksekliği ifade eder. Güneş o
    yüksekliğe hiç ulaşmıyorsa (kutup gündüzü/gecesi) None döner.
    """
    lat = math.radians(latitude)
    dec = math.radians(declination)
    cos_h = (-math.sin(math.radians(angle)) - math.sin(lat) * math.sin(dec)) / (
        math.cos(lat) * math.cos(dec)
    )
    if not -1 <= cos_h <= 1:
        return None

    hours = math.degrees(math.acos(cos_h)) / 15
    if direction is Direction.COUNTER_CLOCKWISE:
        return noon - hours
    return noon + hours


def asr_angle(factor: int, latitude: float, declination: float) -> float:
    """İkindi anında güneşin ufuktan yüksekliği (derece)."""
    return math.degrees(
        math.atan(1 / (factor + math.tan(math.radians(abs(latitude - declination)))))
    )


def asr_time(factor: int, noon: float, latitude: float, declination: float) -> float | None:
    """Gölge boyu = factor * cisim boyu + öğle gölgesi olduğunda ikindi."""
    altitude = asr_angle(factor, latitude, declination)
    return sun_angle_time(-altitude, noon, latitude, declination, Direction.CLOCKWISE)


def time_diff(start: float, end: float) -> float:
    """İki saat arasındaki fark (gece yarısını geçebilir)."""
    return fix_hour(end - start)


def initial_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Büyük daire başlangıç kerterizi, kuzeyden saat yönünde [0, 360)."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta = math.radians(lon2 - lon1)

    y = math.sin(delta)
    x = math.cos(phi1) * math.tan(phi2) - math.sin(phi1) * math.cos(delta)
    return fix_angle(math.degrees(math.atan2(y, x)))


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine ile büyük daire uzaklığı (km)."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
