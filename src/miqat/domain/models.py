"""Domain models and value objects."""

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Self

logger = logging.getLogger(__name__)

# Kabe koordinatları
KAABA_LATITUDE = 21.4225
KAABA_LONGITUDE = 39.8262

POLAR_TIME_STR = "--:--"


class Language(str, Enum):
    """Görüntüleme dilleri."""

    ARABIC = "ar"
    ENGLISH = "en"


class PrayerName(str, Enum):
    """Namaz vakti isimleri (saat sırasıyla)."""

    FAJR = "fajr"
    SUNRISE = "sunrise"
    DHUHR = "dhuhr"
    ASR = "asr"
    MAGHRIB = "maghrib"
    ISHA = "isha"

    @property
    def arabic_name(self) -> str:
        """Arapça adı."""
        names = {
            PrayerName.FAJR: "الفجر",
            PrayerName.SUNRISE: "الشروق",
            PrayerName.DHUHR: "الظهر",
            PrayerName.ASR: "العصر",
            PrayerName.MAGHRIB: "المغرب",
            PrayerName.ISHA: "العشاء",
        }
        return names[self]

    @property
    def english_name(self) -> str:
        """İngilizce adı."""
        return self.value.capitalize()

    def label(self, language: Language = Language.ENGLISH) -> str:
        """Dile göre görüntüleme adı."""
        if language == Language.ARABIC:
            return self.arabic_name
        return self.english_name


@dataclass(frozen=True)
class MethodParams:
    """Bir hesaplama metodunun açı/dakika parametreleri."""

    fajr_angle: float
    isha_angle: float
    maghrib_minutes: float = 0

    @property
    def uses_isha_interval(self) -> bool:
        """Yatsı, akşamdan sabit dakika sonra mı?"""
        return self.maghrib_minutes > 0


class CalculationMethod(str, Enum):
    """Çevrimdışı hesaplama metotları."""

    MWL = "MWL"
    ISNA = "ISNA"
    EGYPT = "Egypt"
    MAKKAH = "Makkah"
    KARACHI = "Karachi"
    TEHRAN = "Tehran"
    JAFARI = "Jafari"

    @property
    def params(self) -> MethodParams:
        """Metot parametreleri."""
        return _METHOD_PARAMS[self]

    @property
    def label(self) -> str:
        """Metodun uzun adı."""
        labels = {
            CalculationMethod.MWL: "Muslim World League",
            CalculationMethod.ISNA: "Islamic Society of North America",
            CalculationMethod.EGYPT: "Egyptian General Authority of Survey",
            CalculationMethod.MAKKAH: "Umm Al-Qura University, Makkah",
            CalculationMethod.KARACHI: "University of Islamic Sciences, Karachi",
            CalculationMethod.TEHRAN: "Institute of Geophysics, Tehran",
            CalculationMethod.JAFARI: "Shia Ithna-Ashari, Leva Institute, Qum",
        }
        return labels[self]

    @property
    def region(self) -> str:
        """Metodun yaygın kullanıldığı bölge."""
        regions = {
            CalculationMethod.MWL: "Europe, Far East, parts of US",
            CalculationMethod.ISNA: "North America",
            CalculationMethod.EGYPT: "Africa, Syria, Lebanon",
            CalculationMethod.MAKKAH: "Arabian Peninsula",
            CalculationMethod.KARACHI: "Pakistan, Bangladesh, India",
            CalculationMethod.TEHRAN: "Iran",
            CalculationMethod.JAFARI: "Shia communities",
        }
        return regions[self]

    @classmethod
    def from_name(cls, name: "str | CalculationMethod | None") -> "CalculationMethod":
        """İsimden metot bul, bilinmeyen isimler MWL'ye düşer."""
        if isinstance(name, CalculationMethod):
            return name
        if name:
            wanted = name.strip().lower()
            for method in cls:
                if method.value.lower() == wanted or method.name.lower() == wanted:
                    return method
        logger.warning(f"Bilinmeyen hesaplama metodu: {name!r}, MWL kullanılıyor.")
        return cls.MWL

    @classmethod
    def from_api_id(cls, method_id: int) -> "CalculationMethod":
        """Uzak servis metot numarasından çevrimdışı metodu bul."""
        method = _API_METHOD_IDS.get(method_id)
        if method is None:
            logger.warning(f"Metot numarası {method_id} desteklenmiyor, MWL kullanılıyor.")
            return cls.MWL
        return method

    @property
    def api_id(self) -> int:
        """Uzak servislerdeki metot numarası."""
        for method_id, method in _API_METHOD_IDS.items():
            if method is self:
                return method_id
        raise KeyError(self)


_METHOD_PARAMS: dict[CalculationMethod, MethodParams] = {
    CalculationMethod.MWL: MethodParams(fajr_angle=18, isha_angle=17),
    CalculationMethod.ISNA: MethodParams(fajr_angle=15, isha_angle=15),
    CalculationMethod.EGYPT: MethodParams(fajr_angle=19.5, isha_angle=17.5),
    # Yatsı akşamdan 90 dakika sonra
    CalculationMethod.MAKKAH: MethodParams(fajr_angle=18.5, isha_angle=0, maghrib_minutes=90),
    CalculationMethod.KARACHI: MethodParams(fajr_angle=18, isha_angle=18),
    CalculationMethod.TEHRAN: MethodParams(fajr_angle=17.7, isha_angle=14),
    CalculationMethod.JAFARI: MethodParams(fajr_angle=16, isha_angle=14),
}

_API_METHOD_IDS: dict[int, CalculationMethod] = {
    0: CalculationMethod.JAFARI,
    1: CalculationMethod.KARACHI,
    2: CalculationMethod.ISNA,
    3: CalculationMethod.MWL,
    4: CalculationMethod.MAKKAH,
    5: CalculationMethod.EGYPT,
    7: CalculationMethod.TEHRAN,
}


class AsrSchool(str, Enum):
    """İkindi için fıkhi mezhep."""

    SHAFI = "shafi"
    HANAFI = "hanafi"

    @property
    def shadow_factor(self) -> int:
        """Gölge boyu çarpanı."""
        return 2 if self is AsrSchool.HANAFI else 1

    @property
    def display_name(self) -> str:
        """Görüntüleme adı."""
        return "Hanafi" if self is AsrSchool.HANAFI else "Shafi"

    @classmethod
    def from_api_id(cls, school_id: int) -> "AsrSchool":
        """Uzak servis numarasından (0=Şafi, 1=Hanefi)."""
        if school_id not in (0, 1):
            raise ValueError(f"Geçersiz mezhep numarası: {school_id}")
        return cls.HANAFI if school_id == 1 else cls.SHAFI


@dataclass(frozen=True)
class Location:
    """Konum bilgisi (immutable value object)."""

    latitude: float
    longitude: float
    city: str = ""

    def __post_init__(self) -> None:
        """Koordinat doğrulaması."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Geçersiz enlem: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Geçersiz boylam: {self.longitude}")


@dataclass(frozen=True)
class PrayerOffsets:
    """Hesaplanan vakitlere uygulanacak ince ayar (dakika)."""

    fajr: int = 0
    sunrise: int = 0
    dhuhr: int = 0
    asr: int = 0
    maghrib: int = 0
    isha: int = 0

    def get_offset(self, prayer: PrayerName) -> int:
        """Belirtilen vakit için offset döndür."""
        return getattr(self, prayer.value)

    @property
    def is_zero(self) -> bool:
        """Hiç ayar yok mu?"""
        return all(self.get_offset(prayer) == 0 for prayer in PrayerName)

    @classmethod
    def from_tune(cls, tune: str) -> Self:
        """Virgülle ayrılmış 'Fajr,Sunrise,Dhuhr,Asr,Maghrib,Isha' dakikalarından oluştur."""
        parts = [part.strip() for part in tune.split(",")]
        if len(parts) != len(PrayerName):
            raise ValueError(f"Geçersiz ince ayar: {tune!r}")
        try:
            values = [int(part) for part in parts]
        except ValueError as e:
            raise ValueError(f"Geçersiz ince ayar: {tune!r}") from e
        return cls(*values)


def format_hours(hours: float | None) -> str:
    """Kesirli saati HH:MM biçimine çevir."""
    if hours is None:
        return POLAR_TIME_STR
    total_minutes = round(hours * 60) % (24 * 60)
    hour, minute = divmod(total_minutes, 60)
    return f"{hour:02d}:{minute:02d}"


@dataclass(frozen=True)
class PrayerTime:
    """Tek bir vakit: isim, etiketler, saat metni ve ham kesirli saat."""

    name: PrayerName
    value: float | None

    @property
    def arabic_name(self) -> str:
        return self.name.arabic_name

    @property
    def english_name(self) -> str:
        return self.name.english_name

    @property
    def time(self) -> str:
        """HH:MM formatında."""
        return format_hours(self.value)

    @property
    def is_polar(self) -> bool:
        """Güneş bu tarihte/enlemde gerekli açıya ulaşmıyor mu?"""
        return self.value is None

    def shifted(self, minutes: float) -> "PrayerTime":
        """Dakika kaydırılmış kopya."""
        if self.value is None or not minutes:
            return self
        return replace(self, value=self.value + minutes / 60)

    def to_dict(self) -> dict[str, str | float | None]:
        """Dictionary olarak döndür."""
        return {
            "name": self.name.value,
            "name_arabic": self.arabic_name,
            "name_english": self.english_name,
            "time": self.time,
            "timestamp": self.value,
        }


@dataclass(frozen=True)
class ExtraTimes:
    """Namaz dışı ek vakitler (kesirli saat, yoksa None)."""

    imsak: float | None = None
    sunset: float | None = None
    midnight: float | None = None
    first_third: float | None = None
    last_third: float | None = None

    def to_dict(self) -> dict[str, str]:
        """HH:MM değerleriyle dictionary."""
        return {
            "imsak": format_hours(self.imsak),
            "sunset": format_hours(self.sunset),
            "midnight": format_hours(self.midnight),
            "first_third": format_hours(self.first_third),
            "last_third": format_hours(self.last_third),
        }


def format_timezone(offset_hours: float) -> str:
    """UTC offset etiketini oluştur (ör. UTC+5.5)."""
    sign = "+" if offset_hours >= 0 else "-"
    return f"UTC{sign}{abs(offset_hours):g}"


@dataclass(frozen=True)
class PrayerTimeSet:
    """Bir günün hesaplanmış vakitleri."""

    date: date
    prayers: tuple[PrayerTime, ...]
    latitude: float
    longitude: float
    timezone: str
    method: CalculationMethod
    asr_school: AsrSchool = AsrSchool.SHAFI
    extras: ExtraTimes = field(default_factory=ExtraTimes)
    hijri_date: str = ""
    city: str = ""
    country: str = ""

    def __post_init__(self) -> None:
        """Vakitler sabit sırada olmalı."""
        names = tuple(prayer.name for prayer in self.prayers)
        if names != tuple(PrayerName):
            raise ValueError(f"Geçersiz vakit sırası: {[n.value for n in names]}")

    def get(self, prayer: PrayerName) -> PrayerTime:
        """Belirtilen vakti döndür."""
        return self.prayers[list(PrayerName).index(prayer)]

    def get_time(self, prayer: PrayerName) -> str:
        """Belirtilen vaktin HH:MM metnini döndür."""
        return self.get(prayer).time

    @property
    def fajr(self) -> PrayerTime:
        return self.get(PrayerName.FAJR)

    @property
    def sunrise(self) -> PrayerTime:
        return self.get(PrayerName.SUNRISE)

    @property
    def dhuhr(self) -> PrayerTime:
        return self.get(PrayerName.DHUHR)

    @property
    def asr(self) -> PrayerTime:
        return self.get(PrayerName.ASR)

    @property
    def maghrib(self) -> PrayerTime:
        return self.get(PrayerName.MAGHRIB)

    @property
    def isha(self) -> PrayerTime:
        return self.get(PrayerName.ISHA)

    @property
    def has_polar_events(self) -> bool:
        """Herhangi bir vakit hesaplanamadı mı?"""
        return any(prayer.is_polar for prayer in self.prayers)

    def with_offsets(self, offsets: PrayerOffsets) -> Self:
        """İnce ayar uygulanmış yeni set."""
        if offsets.is_zero:
            return self
        return replace(
            self,
            prayers=tuple(p.shifted(offsets.get_offset(p.name)) for p in self.prayers),
        )

    def with_context(self, *, hijri_date: str = "", city: str = "", country: str = "") -> Self:
        """Dış katmanların doldurduğu alanlarla yeni set."""
        return replace(
            self,
            hijri_date=hijri_date or self.hijri_date,
            city=city or self.city,
            country=country or self.country,
        )

    def to_dict(self) -> dict:
        """Dictionary olarak döndür."""
        return {
            "date": self.date.isoformat(),
            "hijri_date": self.hijri_date,
            "city": self.city,
            "country": self.country,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "timezone": self.timezone,
            "method": self.method.value,
            "asr_school": self.asr_school.value,
            "prayers": [prayer.to_dict() for prayer in self.prayers],
            **self.extras.to_dict(),
        }


@dataclass(frozen=True)
class PrayerInstant:
    """Takvime oturtulmuş vakit (geri sayım için)."""

    name: PrayerName
    at: datetime

    @property
    def time_str(self) -> str:
        """HH:MM formatında."""
        return self.at.strftime("%H:%M")


@dataclass(frozen=True)
class QiblaResult:
    """Kıble yönü ve Kabe'ye uzaklık."""

    latitude: float
    longitude: float
    direction: float
    distance_km: float

    @property
    def compass_point(self) -> str:
        """16'lık pusula yönü (ör. ESE)."""
        points = [
            "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
            "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
        ]  # fmt: skip
        return points[int((self.direction + 11.25) // 22.5) % 16]

    def to_dict(self) -> dict[str, float | str]:
        """Dictionary olarak döndür."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "direction": self.direction,
            "distance": self.distance_km,
            "compass_point": self.compass_point,
        }
