"""Prayer time calculation service."""

import calendar
import logging
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

from timezonefinder import TimezoneFinder

from miqat.domain.models import (
    AsrSchool,
    CalculationMethod,
    Location,
    PrayerInstant,
    PrayerName,
    PrayerOffsets,
    PrayerTimeSet,
    format_timezone,
)
from miqat.services.calculator import compute_prayer_times
from miqat.services.ports import PrayerTimeCalculatorPort

logger = logging.getLogger(__name__)

# Kutup bölgelerinde sonraki vakit aranırken bakılacak en fazla gün
MAX_LOOKAHEAD_DAYS = 2


def resolve_timezone_name(location: Location) -> str:
    """Koordinatların IANA timezone adı (bulunamazsa UTC)."""
    tz_name = TimezoneFinder().timezone_at(lat=location.latitude, lng=location.longitude)
    if tz_name is None:
        logger.warning(
            f"Timezone bulunamadı ({location.latitude}, {location.longitude}), UTC kullanılıyor."
        )
        return "UTC"
    return tz_name


class PrayerService(PrayerTimeCalculatorPort):
    """Konuma bağlı namaz vakti servisi."""

    def __init__(
        self,
        location: Location,
        *,
        method: str | CalculationMethod = CalculationMethod.MWL,
        asr_school: AsrSchool = AsrSchool.SHAFI,
        offsets: PrayerOffsets | None = None,
        timezone_name: str | None = None,
        timezone_offset: float | None = None,
    ) -> None:
        """
        Initialize prayer service.

        Args:
            location: Konum bilgisi
            method: Hesaplama metodu (bilinmeyen isim MWL olur)
            asr_school: İkindi mezhebi
            offsets: İnce ayar (dakika)
            timezone_name: IANA timezone adı, verilmezse koordinatlardan bulunur
            timezone_offset: Sabit UTC farkı (saat), verilirse timezone'un yerine geçer
        """
        self._location = location
        self._method = CalculationMethod.from_name(method)
        self._asr_school = asr_school
        self._offsets = offsets or PrayerOffsets()
        self._fixed_offset = timezone_offset

        self._tz_name, self._tz = self._resolve_tz(timezone_name)

    def _resolve_tz(self, timezone_name: str | None) -> tuple[str, tzinfo]:
        if timezone_name is None and self._fixed_offset is not None:
            fixed = timezone(timedelta(hours=self._fixed_offset))
            return format_timezone(self._fixed_offset), fixed
        name = timezone_name or resolve_timezone_name(self._location)
        return name, ZoneInfo(name)

    @property
    def location(self) -> Location:
        """Konum bilgisi."""
        return self._location

    @property
    def method(self) -> CalculationMethod:
        """Hesaplama metodu."""
        return self._method

    @property
    def asr_school(self) -> AsrSchool:
        """İkindi mezhebi."""
        return self._asr_school

    @property
    def offsets(self) -> PrayerOffsets:
        """İnce ayar."""
        return self._offsets

    @property
    def timezone(self) -> tzinfo:
        """Timezone nesnesi."""
        return self._tz

    @property
    def timezone_name(self) -> str:
        """Timezone adı."""
        return self._tz_name

    def timezone_offset(self, target_date: date) -> float:
        """Belirtilen gün için UTC farkı (saat, yaz saati dahil)."""
        if self._fixed_offset is not None:
            return self._fixed_offset
        offset = datetime.combine(target_date, time(12), tzinfo=self._tz).utcoffset()
        if offset is None:
            return 0.0
        return offset.total_seconds() / 3600

    def update_location(self, location: Location) -> None:
        """Konum güncelle ve timezone'u yeniden hesapla."""
        self._location = location
        self._tz_name, self._tz = self._resolve_tz(None)

    def update_offsets(self, offsets: PrayerOffsets) -> None:
        """İnce ayarı güncelle."""
        self._offsets = offsets

    def calculate(self, target_date: date) -> PrayerTimeSet:
        """Belirtilen tarih için namaz vakitlerini hesapla."""
        times = compute_prayer_times(
            target_date,
            self._location.latitude,
            self._location.longitude,
            self.timezone_offset(target_date),
            self._method,
            self._asr_school,
        )
        return times.with_offsets(self._offsets).with_context(city=self._location.city)

    def calculate_range(self, start_date: date, days: int) -> list[PrayerTimeSet]:
        """Belirtilen tarihten itibaren n gün için vakitleri hesapla."""
        if days < 1:
            raise ValueError(f"Geçersiz gün sayısı: {days}")
        return [self.calculate(start_date + timedelta(days=i)) for i in range(days)]

    def calculate_month(self, year: int, month: int) -> list[PrayerTimeSet]:
        """Bir ayın tüm günleri için vakitleri hesapla."""
        _, days_in_month = calendar.monthrange(year, month)
        return self.calculate_range(date(year, month, 1), days_in_month)

    def _localize(self, now: datetime | None) -> datetime:
        if now is None:
            return datetime.now(self._tz)
        if now.tzinfo is None:
            return now.replace(tzinfo=self._tz)
        return now.astimezone(self._tz)

    def instants(self, target_date: date) -> list[PrayerInstant]:
        """Günün oluşan vakitlerini saat sırasıyla datetime olarak döndür."""
        times = self.calculate(target_date)
        midnight = datetime.combine(target_date, time(0), tzinfo=self._tz)
        return [
            PrayerInstant(name=prayer.name, at=midnight + timedelta(hours=prayer.value))
            for prayer in times.prayers
            if prayer.value is not None
        ]

    def get_current_prayer(self, now: datetime | None = None) -> PrayerName:
        """Şu anki namaz vaktini döndür."""
        now = self._localize(now)

        for instant in reversed(self.instants(now.date())):
            if now >= instant.at:
                return instant.name

        # Gece yarısından sonra, yatsı vakti
        return PrayerName.ISHA

    def get_next_prayer(self, now: datetime | None = None) -> PrayerInstant:
        """Sonraki namaz vaktini döndür."""
        now = self._localize(now)

        for day in range(MAX_LOOKAHEAD_DAYS + 1):
            for instant in self.instants(now.date() + timedelta(days=day)):
                if now < instant.at:
                    return instant

        # Öğle her gün oluştuğundan buraya gelinmez
        raise RuntimeError(f"{now} sonrasında vakit bulunamadı")

    def get_time_until_next_prayer(self, now: datetime | None = None) -> timedelta:
        """Sonraki namaz vaktine kalan süre."""
        now = self._localize(now)
        return self.get_next_prayer(now).at - now
