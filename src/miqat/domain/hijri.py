"""Tabular Hijri calendar conversion (approximate)."""

from dataclasses import dataclass
from datetime import date

from miqat.domain.models import Language

# date.toordinal() ile Julian gün numarası arasındaki fark
_ORDINAL_TO_JDN = 1721425

HIJRI_MONTHS_EN = [
    "Muharram",
    "Safar",
    "Rabi al-Awwal",
    "Rabi al-Thani",
    "Jumada al-Awwal",
    "Jumada al-Thani",
    "Rajab",
    "Shaban",
    "Ramadan",
    "Shawwal",
    "Dhu al-Qadah",
    "Dhu al-Hijjah",
]

HIJRI_MONTHS_AR = [
    "مُحَرَّم",
    "صَفَر",
    "رَبيع الأوَّل",
    "رَبيع الثاني",
    "جُمادى الأولى",
    "جُمادى الآخرة",
    "رَجَب",
    "شَعْبان",
    "رَمَضان",
    "شَوّال",
    "ذوالقعدة",
    "ذوالحجة",
]


@dataclass(frozen=True)
class HijriDate:
    """Hicri tarih."""

    year: int
    month: int
    day: int

    def month_name(self, language: Language = Language.ENGLISH) -> str:
        """Ay adı."""
        months = HIJRI_MONTHS_AR if language == Language.ARABIC else HIJRI_MONTHS_EN
        return months[self.month - 1]

    def format(self, language: Language = Language.ENGLISH) -> str:
        """'9 Ramadan 1445' biçiminde."""
        return f"{self.day} {self.month_name(language)} {self.year}"


def to_hijri(gregorian: date) -> HijriDate:
    """Gregoryen tarihi tablo usulü Hicri tarihe çevir."""
    jd = gregorian.toordinal() + _ORDINAL_TO_JDN
    l_val = jd - 1948440 + 10632
    n = (l_val - 1) // 10631
    l2 = l_val - 10631 * n + 354
    j = ((10985 - l2) // 5316) * ((50 * l2) // 17719) + (l2 // 5670) * ((43 * l2) // 15238)
    l3 = l2 - ((30 - j) // 15) * ((17719 * j) // 50) - (j // 16) * ((15238 * j) // 43) + 29
    month = (24 * l3) // 709
    day = l3 - (709 * month) // 24
    year = 30 * n + j - 30
    return HijriDate(year=year, month=month, day=day)


def format_hijri(gregorian: date, language: Language = Language.ENGLISH) -> str:
    """Gregoryen tarih için Hicri tarih metni."""
    return to_hijri(gregorian).format(language)
