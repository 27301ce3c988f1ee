"""Tests for Hijri date conversion."""

from datetime import date, timedelta

import pytest

from miqat.domain.hijri import HijriDate, format_hijri, to_hijri
from miqat.domain.models import Language


class TestToHijri:
    """Tabular conversion tests."""

    @pytest.mark.parametrize(
        ("gregorian", "expected"),
        [
            (date(2000, 1, 1), HijriDate(1420, 9, 24)),
            (date(2024, 3, 11), HijriDate(1445, 9, 1)),
            (date(2024, 3, 20), HijriDate(1445, 9, 10)),
            (date(2024, 4, 10), HijriDate(1445, 10, 1)),
        ],
    )
    def test_known_dates(self, gregorian: date, expected: HijriDate) -> None:
        """Test conversion of known dates."""
        assert to_hijri(gregorian) == expected

    def test_days_advance_one_by_one(self) -> None:
        """Test consecutive Gregorian days give consecutive Hijri days."""
        start = date(2024, 1, 1)
        previous = to_hijri(start)
        for offset in range(1, 400):
            current = to_hijri(start + timedelta(days=offset))
            if current.day == 1:
                assert previous.day in (29, 30)
                assert current.month == previous.month % 12 + 1
            else:
                assert current.day == previous.day + 1
                assert current.month == previous.month
            previous = current


class TestFormatHijri:
    """Formatting tests."""

    def test_english(self) -> None:
        """Test English month names."""
        assert format_hijri(date(2024, 3, 20)) == "10 Ramadan 1445"

    def test_arabic(self) -> None:
        """Test Arabic month names."""
        assert format_hijri(date(2024, 4, 10), Language.ARABIC) == "1 شَوّال 1445"

    def test_month_name(self) -> None:
        """Test month lookup."""
        assert HijriDate(1445, 1, 1).month_name() == "Muharram"
        assert HijriDate(1445, 12, 1).month_name() == "Dhu al-Hijjah"
