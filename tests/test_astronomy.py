"""Tests for solar position math."""

import math

import pytest

from miqat.domain.astronomy import (
    Direction,
    asr_angle,
    asr_time,
    equation_of_time,
    fix_angle,
    fix_hour,
    haversine_distance,
    initial_bearing,
    julian_date,
    mid_day,
    sun_angle_time,
    sun_declination,
    time_diff,
)


class TestJulianDate:
    """Julian date conversion tests."""

    def test_j2000_epoch(self) -> None:
        """Test 1 Jan 2000 is half a day before J2000.0."""
        assert julian_date(2000, 1, 1) == 2451544.5

    def test_spring_equinox_2024(self) -> None:
        """Test a March date (no month shift)."""
        assert julian_date(2024, 3, 20) == 2460389.5

    def test_january_is_shifted_to_previous_year(self) -> None:
        """Test Jan/Feb are treated as months 13/14."""
        assert julian_date(2024, 1, 15) == 2460324.5
        assert julian_date(2024, 3, 1) - julian_date(2024, 2, 28) == 2  # leap year

    def test_consecutive_days(self) -> None:
        """Test consecutive days differ by exactly one."""
        assert julian_date(2023, 12, 31) + 1 == julian_date(2024, 1, 1)


class TestSolarPosition:
    """Declination and equation of time tests."""

    def test_declination_near_equinox(self) -> None:
        """Test declination is close to zero at the March equinox."""
        assert sun_declination(2460389.5) == pytest.approx(-0.050577, abs=1e-4)

    def test_declination_near_june_solstice(self) -> None:
        """Test declination reaches the obliquity at the June solstice."""
        assert sun_declination(2460482.5) == pytest.approx(23.4357, abs=1e-3)

    def test_declination_near_december_solstice(self) -> None:
        """Test declination at the December solstice."""
        assert sun_declination(2460665.5) == pytest.approx(-23.4351, abs=1e-3)

    def test_equation_of_time_march(self) -> None:
        """Test equation of time in minutes."""
        assert equation_of_time(2460389.5) == pytest.approx(-7.439, abs=1e-3)

    def test_equation_of_time_range(self) -> None:
        """Test equation of time stays within its known yearly bounds."""
        start = julian_date(2024, 1, 1)
        values = [equation_of_time(start + day) for day in range(366)]
        assert max(values) == pytest.approx(16.4, abs=0.3)
        assert min(values) == pytest.approx(-14.3, abs=0.3)


class TestHelpers:
    """Wrapping helpers tests."""

    @pytest.mark.parametrize(
        ("hours", "expected"),
        [(-1, 23), (25, 1), (24, 0), (12.5, 12.5), (-24.25, 23.75)],
    )
    def test_fix_hour(self, hours: float, expected: float) -> None:
        """Test hours wrap into [0, 24)."""
        assert fix_hour(hours) == pytest.approx(expected)

    def test_fix_angle(self) -> None:
        """Test angles wrap into [0, 360)."""
        assert fix_angle(-90) == 270
        assert fix_angle(360) == 0
        assert fix_angle(725) == 5

    def test_time_diff_crosses_midnight(self) -> None:
        """Test difference from evening to next morning."""
        assert time_diff(18.5, 6.0) == pytest.approx(11.5)


class TestHourAngle:
    """Hour-angle solver tests."""

    def test_mid_day(self) -> None:
        """Test solar noon for Jaipur at UTC+5:30."""
        noon = mid_day(-7.439001, 75.7873, 5.5)
        assert noon == pytest.approx(12.571497, abs=1e-5)

    def test_morning_and_evening_are_symmetric(self) -> None:
        """Test ccw and cw results mirror around noon."""
        morning = sun_angle_time(0.833, 12.0, 30.0, 10.0, Direction.COUNTER_CLOCKWISE)
        evening = sun_angle_time(0.833, 12.0, 30.0, 10.0, Direction.CLOCKWISE)
        assert morning is not None and evening is not None
        assert 12.0 - morning == pytest.approx(evening - 12.0)

    def test_equator_at_equinox_has_twelve_hour_day(self) -> None:
        """Test a geometric horizon gives a six hour half-day."""
        sunset = sun_angle_time(0, 12.0, 0.0, 0.0, Direction.CLOCKWISE)
        assert sunset == pytest.approx(18.0)

    def test_polar_day_has_no_event(self) -> None:
        """Test the solver signals a missing event instead of NaN."""
        # Londra, Haziran: güneş 18° altına inmez
        assert sun_angle_time(18, 13.0, 51.5074, 23.4357, Direction.COUNTER_CLOCKWISE) is None

    def test_polar_night_has_no_sunrise(self) -> None:
        """Test no sunrise above the arctic circle in December."""
        assert sun_angle_time(0.833, 12.0, 78.2232, -23.4351, Direction.COUNTER_CLOCKWISE) is None


class TestAsr:
    """Asr angle tests."""

    def test_asr_angle_shafi_with_overhead_sun(self) -> None:
        """Test shadow factor 1 with zero noon shadow is 45 degrees."""
        assert asr_angle(1, 20.0, 20.0) == pytest.approx(45.0)

    def test_asr_angle_hanafi_with_overhead_sun(self) -> None:
        """Test shadow factor 2 with zero noon shadow."""
        assert asr_angle(2, 20.0, 20.0) == pytest.approx(math.degrees(math.atan(0.5)))

    def test_asr_is_in_the_afternoon(self) -> None:
        """Test Asr falls between noon and sunset."""
        noon = 12.571497
        asr = asr_time(1, noon, 26.9124, -0.050577)
        sunset = sun_angle_time(0.833, noon, 26.9124, -0.050577, Direction.CLOCKWISE)
        assert asr is not None and sunset is not None
        assert noon < asr < sunset
        assert asr == pytest.approx(16.016963, abs=1e-4)

    def test_hanafi_asr_is_later(self) -> None:
        """Test a longer shadow factor gives a later Asr."""
        shafi = asr_time(1, 12.0, 41.0, 5.0)
        hanafi = asr_time(2, 12.0, 41.0, 5.0)
        assert shafi is not None and hanafi is not None
        assert hanafi > shafi


class TestGreatCircle:
    """Bearing and distance tests."""

    def test_bearing_due_north(self) -> None:
        """Test bearing along a meridian."""
        assert initial_bearing(0, 0, 10, 0) == pytest.approx(0.0)

    def test_bearing_due_east_on_equator(self) -> None:
        """Test bearing along the equator."""
        assert initial_bearing(0, 0, 0, 10) == pytest.approx(90.0)

    def test_bearing_due_west_on_equator(self) -> None:
        """Test westward bearing is normalized to [0, 360)."""
        assert initial_bearing(0, 10, 0, 0) == pytest.approx(270.0)

    def test_distance_one_degree_of_latitude(self) -> None:
        """Test one degree of latitude is about 111.19 km."""
        assert haversine_distance(0, 0, 1, 0) == pytest.approx(111.195, abs=1e-3)

    def test_distance_same_point(self) -> None:
        """Test zero distance for identical points."""
        assert haversine_distance(12.5, -3.25, 12.5, -3.25) == 0.0
