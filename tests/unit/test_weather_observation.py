"""Unit tests for weather observation parsing helpers."""

import pytest

from skydive_logbook.domain.value_objects.weather import (
    DEFAULT_VISIBILITY_KM,
    WeatherObservation,
    parse_visibility_km,
    round_half_up,
    wind_direction_label
)
from skydive_logbook.domain.value_objects.safety import SafetyLevel, compute_safety_score, evaluate


class TestParseVisibility:

    @pytest.mark.parametrize("text,expected", [
        ("9 km", 9.0),
        ("10+ km", 10.0),
        ("2.5 km", 2.5),
        ("  7km", 7.0),
        ("0 km", 0.0),
    ])
    def test_reads_leading_number(self, text, expected):
        assert parse_visibility_km(text) == expected

    @pytest.mark.parametrize("text", ["N/A", "", None, "km"])
    def test_unparsable_text_defaults(self, text):
        assert parse_visibility_km(text) == DEFAULT_VISIBILITY_KM

    def test_zero_visibility_is_a_reading_not_a_missing_value(self):
        """Only unparsable text falls back to the default; "0 km" is scored as zero visibility."""
        obs = WeatherObservation.from_display(
            temperature_celsius=8, conditions_description="Ensoleillé", visibility="0 km", wind_speed_kmh=5
        )

        assert obs.visibility_km == 0.0
        assert compute_safety_score(obs) == 60
        assert evaluate(obs) == SafetyLevel.MODERATE


class TestRoundHalfUp:

    @pytest.mark.parametrize("value,expected", [
        (4.5, 5),
        (20.5, 21),
        (0.5, 1),
        (2.4999, 2),
        (-20.5, -20),
        (-20.6, -21),
    ])
    def test_halves_go_up(self, value, expected):
        assert round_half_up(value) == expected


class TestWindDirection:

    @pytest.mark.parametrize("degrees,label", [
        (0, "N"),
        (11.25, "NNE"),
        (33.75, "NE"),
        (45, "NE"),
        (90, "E"),
        (180, "S"),
        (202.5, "SSO"),
        (270, "O"),
        (315, "NO"),
        (348.75, "N"),
        (359, "N"),
    ])
    def test_french_compass(self, degrees, label):
        assert wind_direction_label(degrees) == label


class TestWeatherObservation:

    def test_from_display_parses_visibility(self):
        obs = WeatherObservation.from_display(
            temperature_celsius=18,
            conditions_description="Nuageux",
            visibility="6 km",
            wind_speed_kmh=12.0
        )

        assert obs.visibility_km == 6.0
        assert obs.visibility == "6 km"
        assert obs.effective_wind_speed_kmh == 12.0

    def test_observation_is_immutable(self):
        obs = WeatherObservation(temperature_celsius=18, conditions_description="Nuageux")

        with pytest.raises(AttributeError):
            obs.visibility_km = 1.0
