"""Unit tests for the jump safety evaluator."""

import pytest

from skydive_logbook.domain.value_objects.safety import (
    DEFAULT_THRESHOLDS,
    SafetyLevel,
    categorize,
    compute_safety_score,
    conditions_penalty,
    evaluate,
    visibility_penalty,
    wind_penalty
)
from skydive_logbook.domain.value_objects.weather import WeatherObservation


def observation(wind=5.0, visibility=10.0, conditions="Ensoleillé", temperature=20):
    return WeatherObservation(
        temperature_celsius=temperature,
        conditions_description=conditions,
        visibility_km=visibility,
        wind_speed_kmh=wind
    )


class TestScenarios:
    """Reference weather situations."""

    def test_calm_sunny_day_is_excellent(self):
        obs = observation(wind=5, visibility=10, conditions="Ensoleillé")

        assert compute_safety_score(obs) == 100
        assert evaluate(obs) == SafetyLevel.EXCELLENT

    def test_strong_wind_cloudy_is_good(self):
        obs = observation(wind=28, visibility=9, conditions="Nuageux")

        assert compute_safety_score(obs) == 70
        assert evaluate(obs) == SafetyLevel.GOOD

    def test_fog_with_low_visibility_is_poor(self):
        obs = observation(wind=12, visibility=3, conditions="Brouillard")

        assert compute_safety_score(obs) == 40
        assert evaluate(obs) == SafetyLevel.POOR

    def test_thunderstorm_is_dangerous_and_score_is_not_clamped(self):
        obs = observation(wind=40, visibility=1, conditions="Orage violent")

        assert compute_safety_score(obs) == -50
        assert evaluate(obs) == SafetyLevel.DANGEROUS


class TestWindPenalty:

    @pytest.mark.parametrize("wind,expected", [
        (0, 0),
        (10.0, 0),
        (10.0001, 5),
        (15, 5),
        (15.5, 15),
        (25, 15),
        (26, 30),
        (35, 30),
        (35.1, 50),
        (120, 50),
    ])
    def test_highest_tier_strictly_exceeded(self, wind, expected):
        assert wind_penalty(wind, DEFAULT_THRESHOLDS.wind_speed) == expected

    def test_boundary_falls_into_safer_tier(self):
        assert evaluate(observation(wind=10.0)) == SafetyLevel.EXCELLENT
        assert compute_safety_score(observation(wind=10.0001)) == 95
        assert evaluate(observation(wind=10.0001)) == SafetyLevel.EXCELLENT

    def test_missing_wind_reading_counts_as_calm(self):
        obs = WeatherObservation(temperature_celsius=18, conditions_description="Nuageux", visibility_km=10)

        assert compute_safety_score(obs) == 100


class TestVisibilityPenalty:

    @pytest.mark.parametrize("visibility,expected", [
        (10, 0),
        (8, 0),
        (7.9, 10),
        (5, 10),
        (4.9, 25),
        (2, 25),
        (1.99, 40),
        (0, 40),
    ])
    def test_lowest_tier_strictly_undershot(self, visibility, expected):
        assert visibility_penalty(visibility, DEFAULT_THRESHOLDS.visibility) == expected


class TestConditionsPenalty:

    @pytest.mark.parametrize("text,expected", [
        ("Ensoleillé", 0),
        ("Orage", 60),
        ("Tempête de neige", 60),
        ("Pluie forte", 40),
        ("Grêle", 40),
        ("Pluie légère", 20),
        ("Bruine", 20),
        ("Brouillard", 30),
        ("", 0),
    ])
    def test_keyword_penalties(self, text, expected):
        assert conditions_penalty(text) == expected

    def test_matching_is_case_insensitive(self):
        assert conditions_penalty("ORAGE") == 60
        assert conditions_penalty("pluie FORTE") == 40

    def test_first_matching_group_wins_instead_of_summing(self):
        # "pluie forte" also contains "pluie", only the more severe group applies
        assert conditions_penalty("pluie forte") == 40
        assert conditions_penalty("Orage et pluie") == 60
        assert conditions_penalty("Pluie forte avec orage") == 60
        # Rain is listed before fog, so drizzle in fog scores as rain
        assert conditions_penalty("Bruine et brouillard") == 20

    def test_none_description_has_no_penalty(self):
        assert conditions_penalty(None) == 0


class TestCategorize:

    @pytest.mark.parametrize("score,level", [
        (100, SafetyLevel.EXCELLENT),
        (85, SafetyLevel.EXCELLENT),
        (84.9, SafetyLevel.GOOD),
        (70, SafetyLevel.GOOD),
        (69, SafetyLevel.MODERATE),
        (50, SafetyLevel.MODERATE),
        (49, SafetyLevel.POOR),
        (30, SafetyLevel.POOR),
        (29, SafetyLevel.DANGEROUS),
        (-50, SafetyLevel.DANGEROUS),
    ])
    def test_floors(self, score, level):
        assert categorize(score) == level


class TestProperties:

    def test_excellent_band(self):
        for wind in (0, 3, 7.5, 10):
            for visibility in (8, 9, 10, 25):
                obs = observation(wind=wind, visibility=visibility, conditions="Partiellement nuageux")
                assert evaluate(obs) == SafetyLevel.EXCELLENT

    def test_more_wind_never_improves_level(self):
        winds = [0, 5, 10, 10.5, 15, 16, 25, 26, 35, 36, 60]
        levels = [evaluate(observation(wind=wind)) for wind in winds]

        assert all(later <= earlier for earlier, later in zip(levels, levels[1:]))

    def test_less_visibility_never_improves_level(self):
        visibilities = [20, 10, 8, 7, 5, 4, 2, 1, 0]
        levels = [evaluate(observation(visibility=visibility)) for visibility in visibilities]

        assert all(later <= earlier for earlier, later in zip(levels, levels[1:]))

    def test_evaluate_is_idempotent(self):
        obs = observation(wind=22, visibility=6, conditions="Bruine")

        assert evaluate(obs) == evaluate(obs)
        assert compute_safety_score(obs) == compute_safety_score(obs)

    def test_negative_inputs_flow_through_unvalidated(self):
        obs = observation(wind=-5, visibility=-1)

        assert compute_safety_score(obs) == 60
        assert evaluate(obs) == SafetyLevel.MODERATE


class TestSafetyLevelOrdering:

    def test_levels_are_ordered_worst_to_best(self):
        assert SafetyLevel.DANGEROUS < SafetyLevel.POOR < SafetyLevel.MODERATE
        assert SafetyLevel.MODERATE < SafetyLevel.GOOD < SafetyLevel.EXCELLENT
        assert SafetyLevel.EXCELLENT.rank == 4

    def test_derived_comparisons(self):
        assert SafetyLevel.GOOD >= SafetyLevel.GOOD
        assert SafetyLevel.GOOD > SafetyLevel.POOR
        assert SafetyLevel.POOR <= SafetyLevel.MODERATE
        assert max(SafetyLevel) == SafetyLevel.EXCELLENT
