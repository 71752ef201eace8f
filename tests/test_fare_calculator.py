"""Tests for the fare calculator and its policy chain."""

import pytest

from subway_fare.config import FareConfig
from subway_fare.domain.errors import InvalidAgeError
from subway_fare.domain.models import FareBreakdown, Line, PathResult, Station
from subway_fare.fare import FareCalculator
from subway_fare.graph import build_graph, find_path


def _path(distance, *extra_fares):
    lines = frozenset(
        Line(i, f"L{i}", extra_fare=fare) for i, fare in enumerate(extra_fares, 1)
    )
    return PathResult(
        stations=(Station(1, "A"), Station(2, "B")),
        distance=distance,
        duration=distance,
        lines=lines,
    )


class TestFareCalculator:
    """Chain order and end-to-end amounts."""

    def setup_method(self):
        self.calculator = FareCalculator(FareConfig())

    def test_short_trip_costs_base_fare(self):
        assert self.calculator.calculate_fare(_path(10, 0)) == 1250

    def test_first_increment_just_over_base_band(self):
        assert self.calculator.calculate_fare(_path(12, 0)) == 1250 + 100

    def test_max_surcharge_applies_once(self):
        two_lines = self.calculator.calculate_fare(_path(10, 300, 500))
        one_line = self.calculator.calculate_fare(_path(10, 0, 500))

        assert two_lines == one_line == 1750

    def test_end_to_end_example(self, abc_network):
        graph = build_graph(abc_network.stations, abc_network.sections)
        path = find_path(graph, 1, 3)

        assert self.calculator.calculate_fare(path) == 1250 + 2 * 100 + 500
        assert self.calculator.calculate_fare(path, age=30) == 1950

    def test_discount_applies_after_surcharge(self, abc_network):
        graph = build_graph(abc_network.stations, abc_network.sections)
        path = find_path(graph, 1, 3)

        assert self.calculator.calculate_fare(path, age=12) == (1950 - 350) // 2
        assert self.calculator.calculate_fare(path, age=13) == (1950 - 350) * 80 // 100
        assert self.calculator.calculate_fare(path, age=5) == 1950
        assert self.calculator.calculate_fare(path, age=19) == 1950

    def test_breakdown(self):
        breakdown = self.calculator.calculate_breakdown(_path(20, 500), age=15)

        assert breakdown == FareBreakdown(
            base=1450, surcharge=500, discount=1950 - 1280, total=1280
        )

    def test_breakdown_total_matches_fare(self):
        path = _path(73, 900, 200)
        for age in (None, 7, 16, 40):
            assert (
                self.calculator.calculate_breakdown(path, age).total
                == self.calculator.calculate_fare(path, age)
            )

    def test_negative_age_raises(self):
        with pytest.raises(InvalidAgeError):
            self.calculator.calculate_fare(_path(10), age=-1)

    def test_fare_is_never_negative(self):
        config = FareConfig(base_fare=100)
        calculator = FareCalculator(config)

        assert calculator.calculate_fare(_path(5), age=8) == 0


def test_custom_policy_replaces_default_step():
    class FlatSurcharge:
        def apply(self, context, running_fare):
            return running_fare + 1000

    calculator = FareCalculator(FareConfig(), surcharge_policy=FlatSurcharge())

    assert calculator.calculate_fare(_path(10, 500)) == 2250


def test_default_config_comes_from_environment(monkeypatch):
    monkeypatch.setenv("SUBWAY_FARE_BASE_FARE", "1350")

    assert FareCalculator().calculate_fare(_path(10)) == 1350
