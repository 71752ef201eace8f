"""Tests for the individual fare policies."""

import pytest

from subway_fare.config import FareConfig
from subway_fare.domain.errors import InvalidAgeError
from subway_fare.domain.models import FareContext, Line, PathResult, Station
from subway_fare.fare.policies import (
    AgeBracket,
    AgeDiscountPolicy,
    BaseDistancePolicy,
    BracketKind,
    LineSurchargePolicy,
    bracket_for_age,
)
from subway_fare.ports.fare import FarePolicyPort


def _path(distance=10, lines=()):
    return PathResult(
        stations=(Station(1, "A"), Station(2, "B")),
        distance=distance,
        duration=1,
        lines=frozenset(lines),
    )


class TestBaseDistancePolicy:
    """Distance bands with ceiling rounding."""

    @pytest.mark.parametrize(
        "distance, expected",
        [
            (1, 1250),
            (10, 1250),
            (11, 1350),
            (12, 1350),
            (15, 1350),
            (16, 1450),
            (20, 1450),
            (50, 2050),
            (51, 2150),
            (58, 2150),
            (59, 2250),
            (66, 2250),
        ],
    )
    def test_fare_for_distance(self, distance, expected):
        assert BaseDistancePolicy(FareConfig()).fare_for_distance(distance) == expected

    def test_apply_adds_to_running_fare(self):
        policy = BaseDistancePolicy(FareConfig())
        assert policy.apply(FareContext(_path(12)), 100) == 1450

    def test_custom_constants(self):
        config = FareConfig(base_fare=1000, first_band_fee=50, second_band_fee=200)
        policy = BaseDistancePolicy(config)

        assert policy.fare_for_distance(10) == 1000
        assert policy.fare_for_distance(11) == 1050
        assert policy.fare_for_distance(51) == 1000 + 8 * 50 + 200


class TestLineSurchargePolicy:
    """Only the highest surcharge is charged."""

    def test_no_lines_adds_nothing(self):
        assert LineSurchargePolicy().apply(FareContext(_path()), 1250) == 1250

    def test_max_not_sum(self):
        cheap = Line(1, "cheap", extra_fare=300)
        pricey = Line(2, "pricey", extra_fare=500)
        policy = LineSurchargePolicy()

        both = policy.apply(FareContext(_path(lines=(cheap, pricey))), 1250)
        single = policy.apply(FareContext(_path(lines=(pricey,))), 1250)

        assert both == single == 1750


class TestAgeBrackets:
    """Bracket selection by age."""

    @pytest.mark.parametrize(
        "age, kind",
        [
            (None, BracketKind.ADULT),
            (0, BracketKind.ADULT),
            (5, BracketKind.ADULT),
            (6, BracketKind.CHILD),
            (12, BracketKind.CHILD),
            (13, BracketKind.YOUTH),
            (18, BracketKind.YOUTH),
            (19, BracketKind.ADULT),
            (65, BracketKind.ADULT),
        ],
    )
    def test_bracket_for_age(self, age, kind):
        assert bracket_for_age(age, FareConfig()).kind is kind

    def test_negative_age_raises(self):
        with pytest.raises(InvalidAgeError) as exc_info:
            bracket_for_age(-1)

        assert exc_info.value.age == -1

    def test_bracket_carries_constants(self):
        child = bracket_for_age(8, FareConfig())
        youth = bracket_for_age(15, FareConfig())

        assert (child.deduction, child.discount_percent) == (350, 50)
        assert (youth.deduction, youth.discount_percent) == (350, 20)

    def test_adult_is_noop(self):
        assert AgeBracket(BracketKind.ADULT, 350, 50).apply(1250) == 1250

    def test_deduct_then_discount(self):
        assert AgeBracket(BracketKind.CHILD, 350, 50).apply(1250) == 450
        assert AgeBracket(BracketKind.YOUTH, 350, 20).apply(1250) == 720

    def test_result_is_floored(self):
        # 1001 * 0.5 = 500.5 and 1001 * 0.8 = 800.8
        assert AgeBracket(BracketKind.CHILD, 350, 50).apply(1351) == 500
        assert AgeBracket(BracketKind.YOUTH, 350, 20).apply(1351) == 800

    def test_never_below_zero(self):
        assert AgeBracket(BracketKind.CHILD, 350, 50).apply(300) == 0
        assert AgeBracket(BracketKind.YOUTH, 350, 20).apply(350) == 0


class TestAgeDiscountPolicy:
    def test_child_and_youth_differ_at_boundary(self):
        policy = AgeDiscountPolicy(FareConfig())

        child = policy.apply(FareContext(_path(), age=12), 1250)
        youth = policy.apply(FareContext(_path(), age=13), 1250)

        assert child == 450
        assert youth == 720

    def test_outside_brackets_pays_full(self):
        policy = AgeDiscountPolicy(FareConfig())

        assert policy.apply(FareContext(_path(), age=5), 1250) == 1250
        assert policy.apply(FareContext(_path(), age=19), 1250) == 1250
        assert policy.apply(FareContext(_path(), age=None), 1250) == 1250

    def test_negative_age_raises(self):
        with pytest.raises(InvalidAgeError):
            AgeDiscountPolicy(FareConfig()).apply(FareContext(_path(), age=-3), 1250)


def test_policies_implement_protocol():
    for policy in (
        BaseDistancePolicy(FareConfig()),
        LineSurchargePolicy(),
        AgeDiscountPolicy(FareConfig()),
    ):
        assert isinstance(policy, FarePolicyPort), policy.__class__.__name__
