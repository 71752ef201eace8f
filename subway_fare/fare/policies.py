"""Fare policies.

Each policy takes the running fare and returns the next one. The
calculator applies them in a fixed order: distance bands, then line
surcharge, then age discount.

Age brackets are a tagged value rather than one class per bracket: a
bracket only carries its deduction and discount rate, and a single
deduct-then-discount routine applies any of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from ..config import FareConfig, get_config
from ..domain.errors import InvalidAgeError
from ..domain.models import FareContext


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _fare_config() -> FareConfig:
    return get_config().fare


@dataclass(frozen=True)
class BaseDistancePolicy:
    """Banded distance fare.

    Up to ``first_band_limit`` the base fare applies. Each started
    ``first_band_unit`` up to ``second_band_limit`` adds ``first_band_fee``,
    and each started ``second_band_unit`` beyond it adds ``second_band_fee``.
    A partial unit costs a full one.
    """

    config: FareConfig = field(default_factory=_fare_config)

    def fare_for_distance(self, distance: int) -> int:
        cfg = self.config
        fare = cfg.base_fare
        if distance <= cfg.first_band_limit:
            return fare

        first_band = min(distance, cfg.second_band_limit) - cfg.first_band_limit
        fare += _ceil_div(first_band, cfg.first_band_unit) * cfg.first_band_fee

        if distance > cfg.second_band_limit:
            second_band = distance - cfg.second_band_limit
            fare += _ceil_div(second_band, cfg.second_band_unit) * cfg.second_band_fee
        return fare

    def apply(self, context: FareContext, running_fare: int) -> int:
        return running_fare + self.fare_for_distance(context.path.distance)


@dataclass(frozen=True)
class LineSurchargePolicy:
    """Adds the highest surcharge among the traversed lines, once."""

    def apply(self, context: FareContext, running_fare: int) -> int:
        return running_fare + context.path.max_extra_fare


class BracketKind(Enum):
    CHILD = auto()
    YOUTH = auto()
    ADULT = auto()


@dataclass(frozen=True, slots=True)
class AgeBracket:
    """An age bracket with its discount terms.

    Attributes:
        kind: Which bracket this is
        deduction: Amount subtracted before the discount
        discount_percent: Percentage taken off what remains
    """

    kind: BracketKind
    deduction: int = 0
    discount_percent: int = 0

    def apply(self, fare: int) -> int:
        """Deduct, then discount, flooring the result at zero."""
        if self.kind is BracketKind.ADULT:
            return fare
        remainder = fare - self.deduction
        discounted = remainder * (100 - self.discount_percent) // 100
        return max(discounted, 0)


ADULT = AgeBracket(BracketKind.ADULT)


def bracket_for_age(age: Optional[int], config: Optional[FareConfig] = None) -> AgeBracket:
    """Select the bracket for a rider age.

    A missing age selects the adult bracket.

    Raises:
        InvalidAgeError: If ``age`` is negative.
    """
    if age is None:
        return ADULT
    if age < 0:
        raise InvalidAgeError(f"Age must be non-negative, got {age}", age=age)

    cfg = config if config is not None else get_config().fare
    if cfg.child_min_age <= age <= cfg.child_max_age:
        return AgeBracket(
            BracketKind.CHILD, cfg.child_deduction, cfg.child_discount_percent
        )
    if cfg.youth_min_age <= age <= cfg.youth_max_age:
        return AgeBracket(
            BracketKind.YOUTH, cfg.youth_deduction, cfg.youth_discount_percent
        )
    return ADULT


@dataclass(frozen=True)
class AgeDiscountPolicy:
    """Applies the discount of the rider's age bracket."""

    config: FareConfig = field(default_factory=_fare_config)

    def apply(self, context: FareContext, running_fare: int) -> int:
        return bracket_for_age(context.age, self.config).apply(running_fare)
