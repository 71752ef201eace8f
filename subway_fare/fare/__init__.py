"""Fare policies and the calculator that chains them."""

from .calculator import FareCalculator
from .policies import (
    AgeBracket,
    AgeDiscountPolicy,
    BaseDistancePolicy,
    BracketKind,
    LineSurchargePolicy,
    bracket_for_age,
)

__all__ = [
    "FareCalculator",
    "BaseDistancePolicy",
    "LineSurchargePolicy",
    "AgeDiscountPolicy",
    "AgeBracket",
    "BracketKind",
    "bracket_for_age",
]
