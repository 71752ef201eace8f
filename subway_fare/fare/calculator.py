"""Fare calculator - runs the policy chain over a path."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import FareConfig, get_config
from ..domain.models import FareBreakdown, FareContext, PathResult
from ..ports.fare import FarePolicyPort
from .policies import AgeDiscountPolicy, BaseDistancePolicy, LineSurchargePolicy


@dataclass
class FareCalculator:
    """Prices a path for a rider.

    The chain always runs distance policy, then surcharge policy, then
    age policy, starting from a fare of zero. Any error raised by a
    policy propagates unchanged.

    Attributes:
        config: Fare constants shared by the default policies
    """

    config: FareConfig = field(default_factory=lambda: get_config().fare)
    distance_policy: Optional[FarePolicyPort] = None
    surcharge_policy: Optional[FarePolicyPort] = None
    age_policy: Optional[FarePolicyPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.distance_policy is None:
            self.distance_policy = BaseDistancePolicy(self.config)
        if self.surcharge_policy is None:
            self.surcharge_policy = LineSurchargePolicy()
        if self.age_policy is None:
            self.age_policy = AgeDiscountPolicy(self.config)

    @property
    def policies(self) -> Tuple[FarePolicyPort, ...]:
        return (self.distance_policy, self.surcharge_policy, self.age_policy)

    def calculate_fare(self, path: PathResult, age: Optional[int] = None) -> int:
        """Calculate the fare of ``path`` for a rider of ``age``.

        Args:
            path: Result of the path finder.
            age: Rider age, or None for no age discount.

        Returns:
            The fare in the smallest currency unit.

        Raises:
            InvalidAgeError: If ``age`` is negative.
        """
        return self.calculate_breakdown(path, age).total

    def calculate_breakdown(
        self, path: PathResult, age: Optional[int] = None
    ) -> FareBreakdown:
        """Calculate the fare and keep the value after each policy."""
        context = FareContext(path=path, age=age)

        steps: List[int] = []
        fare = 0
        for policy in self.policies:
            fare = policy.apply(context, fare)
            steps.append(fare)

        base, with_surcharge, total = steps
        breakdown = FareBreakdown(
            base=base,
            surcharge=with_surcharge - base,
            discount=with_surcharge - total,
            total=total,
        )

        self._logger.debug(
            "Fare calculated",
            extra={
                "distance": path.distance,
                "age": age,
                "base": breakdown.base,
                "surcharge": breakdown.surcharge,
                "discount": breakdown.discount,
                "fare": breakdown.total,
            },
        )
        return breakdown
