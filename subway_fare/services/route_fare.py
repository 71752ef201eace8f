"""Route fare service - Main orchestrator.

Finds a path over a network snapshot and prices it in one call. This
is the boundary the hosting layer talks to.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..adapters.graph import DijkstraRouteSolver
from ..domain.errors import ConfigurationError
from ..domain.models import NetworkSnapshot, PathResult, RouteFare, WeightMode
from ..fare import FareCalculator
from ..ports.graph import NetworkRepositoryPort, RouteSolverPort


@dataclass
class RouteFareService:
    """Service quoting a route and its fare.

    The flow is:
    1. Take the caller's snapshot, or load one from the repository
    2. Find the path with the route solver
    3. Price it with the fare calculator

    Attributes:
        route_solver: Computes shortest paths
        fare_calculator: Runs the fare policy chain
        repository: Optional source of snapshots when none is passed in
    """

    route_solver: RouteSolverPort = field(default_factory=DijkstraRouteSolver)
    fare_calculator: FareCalculator = field(default_factory=FareCalculator)
    repository: Optional[NetworkRepositoryPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_path(
        self,
        source: int,
        destination: int,
        weight_mode: WeightMode | str = WeightMode.DISTANCE,
        snapshot: Optional[NetworkSnapshot] = None,
    ) -> PathResult:
        """Find the path between two stations without pricing it."""
        snapshot = self._resolve_snapshot(snapshot)
        return self.route_solver.solve(
            snapshot, source, destination, WeightMode.parse(weight_mode)
        )

    def quote(
        self,
        source: int,
        destination: int,
        age: Optional[int] = None,
        weight_mode: WeightMode | str = WeightMode.DISTANCE,
        snapshot: Optional[NetworkSnapshot] = None,
    ) -> RouteFare:
        """Find the path between two stations and compute its fare.

        Args:
            source: Departure station id.
            destination: Arrival station id.
            age: Rider age, or None for no age discount.
            weight_mode: Whether to minimize distance or duration.
            snapshot: Network to search; loaded from the repository if omitted.

        Returns:
            RouteFare with the path and the fare.

        Raises:
            ConfigurationError: If no snapshot is given and no repository is set.
            InvalidTopologyError: If the snapshot is malformed.
            SameStationError: If source equals destination.
            StationNotFoundError: If source or destination is unknown.
            NoPathError: If no path exists.
            InvalidAgeError: If age is negative.
        """
        path = self.find_path(source, destination, weight_mode, snapshot)
        fare = self.fare_calculator.calculate_fare(path, age)

        self._logger.info(
            "Route quoted",
            extra={
                "source": source,
                "destination": destination,
                "distance": path.distance,
                "fare": fare,
            },
        )
        return RouteFare(path=path, fare=fare)

    def _resolve_snapshot(self, snapshot: Optional[NetworkSnapshot]) -> NetworkSnapshot:
        if snapshot is not None:
            return snapshot
        if self.repository is None:
            raise ConfigurationError(
                "No network snapshot given and no repository configured",
                setting_name="repository",
            )
        return self.repository.load()
