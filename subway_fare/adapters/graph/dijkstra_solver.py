"""Dijkstra route solver adapter.

This adapter implements RouteSolverPort on top of ``build_graph`` and
``find_path``: it builds a fresh graph for every call, so the solver
holds no state between queries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoPathError
from ...domain.models import NetworkSnapshot, PathResult, WeightMode
from ...graph import build_graph, find_path


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        snapshot: NetworkSnapshot,
        source: int,
        destination: int,
        weight_mode: WeightMode | str = WeightMode.DISTANCE,
    ) -> PathResult:
        """Find the minimum-weight path between two stations.

        Args:
            snapshot: The network to search.
            source: Departure station id.
            destination: Arrival station id.
            weight_mode: Whether to minimize distance or duration.

        Returns:
            PathResult with stations, totals and traversed lines.

        Raises:
            InvalidTopologyError: If the snapshot is malformed.
            SameStationError: If source equals destination.
            StationNotFoundError: If source or destination is unknown.
            NoPathError: If no path exists.
        """
        weight_mode = WeightMode.parse(weight_mode)
        self._logger.debug(
            "Solving route",
            extra={
                "source": source,
                "destination": destination,
                "weight_mode": weight_mode.value,
            },
        )

        graph = build_graph(snapshot.stations, snapshot.sections, weight_mode)
        try:
            result = find_path(graph, source, destination)
        except NoPathError:
            self._logger.warning(
                "No route found",
                extra={"source": source, "destination": destination},
            )
            raise

        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "destination": destination,
                "stops": len(result.stations),
                "distance": result.distance,
                "duration": result.duration,
            },
        )
        return result
