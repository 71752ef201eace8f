"""Graph ports - Abstractions for network loading and routing.

These protocols define the contracts for loading a network snapshot
and computing a path over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import NetworkSnapshot, PathResult, WeightMode


class NetworkRepositoryPort(Protocol):
    """Port for loading network data.

    Implementation: adapters/graph/csv_repository.py

    The repository translates stored rows into an immutable
    NetworkSnapshot; the engine never reads storage itself.
    """

    def load(self) -> NetworkSnapshot:
        """Load the current network snapshot."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        snapshot: NetworkSnapshot,
        source: int,
        destination: int,
        weight_mode: WeightMode,
    ) -> PathResult:
        """Find the minimum-weight path between two stations.

        Args:
            snapshot: The network to search.
            source: Departure station id.
            destination: Arrival station id.
            weight_mode: Whether to minimize distance or duration.

        Returns:
            PathResult with stations, totals and traversed lines.
        """
        ...
