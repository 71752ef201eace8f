"""Shortest-path computation using Dijkstra's algorithm.

Weights are positive integers, so a plain binary-heap Dijkstra is
enough. The search cost is the pair (weight, other metric) compared
lexicographically: paths tied on the weight are ranked by the other
metric the same way in both directions. The search records the edge
used to reach each station; the returned totals and lines are read
back from those edges.
"""

import heapq
import itertools
from typing import Dict, List, Set, Tuple

from ..domain.errors import NoPathError, SameStationError, StationNotFoundError
from ..domain.models import PathResult
from .network import Edge, Graph

# (search weight, other metric)
Cost = Tuple[int, int]


def find_path(graph: Graph, source: int, destination: int) -> PathResult:
    """Compute the minimum-weight path between two stations.

    Parameters
    ----------
    graph:
        Graph as produced by ``build_graph``; its weight mode decides
        whether distance or duration is minimized.
    source:
        Id of the departure station.
    destination:
        Id of the arrival station.

    Returns
    -------
    PathResult
        Stations from ``source`` to ``destination`` (inclusive), the total
        distance and duration of the traversed sections, and their lines.

    Raises
    ------
    SameStationError
        If ``source`` and ``destination`` are equal.
    StationNotFoundError
        If either station is not in the graph.
    NoPathError
        If the stations are not connected.
    """
    if source == destination:
        raise SameStationError(
            f"Departure and arrival are the same station: {source}",
            station_id=source,
        )
    for station_id in (source, destination):
        if station_id not in graph:
            raise StationNotFoundError(
                f"Station not in graph: {station_id}", station_id=station_id
            )

    costs: Dict[int, Cost] = {source: (0, 0)}
    previous: Dict[int, Tuple[int, Edge]] = {}
    visited: Set[int] = set()

    # (cost, insertion order, station): equal costs settle first-pushed first
    counter = itertools.count()
    heap: List[Tuple[Cost, int, int]] = [((0, 0), next(counter), source)]

    while heap:
        cost, _, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        if u == destination:
            break

        for edge in graph.neighbors(u):
            if edge.target in visited:
                continue
            new_cost = (cost[0] + edge.weight, cost[1] + edge.secondary)
            known = costs.get(edge.target)
            if known is None or new_cost < known:
                costs[edge.target] = new_cost
                previous[edge.target] = (u, edge)
                heapq.heappush(heap, (new_cost, next(counter), edge.target))

    if destination not in visited:
        raise NoPathError(
            f"No path from {source} to {destination}",
            source=source,
            destination=destination,
        )

    return _walk_back(graph, source, destination, previous)


def _walk_back(
    graph: Graph,
    source: int,
    destination: int,
    previous: Dict[int, Tuple[int, Edge]],
) -> PathResult:
    station_ids: List[int] = [destination]
    edges: List[Edge] = []
    current = destination
    while current != source:
        current, edge = previous[current]
        station_ids.append(current)
        edges.append(edge)

    station_ids.reverse()
    edges.reverse()

    return PathResult(
        stations=tuple(graph.stations[station_id] for station_id in station_ids),
        distance=sum(edge.section.distance for edge in edges),
        duration=sum(edge.section.duration for edge in edges),
        lines=frozenset(edge.section.line for edge in edges),
    )
