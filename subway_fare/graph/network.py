"""Graph construction from a station/section snapshot.

This module defines the Graph type used by the path finder. A graph is
a transient value: it is built for one query, for one weight mode, and
thrown away afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Tuple

from ..domain.errors import InvalidTopologyError
from ..domain.models import Line, Section, Station, WeightMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Edge:
    """One traversal direction of a section.

    ``weight`` is the metric being minimized, ``secondary`` the other one;
    it only breaks ties between paths of equal weight.
    """

    target: int
    weight: int
    secondary: int
    section: Section

    @property
    def cost(self) -> Tuple[int, int]:
        return (self.weight, self.secondary)


@dataclass(frozen=True)
class Graph:
    """Undirected weighted multigraph over stations.

    Each section contributes one edge in each direction. Adjacency lists
    are sorted by ``(weight, secondary, line id, target)`` so searches
    scan parallel edges in a fixed order.
    """

    weight_mode: WeightMode
    stations: Mapping[int, Station]
    adjacency: Mapping[int, Tuple[Edge, ...]]

    def __contains__(self, station_id: object) -> bool:
        return station_id in self.stations

    def __len__(self) -> int:
        return len(self.stations)

    def neighbors(self, station_id: int) -> Tuple[Edge, ...]:
        return self.adjacency.get(station_id, ())

    @property
    def edge_count(self) -> int:
        """Number of sections in the graph (each counted once)."""
        return sum(len(edges) for edges in self.adjacency.values()) // 2


_OTHER_MODE = {
    WeightMode.DISTANCE: WeightMode.DURATION,
    WeightMode.DURATION: WeightMode.DISTANCE,
}


def section_weight(section: Section, weight_mode: WeightMode) -> int:
    if weight_mode is WeightMode.DURATION:
        return section.duration
    return section.distance


def build_graph(
    stations: Iterable[Station],
    sections: Iterable[Section],
    weight_mode: WeightMode | str = WeightMode.DISTANCE,
) -> Graph:
    """Build a graph whose edge weights follow ``weight_mode``.

    Args:
        stations: Every station of the network (graph vertices).
        sections: Every section of every line (graph edges).
        weight_mode: Edge weight, distance or duration.

    Returns:
        The graph for a single query.

    Raises:
        InvalidTopologyError: If a station id is duplicated, or a section
            references an unknown station, loops on one station, or has a
            non-positive distance or duration.
    """
    weight_mode = WeightMode.parse(weight_mode)

    by_id: Dict[int, Station] = {}
    for station in stations:
        if station.id in by_id:
            raise InvalidTopologyError(f"Duplicate station id: {station.id}")
        by_id[station.id] = station

    adjacency: Dict[int, List[Edge]] = {station_id: [] for station_id in by_id}

    for index, section in enumerate(sections):
        _validate_section(index, section, by_id)
        weight = section_weight(section, weight_mode)
        secondary = section_weight(section, _OTHER_MODE[weight_mode])
        adjacency[section.up_station_id].append(
            Edge(section.down_station_id, weight, secondary, section)
        )
        adjacency[section.down_station_id].append(
            Edge(section.up_station_id, weight, secondary, section)
        )

    frozen = {
        station_id: tuple(
            sorted(edges, key=lambda e: (e.cost, e.section.line.id, e.target))
        )
        for station_id, edges in adjacency.items()
    }

    graph = Graph(weight_mode=weight_mode, stations=by_id, adjacency=frozen)
    logger.debug(
        "Graph built",
        extra={
            "weight_mode": weight_mode.value,
            "nodes": len(graph),
            "edges": graph.edge_count,
        },
    )
    return graph


def _validate_section(
    index: int, section: Section, stations: Mapping[int, Station]
) -> None:
    for station_id in (section.up_station_id, section.down_station_id):
        if station_id not in stations:
            raise InvalidTopologyError(
                f"Section {index} references unknown station {station_id}",
                section_index=index,
            )
    if section.up_station_id == section.down_station_id:
        raise InvalidTopologyError(
            f"Section {index} connects station {section.up_station_id} to itself",
            section_index=index,
        )
    if section.distance <= 0:
        raise InvalidTopologyError(
            f"Section {index} has non-positive distance {section.distance}",
            section_index=index,
        )
    if section.duration <= 0:
        raise InvalidTopologyError(
            f"Section {index} has non-positive duration {section.duration}",
            section_index=index,
        )


def line_stations(line: Line, sections: Iterable[Section]) -> Tuple[int, ...]:
    """Return the station ids of ``line`` in up -> down order.

    The sections of a line must form a single gapless chain.

    Raises:
        InvalidTopologyError: If the chain forks, loops, or has a gap.
    """
    downstream: Dict[int, int] = {}
    upstream: Dict[int, int] = {}
    for section in sections:
        if section.line.id != line.id:
            continue
        if section.up_station_id in downstream or section.down_station_id in upstream:
            raise InvalidTopologyError(
                f"Line {line.name} forks at section "
                f"{section.up_station_id}->{section.down_station_id}"
            )
        downstream[section.up_station_id] = section.down_station_id
        upstream[section.down_station_id] = section.up_station_id

    if not downstream:
        return ()

    termini = [station_id for station_id in downstream if station_id not in upstream]
    if len(termini) != 1:
        raise InvalidTopologyError(
            f"Line {line.name} has {len(termini)} upstream termini, expected 1"
        )

    ordered = [termini[0]]
    while ordered[-1] in downstream:
        ordered.append(downstream[ordered[-1]])

    if len(ordered) != len(downstream) + 1:
        raise InvalidTopologyError(f"Line {line.name} sections are not one chain")
    return tuple(ordered)
