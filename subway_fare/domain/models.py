"""Immutable domain models for the subway route & fare engine.

All models are frozen dataclasses with slots. A query only ever reads
them, so a snapshot can be shared between concurrent queries without
coordination. These models have no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import InvalidTopologyError


class WeightMode(Enum):
    """Edge weight used by a shortest-path query.

    A graph is built for exactly one mode; distance and duration are
    never mixed within a single search.
    """

    DISTANCE = "distance"
    DURATION = "duration"

    @classmethod
    def parse(cls, value: str | WeightMode) -> WeightMode:
        """Parse a mode from its name, e.g. ``"duration"``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown weight mode {value!r}, expected one of "
                f"{[mode.value for mode in cls]}"
            ) from None


@dataclass(frozen=True, slots=True)
class Station:
    """A subway station.

    Attributes:
        id: Unique station identifier
        name: Human-readable station name
    """

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Line:
    """A subway line and its surcharge.

    Attributes:
        id: Unique line identifier
        name: Human-readable line name
        extra_fare: Surcharge added once when the line is used
    """

    id: int
    name: str
    extra_fare: int = 0

    def __post_init__(self) -> None:
        if self.extra_fare < 0:
            raise InvalidTopologyError(
                f"Line {self.name} extra fare must be non-negative, "
                f"got {self.extra_fare}"
            )


@dataclass(frozen=True, slots=True)
class Section:
    """A direct connection between two stations on one line.

    Sections are stored up -> down but are traversable both ways.
    Distance and duration are validated when a graph is built, so an
    invalid section can still be carried in a snapshot and reported
    with its position.

    Attributes:
        up_station_id: Upstream station id
        down_station_id: Downstream station id
        distance: Length of the section in distance units
        duration: Travel time of the section in time units
        line: Line owning this section
    """

    up_station_id: int
    down_station_id: int
    distance: int
    duration: int
    line: Line


@dataclass(frozen=True, slots=True)
class NetworkSnapshot:
    """Immutable bundle of the network data used by one query.

    Attributes:
        stations: All stations of the network
        lines: All lines of the network
        sections: All sections of every line
    """

    stations: tuple[Station, ...] = field(default_factory=tuple)
    lines: tuple[Line, ...] = field(default_factory=tuple)
    sections: tuple[Section, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path search.

    Totals are summed over the sections actually traversed, so they are
    consistent with ``stations`` whatever weight drove the search.

    Attributes:
        stations: Stations from source to destination, inclusive
        distance: Total distance of the traversed sections
        duration: Total duration of the traversed sections
        lines: Lines owning the traversed sections
    """

    stations: tuple[Station, ...]
    distance: int
    duration: int
    lines: frozenset[Line] = field(default_factory=frozenset)

    @property
    def station_ids(self) -> tuple[int, ...]:
        """Return the ids of the stations along the path."""
        return tuple(station.id for station in self.stations)

    @property
    def max_extra_fare(self) -> int:
        """Return the highest surcharge among the traversed lines."""
        return max((line.extra_fare for line in self.lines), default=0)


@dataclass(frozen=True, slots=True)
class FareContext:
    """Inputs read by the fare policies.

    Attributes:
        path: The path being priced
        age: Rider age, or None when unknown (no age discount)
    """

    path: PathResult
    age: Optional[int] = None


@dataclass(frozen=True, slots=True)
class FareBreakdown:
    """Per-step view of a fare calculation.

    Attributes:
        base: Distance-based fare
        surcharge: Line surcharge added on top of the base fare
        discount: Amount removed by the age discount
        total: Final fare
    """

    base: int
    surcharge: int
    discount: int
    total: int


@dataclass(frozen=True, slots=True)
class RouteFare:
    """A path together with its fare."""

    path: PathResult
    fare: int
