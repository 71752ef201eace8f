"""Subway route & fare engine.

Given a snapshot of stations, lines and sections, find the optimal path
between two stations and compute the fare a rider pays for it.

    from subway_fare import RouteFareService

    quote = RouteFareService().quote(1, 3, age=15, snapshot=snapshot)
"""

from .domain import (
    FareBreakdown,
    FareContext,
    InvalidAgeError,
    InvalidTopologyError,
    Line,
    NetworkSnapshot,
    NoPathError,
    PathResult,
    RouteFare,
    SameStationError,
    Section,
    Station,
    StationNotFoundError,
    SubwayFareError,
    WeightMode,
)
from .fare import FareCalculator
from .graph import build_graph, find_path
from .services import RouteFareService

__all__ = [
    "Station",
    "Line",
    "Section",
    "NetworkSnapshot",
    "WeightMode",
    "PathResult",
    "FareContext",
    "FareBreakdown",
    "RouteFare",
    "SubwayFareError",
    "InvalidTopologyError",
    "StationNotFoundError",
    "SameStationError",
    "NoPathError",
    "InvalidAgeError",
    "build_graph",
    "find_path",
    "FareCalculator",
    "RouteFareService",
]
