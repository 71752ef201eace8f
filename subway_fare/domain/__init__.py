"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the engine. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    InvalidAgeError,
    InvalidTopologyError,
    NetworkDataError,
    NoPathError,
    SameStationError,
    StationNotFoundError,
    SubwayFareError,
)
from .models import (
    FareBreakdown,
    FareContext,
    Line,
    NetworkSnapshot,
    PathResult,
    RouteFare,
    Section,
    Station,
    WeightMode,
)

__all__ = [
    # Models
    "Station",
    "Line",
    "Section",
    "NetworkSnapshot",
    "WeightMode",
    "PathResult",
    "FareContext",
    "FareBreakdown",
    "RouteFare",
    # Errors
    "SubwayFareError",
    "InvalidTopologyError",
    "StationNotFoundError",
    "SameStationError",
    "NoPathError",
    "InvalidAgeError",
    "NetworkDataError",
    "ConfigurationError",
]
