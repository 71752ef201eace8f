"""Typed domain errors for the subway route & fare engine.

Every failure the engine can produce is one of these types. None of them
is retried internally: they are deterministic given the input and are
surfaced to the caller as-is.

All errors inherit from SubwayFareError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SubwayFareError(Exception):
    """Base error for the route & fare domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidTopologyError(SubwayFareError):
    """The station/section snapshot cannot form a valid graph.

    Raised for sections that reference unknown stations, connect a
    station to itself, or carry a non-positive distance or duration.

    Attributes:
        section_index: Position of the offending section, if any
    """

    section_index: Optional[int] = None


@dataclass
class StationNotFoundError(SubwayFareError):
    """Station id not found in the graph.

    Attributes:
        station_id: The station id that was not found
    """

    station_id: object = None


@dataclass
class SameStationError(SubwayFareError):
    """Departure and arrival are the same station."""

    station_id: object = None


@dataclass
class NoPathError(SubwayFareError):
    """No path connects the requested stations.

    Attributes:
        source: Departure station id
        destination: Arrival station id
    """

    source: object = None
    destination: object = None


@dataclass
class InvalidAgeError(SubwayFareError):
    """A negative rider age was supplied."""

    age: Optional[int] = None


@dataclass
class NetworkDataError(SubwayFareError):
    """Network snapshot data could not be loaded or parsed.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(SubwayFareError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
