"""Ports layer - Abstract interfaces (Protocols) for the engine.

Ports define the contracts between the engine core and its adapters,
so services can be wired with fakes in tests.
"""

from .fare import FarePolicyPort
from .graph import NetworkRepositoryPort, RouteSolverPort

__all__ = [
    # Graph
    "NetworkRepositoryPort",
    "RouteSolverPort",
    # Fare
    "FarePolicyPort",
]
