"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVNetworkRepository: Loads a network snapshot from CSV files
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .csv_repository import CSVNetworkRepository
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["CSVNetworkRepository", "DijkstraRouteSolver"]
