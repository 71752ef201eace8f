"""Graph-related utilities for representing the subway network.

This subpackage builds an in-memory graph from a station/section
snapshot and runs the shortest-path search on top of it.
"""

from .dijkstra import find_path
from .network import Edge, Graph, build_graph, line_stations

__all__ = ["Edge", "Graph", "build_graph", "find_path", "line_stations"]
