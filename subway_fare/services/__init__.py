"""Services layer - Application orchestration.

Available services:
- RouteFareService: Finds a route and prices it
"""

from .route_fare import RouteFareService

__all__ = ["RouteFareService"]
