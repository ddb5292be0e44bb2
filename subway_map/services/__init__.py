"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Plans, describes and renders campus routes
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
