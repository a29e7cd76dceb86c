from src.routing.routes import LOGICAL_ROUTES
from src.routing.table import LogicalRoute, RouteEntry, RouteTable, build_route_table

__all__ = [
    "LOGICAL_ROUTES",
    "LogicalRoute",
    "RouteEntry",
    "RouteTable",
    "build_route_table",
]
