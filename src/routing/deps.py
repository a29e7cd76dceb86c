"""FastAPI dependencies exposing the route table to handlers."""
from fastapi import HTTPException, Request, status

from src.routing.table import RouteEntry, RouteTable


def get_route_table(request: Request) -> RouteTable:
    return request.app.state.route_table


def get_route_entry(request: Request) -> RouteEntry:
    """Return the RouteEntry the current request was matched against."""
    route = request.scope.get("route")
    entry = get_route_table(request).get(getattr(route, "name", None) or "")
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Request was not matched against a localized route"
        )
    return entry
