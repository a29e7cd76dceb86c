"""Logical routes served in every supported locale."""
from src.routing.table import LogicalRoute

LOGICAL_ROUTES = [
    LogicalRoute("home", "pages.show", path=""),
    LogicalRoute("about", "pages.show"),
    LogicalRoute("contact", "pages.show"),
    LogicalRoute("blog", "pages.blog"),
    LogicalRoute("category", "pages.category", path="blog/category/{slug}"),
    LogicalRoute("post", "pages.post", path="blog/{slug}"),
]
