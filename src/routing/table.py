"""Localized route table: one route entry per (logical route, locale)."""
import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple
from urllib.parse import quote

from fastapi import APIRouter

from src.exceptions import ConfigurationError
from src.locales.paths import PathTranslator
from src.locales.registry import LocaleRegistry
from src.logging_config import get_logger

logger = get_logger(__name__)

PARAM_PATTERN = re.compile(r"{(\w+)(?::\w+)?}")


@dataclass(frozen=True)
class LogicalRoute:
    """Language-independent route.

    ``path`` is the untranslated path; it defaults to the key itself.
    ``handler`` names an entry of the handler mapping passed to
    :meth:`RouteTable.mount`.
    """

    key: str
    handler: str
    path: Optional[str] = None
    method: str = "GET"

    @property
    def default_path(self) -> str:
        return (self.key if self.path is None else self.path).strip("/")


@dataclass(frozen=True)
class RouteEntry:
    """Concrete route for a single locale."""

    method: str
    full_path: str
    handler: str
    name: str
    key: str
    locale: str

    @property
    def url_path(self) -> str:
        return "/" + self.full_path


def _join(locale: Optional[str], segment: str) -> str:
    return "/".join(part for part in (locale, segment) if part)


def _params(path: str) -> set:
    return set(PARAM_PATTERN.findall(path))


def _path_shape(path: str) -> str:
    """Path with parameter names erased; ``blog/{slug}`` and ``blog/{id}`` match the same URLs."""
    return PARAM_PATTERN.sub("{}", path)


class RouteTable:
    """Ordered, read-only collection of RouteEntry with name lookups."""

    def __init__(self, entries: Sequence[RouteEntry], default_locale: str):
        self._entries = tuple(entries)
        self.default_locale = default_locale
        self._by_name: Dict[str, RouteEntry] = {}
        self._by_path: Dict[Tuple[str, str], RouteEntry] = {}

        for entry in self._entries:
            if entry.name in self._by_name:
                raise ConfigurationError(f"Duplicate route name '{entry.name}'")
            path_key = (entry.method, _path_shape(entry.full_path))
            if path_key in self._by_path:
                other = self._by_path[path_key]
                raise ConfigurationError(
                    f"Routes '{other.name}' and '{entry.name}' share path "
                    f"{entry.method} {entry.url_path}"
                )
            self._by_name[entry.name] = entry
            self._by_path[path_key] = entry

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, name: str) -> Optional[RouteEntry]:
        return self._by_name.get(name)

    def url_for(self, key: str, locale: str, **params) -> str:
        """Build the URL of a logical route in the given locale."""
        entry = self._by_name.get(f"{key}.{locale}")
        if entry is None:
            raise KeyError(f"No route '{key}' for locale '{locale}'")

        def substitute(match: re.Match) -> str:
            name = match.group(1)
            if name not in params:
                raise ValueError(f"Missing parameter '{name}' for route '{entry.name}'")
            return quote(str(params[name]), safe="")

        return PARAM_PATTERN.sub(substitute, entry.url_path)

    def alternates(self, key: str, **params) -> Dict[str, str]:
        """URL of a logical route in every locale it is registered for."""
        return {
            entry.locale: self.url_for(key, entry.locale, **params)
            for entry in self._entries
            if entry.key == key
        }

    def mount(self, router: APIRouter, handlers: Mapping[str, Callable], **route_kwargs) -> APIRouter:
        """Register every entry on a FastAPI router under its route name."""
        for entry in self._entries:
            endpoint = handlers.get(entry.handler)
            if endpoint is None:
                raise ConfigurationError(
                    f"Route '{entry.name}' references unknown handler '{entry.handler}'"
                )
            router.add_api_route(
                entry.url_path,
                endpoint,
                methods=[entry.method],
                name=entry.name,
                **route_kwargs,
            )
        return router


def build_route_table(
    routes: Sequence[LogicalRoute],
    registry: LocaleRegistry,
    translator: PathTranslator,
) -> RouteTable:
    """Expand logical routes into one entry per supported locale.

    The default locale is served without a prefix, every other locale under
    ``/{locale}/``. Raises ConfigurationError when two entries match the same
    URLs, a translated path changes the route's parameters, or a default-locale
    path starts with a locale code.
    """
    default_locale = registry.default_locale()
    entries: List[RouteEntry] = []

    for route in routes:
        expected_params = _params(route.default_path)
        for locale in registry.supported_locales():
            segment = translator.resolve(route.key, locale, default=route.default_path)
            if _params(segment) != expected_params:
                raise ConfigurationError(
                    f"Path '{segment}' for route '{route.key}' in locale '{locale}' "
                    f"must declare parameters {sorted(expected_params)}"
                )
            if locale == default_locale and registry.is_supported(segment.split("/", 1)[0]):
                raise ConfigurationError(
                    f"Path '{segment}' for route '{route.key}' starts with a locale code "
                    f"and would be served in that locale"
                )
            prefix = None if locale == default_locale else locale
            entries.append(
                RouteEntry(
                    method=route.method.upper(),
                    full_path=_join(prefix, segment),
                    handler=route.handler,
                    name=f"{route.key}.{locale}",
                    key=route.key,
                    locale=locale,
                )
            )

    table = RouteTable(entries, default_locale)
    logger.info(
        "Built route table: %d routes x %d locales = %d entries",
        len(routes), len(registry.supported_locales()), len(table)
    )
    return table
