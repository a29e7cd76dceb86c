"""Locale-specific URL path segments for logical routes."""
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

# Untranslated routes reuse the route's own path ("jp" has no entries).
PATH_TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "pt": {
        "about": "sobre",
        "contact": "contato",
        "category": "blog/categoria/{slug}",
    },
    "fr": {
        "about": "a-propos",
        "blog": "blogue",
        "category": "blogue/categorie/{slug}",
        "post": "blogue/{slug}",
    },
}


class PathTranslator:
    """Maps (route key, locale) to a path segment."""

    def __init__(self, translations: Optional[Mapping[str, Mapping[str, str]]] = None):
        segments: Dict[Tuple[str, str], str] = {}
        for locale, routes in (translations or {}).items():
            for key, segment in routes.items():
                segments[(locale, key)] = segment.strip("/")
        self._segments = MappingProxyType(segments)

    def resolve(self, key: str, locale: str, default: Optional[str] = None) -> str:
        """Return the translated segment, else ``default``, else the key itself."""
        segment = self._segments.get((locale, key))
        if segment is not None:
            return segment
        return key if default is None else default
