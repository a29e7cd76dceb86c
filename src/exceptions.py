"""Application-level exceptions."""


class ConfigurationError(RuntimeError):
    """Invalid static configuration (locales, route table). Fatal at startup."""


class TranslationNotFound(LookupError):
    """No translation exists for an entity in any locale of the fallback chain."""

    def __init__(self, entity_id, locale: str):
        self.entity_id = entity_id
        self.locale = locale
        super().__init__(f"No translation for {entity_id!r} in locale '{locale}' or its fallbacks")
