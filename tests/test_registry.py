import pytest

from src.exceptions import ConfigurationError
from src.locales.registry import LocaleRegistry


def test_registry_exposes_locales_in_order(registry):
    assert registry.supported_locales() == ("en", "pt", "fr", "jp")
    assert registry.default_locale() == "en"
    assert registry.fallback_locale() == "en"


def test_is_supported(registry):
    assert registry.is_supported("fr")
    assert not registry.is_supported("de")
    assert not registry.is_supported("FR")
    assert not registry.is_supported("")


def test_fallback_defaults_to_default_locale():
    registry = LocaleRegistry.from_codes(["en", "fr"], default="fr")
    assert registry.fallback_locale() == "fr"


def test_default_must_be_supported():
    with pytest.raises(ConfigurationError, match="Default locale 'de'"):
        LocaleRegistry.from_codes(["en", "fr"], default="de")


def test_fallback_must_be_supported():
    with pytest.raises(ConfigurationError, match="Fallback locale 'de'"):
        LocaleRegistry.from_codes(["en", "fr"], default="en", fallback="de")


@pytest.mark.parametrize("codes", [[], ["en", "en"], ["en", ""], ["en", "pt/br"], ["en", " fr"]])
def test_invalid_locale_lists_are_rejected(codes):
    with pytest.raises(ConfigurationError):
        LocaleRegistry.from_codes(codes, default="en")


def test_registry_is_immutable(registry):
    with pytest.raises(AttributeError):
        registry.default = "fr"
