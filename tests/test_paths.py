from src.locales.paths import PathTranslator


def test_resolve_returns_translation():
    translator = PathTranslator({"fr": {"about": "a-propos"}})
    assert translator.resolve("about", "fr") == "a-propos"


def test_resolve_falls_back_to_key():
    translator = PathTranslator({"fr": {"about": "a-propos"}})
    assert translator.resolve("about", "jp") == "about"
    assert translator.resolve("contact", "fr") == "contact"


def test_resolve_falls_back_to_explicit_default():
    translator = PathTranslator({})
    assert translator.resolve("home", "fr", default="") == ""
    assert translator.resolve("post", "fr", default="blog/{slug}") == "blog/{slug}"


def test_surrounding_slashes_are_stripped():
    translator = PathTranslator({"pt": {"about": "/sobre/"}})
    assert translator.resolve("about", "pt") == "sobre"
