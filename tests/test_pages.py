import asyncio

import pytest

from src.pages.store import get_page_store


@pytest.fixture
def pages(client):
    store = get_page_store()

    async def seed():
        await store.put("home", "en", {"title": "Welcome"})
        await store.put("home", "fr", {"title": "Bienvenue"})
        await store.put("about", "en", {"title": "About us"})
        await store.put("about", "fr", {"title": "À propos"})
        await store.put("about", "pt", {"title": "Sobre nós"})

    asyncio.run(seed())
    return store


@pytest.fixture
def blog(client):
    category = client.post("/categories/", json={
        "key": "news",
        "translations": [
            {"locale": "en", "name": "News", "slug": "news"},
            {"locale": "fr", "name": "Nouvelles", "slug": "nouvelles"},
        ],
    }).json()
    post = client.post("/posts/", json={
        "key": "launch",
        "category_id": category["id"],
        "translations": [
            {"locale": "en", "title": "Launch", "slug": "launch", "content": "Live."},
            {"locale": "fr", "title": "Lancement", "slug": "lancement", "content": "En ligne."},
        ],
    }).json()
    return category, post


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_locales(client):
    assert client.get("/locales/").json() == {
        "locales": ["en", "pt", "fr", "jp"],
        "default": "en",
        "fallback": "en",
    }


def test_default_locale_page(client, pages):
    response = client.get("/about")
    assert response.status_code == 200
    body = response.json()
    assert body["locale"] == "en"
    assert body["route"] == "about.en"
    assert body["content"] == {"title": "About us"}
    assert response.headers["content-language"] == "en"


def test_translated_page_path(client, pages):
    body = client.get("/fr/a-propos").json()
    assert body["locale"] == "fr"
    assert body["route"] == "about.fr"
    assert body["content_locale"] == "fr"
    assert body["content"]["title"] == "À propos"
    assert body["alternates"] == {
        "en": "/about",
        "pt": "/pt/sobre",
        "fr": "/fr/a-propos",
        "jp": "/jp/about",
    }


def test_untranslated_path_serves_fallback_content(client, pages):
    body = client.get("/jp/about").json()
    assert body["locale"] == "jp"
    assert body["route"] == "about.jp"
    assert body["content_locale"] == "en"
    assert body["content"]["title"] == "About us"


def test_home_pages(client, pages):
    assert client.get("/").json()["route"] == "home.en"
    body = client.get("/fr").json()
    assert body["route"] == "home.fr"
    assert body["content"]["title"] == "Bienvenue"


def test_untranslated_segment_is_not_routed_in_other_locale(client, pages):
    assert client.get("/fr/about").status_code == 404
    assert client.get("/a-propos").status_code == 404


def test_page_without_content_is_404(client, pages):
    response = client.get("/fr/contact")
    assert response.status_code == 404
    assert "contact" in response.json()["detail"]


def test_blog_index(client, blog):
    body = client.get("/fr/blogue").json()
    assert body["route"] == "blog.fr"
    assert [(p["title"], p["url"]) for p in body["posts"]] == [("Lancement", "/fr/blogue/lancement")]


def test_post_page(client, blog):
    body = client.get("/fr/blogue/lancement").json()
    assert body["post"]["title"] == "Lancement"
    assert body["post"]["category"]["name"] == "Nouvelles"
    assert body["alternates"]["en"] == "/blog/launch"
    assert body["alternates"]["fr"] == "/fr/blogue/lancement"
    assert body["alternates"]["jp"] == "/jp/blog/launch"


def test_post_page_with_fallback_slug(client, blog):
    body = client.get("/jp/blog/launch").json()
    assert body["locale"] == "jp"
    assert body["post"]["locale"] == "en"
    assert body["post"]["title"] == "Launch"


def test_unknown_post_is_404(client, blog):
    assert client.get("/blog/missing").status_code == 404


def test_category_page(client, blog):
    body = client.get("/fr/blogue/categorie/nouvelles").json()
    assert body["route"] == "category.fr"
    assert body["category"]["name"] == "Nouvelles"
    assert [p["slug"] for p in body["posts"]] == ["lancement"]
    assert body["alternates"]["pt"] == "/pt/blog/categoria/news"
