import pytest


@pytest.fixture
def category_id(client):
    response = client.post("/categories/", json={
        "key": "news",
        "translations": [
            {"locale": "en", "name": "News", "slug": "news"},
            {"locale": "fr", "name": "Nouvelles", "slug": "nouvelles"},
        ],
    })
    return response.json()["id"]


def _create_post(client, category_id, key="launch", translations=None):
    response = client.post("/posts/", json={
        "key": key,
        "category_id": category_id,
        "source_locale": "fr",
        "translations": translations if translations is not None else [
            {"locale": "fr", "title": "Lancement", "slug": "lancement", "content": "Le site est en ligne."},
            {"locale": "en", "title": "Launch", "slug": "launch", "content": "The site is live."},
        ],
    })
    assert response.status_code == 201, response.text
    return response.json()


def test_create_post(client, category_id):
    post = _create_post(client, category_id)
    assert post["category_id"] == category_id
    assert {t["locale"] for t in post["translations"]} == {"fr", "en"}


def test_create_post_requires_existing_category(client):
    response = client.post("/posts/", json={"key": "orphan", "category_id": 42})
    assert response.status_code == 404


def test_localized_post_prefers_default_over_source_locale(client, category_id):
    post = _create_post(client, category_id)
    body = client.get(f"/posts/{post['id']}/localized?locale=jp").json()
    assert body["locale"] == "en"
    assert body["title"] == "Launch"


def test_list_posts_filtered_by_category(client, category_id):
    _create_post(client, category_id)
    other = client.post("/categories/", json={"key": "other"}).json()["id"]
    _create_post(client, other, key="elsewhere", translations=[
        {"locale": "en", "title": "Elsewhere", "slug": "elsewhere"},
    ])

    body = client.get(f"/posts/?category_id={category_id}&locale=fr").json()
    assert [p["title"] for p in body] == ["Lancement"]
    assert len(client.get("/posts/").json()) == 2


def test_upsert_post_translation(client, category_id):
    post = _create_post(client, category_id)
    url = f"/posts/{post['id']}/translations/pt"
    client.put(url, json={"title": "Lançamento", "slug": "lancamento"})
    client.put(url, json={"title": "Lançamos", "slug": "lancamos", "content": "No ar."})

    translations = client.get(f"/posts/{post['id']}/translations").json()
    pt = [t for t in translations if t["locale"] == "pt"]
    assert len(pt) == 1
    assert pt[0]["title"] == "Lançamos"
    assert pt[0]["content"] == "No ar."


def test_delete_post_removes_translations(client, category_id):
    post = _create_post(client, category_id)
    assert client.delete(f"/posts/{post['id']}").status_code == 204
    assert client.get(f"/posts/{post['id']}/translations").status_code == 404
    assert client.get(f"/categories/{category_id}").status_code == 200


def test_create_rejects_slug_taken_in_same_locale(client, category_id):
    _create_post(client, category_id)
    response = client.post("/posts/", json={
        "key": "relaunch",
        "category_id": category_id,
        "translations": [{"locale": "en", "title": "Relaunch", "slug": "launch"}],
    })
    assert response.status_code == 409

    posts = client.get("/posts/?locale=en").json()
    assert [p["title"] for p in posts] == ["Launch"]
    assert client.get("/blog/launch").json()["post"]["title"] == "Launch"


def test_upsert_translation_rejects_slug_of_another_post(client, category_id):
    _create_post(client, category_id)
    other = _create_post(client, category_id, key="other", translations=[
        {"locale": "en", "title": "Other", "slug": "other"},
    ])
    response = client.put(f"/posts/{other['id']}/translations/en", json={"title": "Other", "slug": "launch"})
    assert response.status_code == 409

    translations = client.get(f"/posts/{other['id']}/translations").json()
    assert [t["slug"] for t in translations] == ["other"]


def test_list_posts_with_category_zero_matches_nothing(client, category_id):
    _create_post(client, category_id)
    assert client.get("/posts/?category_id=0").json() == []
