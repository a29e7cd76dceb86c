import json

import pytest

from src.translations import RedisTranslationStore


@pytest.fixture
def store(fake_redis, registry):
    return RedisTranslationStore("pages", registry=registry)


@pytest.mark.asyncio
async def test_put_stores_json_per_locale(store, fake_redis):
    await store.put("about", "fr", {"title": "À propos"})
    assert json.loads(fake_redis.hashes["translations:pages:about"]["fr"]) == {"title": "À propos"}


@pytest.mark.asyncio
async def test_get_and_overwrite(store):
    await store.put("about", "fr", {"title": "À propos"})
    await store.put("about", "fr", {"title": "Qui sommes-nous"})

    translation = await store.get("about", "fr")
    assert translation.fields == {"title": "Qui sommes-nous"}
    assert translation.entity_id == "about"
    assert list(await store.get_all("about")) == ["fr"]
    assert await store.get("about", "pt") is None


@pytest.mark.asyncio
async def test_get_localized_falls_back_to_default(store):
    await store.put("about", "en", {"title": "About"})
    await store.put("about", "fr", {"title": "À propos"})

    assert (await store.get_localized("about", "jp")).locale == "en"
    assert (await store.get_localized("about", "fr")).locale == "fr"
    assert await store.get_localized("contact", "fr") is None


@pytest.mark.asyncio
async def test_delete(store):
    await store.put("about", "en", {"title": "About"})
    await store.put("about", "fr", {"title": "À propos"})

    assert await store.delete("about", "fr") == 1
    assert set(await store.get_all("about")) == {"en"}
    await store.delete("about")
    assert await store.get_all("about") == {}


@pytest.mark.asyncio
async def test_explicit_client_is_used(registry, fake_redis):
    client = type(fake_redis)()
    store = RedisTranslationStore("pages", registry=registry, client=client)
    await store.put("home", "en", {"title": "Home"})
    assert "translations:pages:home" in client.hashes
