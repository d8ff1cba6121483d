"""Unit tests for the RecordStore."""

import asyncio

import pytest

from creziapro.application.services import RecordStore
from creziapro.domain.entities import (
    DEFAULT_SITE_SETTINGS,
    PricingBand,
    ProjectStatus,
    ReviewStatus,
    SiteSettings,
)
from creziapro.domain.exceptions import StorageError

DAY_MS = 24 * 60 * 60 * 1000


def _service_data(**overrides) -> dict:
    data = {
        "title": "Web Dev",
        "description": "Websites that convert",
        "icon": "Code",
        "features": ["SEO", "Responsive"],
        "pricing_bands": [{"label": "Starter", "min": 5000, "max": 15000}],
    }
    data.update(overrides)
    return data


def _post_data(title: str, *, published: bool = True, slug: str | None = None) -> dict:
    return {
        "title": title,
        "slug": slug or title.lower().replace(" ", "-"),
        "content": "Body of the post",
        "author": "Team",
        "published": published,
    }


def _custom_settings() -> SiteSettings:
    return SiteSettings(
        hero_title="Ship it",
        hero_subtitle="We build things",
        hero_cta_text="Talk to us",
        contact_email="hello@example.com",
        contact_phone="+1 555 0100",
        chatbot_prompt="Be brief and friendly.",
    )


# ── Generic CRUD ──


@pytest.mark.asyncio
async def test_add_service_generates_id_and_lists_it(store: RecordStore):
    service = await store.add_service(_service_data())

    assert service.id
    assert service.title == "Web Dev"
    assert service.features == ("SEO", "Responsive")
    assert service.pricing_bands == (PricingBand(label="Starter", min=5000, max=15000),)
    assert await store.list_services() == [service]


@pytest.mark.asyncio
async def test_add_writes_through_to_storage(store: RecordStore, storage):
    project = await store.add_project({
        "title": "Shop",
        "description": "E-commerce build",
        "image": "https://example.com/shop.png",
        "status": "Ongoing",
        "tags": ["React"],
    })

    stored = storage.entries[f"project_{project.id}"]
    assert stored["title"] == "Shop"
    assert stored["status"] == "Ongoing"
    assert project.status is ProjectStatus.ONGOING


@pytest.mark.asyncio
async def test_update_merges_partial_changes(store: RecordStore, storage):
    service = await store.add_service(_service_data())

    updated = await store.update_service(service.id, {"title": "Web Development"})

    assert updated is not None
    assert updated.id == service.id
    assert updated.title == "Web Development"
    assert updated.description == service.description
    assert updated.features == service.features
    assert storage.entries[f"service_{service.id}"]["title"] == "Web Development"


@pytest.mark.asyncio
async def test_update_cannot_change_id(store: RecordStore):
    service = await store.add_service(_service_data())

    updated = await store.update_service(service.id, {"id": "hijacked", "icon": "Bot"})

    assert updated.id == service.id
    assert updated.icon == "Bot"
    assert [s.id for s in await store.list_services()] == [service.id]


@pytest.mark.asyncio
async def test_update_and_delete_unknown_id(store: RecordStore):
    assert await store.update_service("missing", {"title": "x"}) is None
    assert await store.update_project("missing", {"title": "x"}) is None
    assert await store.update_blog_post("missing", {"title": "x"}) is None
    assert await store.update_banner("missing", {"title": "x"}) is None
    assert await store.delete_service("missing") is False
    assert await store.delete_project("missing") is False
    assert await store.delete_blog_post("missing") is False
    assert await store.delete_banner("missing") is False
    assert await store.delete_review("missing") is False
    assert await store.delete_contact_message("missing") is False


@pytest.mark.asyncio
async def test_delete_succeeds_exactly_once(store: RecordStore, storage):
    banner = await store.add_banner({
        "title": "Launch",
        "image_url": "https://example.com/b.png",
        "link": "https://example.com",
        "published": True,
    })

    assert await store.delete_banner(banner.id) is True
    assert await store.delete_banner(banner.id) is False
    assert f"banner_{banner.id}" not in storage.entries
    assert await store.list_banners() == []


@pytest.mark.asyncio
async def test_list_banners_published_only(store: RecordStore):
    live = await store.add_banner({
        "title": "Live", "image_url": "https://x/1.png", "link": "https://x", "published": True,
    })
    await store.add_banner({
        "title": "Draft", "image_url": "https://x/2.png", "link": "https://x", "published": False,
    })

    assert len(await store.list_banners()) == 2
    assert await store.list_banners(published_only=True) == [live]


# ── Blog posts ──


@pytest.mark.asyncio
async def test_blog_posts_are_listed_newest_first(store: RecordStore, clock):
    first = await store.add_blog_post(_post_data("First post"))
    clock.advance(1000)
    second = await store.add_blog_post(_post_data("Second post", published=False))
    clock.advance(1000)
    third = await store.add_blog_post(_post_data("Third post"))

    assert [p.id for p in await store.list_blog_posts()] == [third.id, second.id, first.id]
    assert [p.id for p in await store.list_blog_posts(True)] == [third.id, first.id]


@pytest.mark.asyncio
async def test_update_blog_post_keeps_created_at(store: RecordStore, clock):
    post = await store.add_blog_post(_post_data("Hello world"))
    clock.advance(5000)

    updated = await store.update_blog_post(
        post.id, {"content": "New body", "created_at": 1}
    )

    assert updated.created_at == post.created_at
    assert updated.content == "New body"


@pytest.mark.asyncio
async def test_duplicate_slugs_are_not_rejected(store: RecordStore):
    await store.add_blog_post(_post_data("One", slug="same-slug"))
    await store.add_blog_post(_post_data("Two", slug="same-slug"))

    assert len(await store.list_blog_posts()) == 2


@pytest.mark.asyncio
async def test_get_blog_post_by_slug_only_finds_published(store: RecordStore):
    await store.add_blog_post(_post_data("Hidden", slug="hidden", published=False))
    visible = await store.add_blog_post(_post_data("Visible", slug="visible"))

    assert await store.get_blog_post_by_slug("visible") == visible
    assert await store.get_blog_post_by_slug("hidden") is None
    assert await store.get_blog_post_by_slug("nope") is None


# ── Reviews ──


@pytest.mark.asyncio
async def test_new_review_is_always_pending(store: RecordStore):
    review = await store.add_review(
        {"name": "A", "rating": 5, "comment": "Great", "status": "approved"}
    )

    assert review.status is ReviewStatus.PENDING
    assert review.created_at > 0


@pytest.mark.asyncio
async def test_review_approval_moves_it_between_lists(store: RecordStore):
    review = await store.add_review({"name": "A", "rating": 5, "comment": "Great"})

    approved = await store.update_review_status(review.id, "approved")

    assert approved.status is ReviewStatus.APPROVED
    assert approved.created_at == review.created_at
    assert review.id not in [r.id for r in await store.list_reviews("pending")]
    assert review.id in [r.id for r in await store.list_reviews(ReviewStatus.APPROVED)]


@pytest.mark.asyncio
async def test_update_review_status_unknown_id(store: RecordStore):
    assert await store.update_review_status("missing", "approved") is None


@pytest.mark.asyncio
async def test_reviews_listed_newest_first(store: RecordStore, clock):
    old = await store.add_review({"name": "Old", "rating": 3, "comment": "ok"})
    clock.advance(10)
    new = await store.add_review({"name": "New", "rating": 4, "comment": "good"})

    assert [r.id for r in await store.list_reviews()] == [new.id, old.id]


# ── Contact messages ──


@pytest.mark.asyncio
async def test_contact_message_lifecycle(store: RecordStore, clock):
    first = await store.add_contact_message(
        {"name": "Jane", "email": "jane@example.com", "message": "Hi"}
    )
    clock.advance(10)
    second = await store.add_contact_message(
        {"name": "Joe", "email": "joe@example.com", "message": "Hello", "read": True}
    )

    assert first.read is False
    assert second.read is False
    assert first.timestamp == clock.now - 10
    assert [m.id for m in await store.list_contact_messages()] == [second.id, first.id]

    assert await store.mark_message_as_read(first.id) is True
    assert await store.mark_message_as_read("missing") is False
    messages = {m.id: m for m in await store.list_contact_messages()}
    assert messages[first.id].read is True
    assert messages[first.id].timestamp == first.timestamp


# ── Chat sessions ──


@pytest.mark.asyncio
async def test_add_session_stamps_times_and_default_title(store: RecordStore, clock):
    info = await store.add_session("s1")

    assert info.created_at == info.last_active == clock.now
    assert info.title.startswith("Chat ")


@pytest.mark.asyncio
async def test_sessions_sorted_by_last_activity(store: RecordStore, clock):
    await store.add_session("old", "Old chat")
    clock.advance(1000)
    await store.add_session("new", "New chat")
    clock.advance(1000)

    await store.update_session_activity("old")
    await store.update_session_activity("missing")

    sessions = await store.list_sessions()
    assert [s.id for s in sessions] == ["old", "new"]
    assert sessions[0].last_active == clock.now
    assert sessions[0].last_active >= sessions[0].created_at


@pytest.mark.asyncio
async def test_update_session_title(store: RecordStore, storage):
    await store.add_session("s1", "Before")

    assert await store.update_session_title("s1", "After") is True
    assert await store.update_session_title("missing", "After") is False
    assert storage.entries["session_s1"]["title"] == "After"


@pytest.mark.asyncio
async def test_clear_all_sessions(store: RecordStore, storage):
    await store.add_session("a")
    await store.add_session("b")
    token = await store.create_admin_session("admin@creziapro.com")

    assert await store.clear_all_sessions() == 2
    assert await store.list_sessions() == []
    assert not any(key.startswith("session_") for key in storage.entries)
    assert f"adminsession_{token}" in storage.entries
    assert await store.clear_all_sessions() == 0


@pytest.mark.asyncio
async def test_remove_session(store: RecordStore):
    await store.add_session("s1")

    assert await store.remove_session("s1") is True
    assert await store.remove_session("s1") is False


# ── Admin sessions ──


@pytest.mark.asyncio
async def test_admin_session_valid_after_creation(store: RecordStore, clock):
    token = await store.create_admin_session("admin@creziapro.com")

    session = await store.verify_admin_session(token)

    assert session is not None
    assert session.user_id == "admin@creziapro.com"
    assert session.expires == clock.now + DAY_MS


@pytest.mark.asyncio
async def test_expired_admin_session_is_removed_on_verify(store: RecordStore, storage, clock):
    token = await store.create_admin_session("admin@creziapro.com")
    key = f"adminsession_{token}"

    clock.advance(DAY_MS - 1)
    assert await store.verify_admin_session(token) is not None

    clock.advance(1)
    assert key in storage.entries
    assert await store.verify_admin_session(token) is None
    assert key not in storage.entries
    assert await store.verify_admin_session(token) is None


@pytest.mark.asyncio
async def test_unknown_admin_token(store: RecordStore):
    assert await store.verify_admin_session("nope") is None


@pytest.mark.asyncio
async def test_delete_admin_session(store: RecordStore, storage):
    token = await store.create_admin_session("admin@creziapro.com")

    await store.delete_admin_session(token)
    await store.delete_admin_session(token)

    assert await store.verify_admin_session(token) is None
    assert f"adminsession_{token}" not in storage.entries


# ── Site settings ──


@pytest.mark.asyncio
async def test_site_settings_default(store: RecordStore):
    settings = await store.get_site_settings()

    assert settings == DEFAULT_SITE_SETTINGS
    assert settings.hero_title
    assert settings.contact_email == "contact@creziapro.com"


@pytest.mark.asyncio
async def test_site_settings_full_replace(store: RecordStore, storage):
    await store.update_site_settings(DEFAULT_SITE_SETTINGS)
    custom = _custom_settings()

    await store.update_site_settings(custom)

    assert await store.get_site_settings() == custom
    assert (await store.get_site_settings()).twitter_url is None
    assert storage.entries["site_settings"]["hero_title"] == "Ship it"


@pytest.mark.asyncio
async def test_site_settings_accepts_mapping(store: RecordStore):
    saved = await store.update_site_settings({
        "hero_title": "Hi",
        "hero_subtitle": "There",
        "hero_cta_text": "Go",
        "contact_email": "a@b.c",
        "contact_phone": "1",
        "chatbot_prompt": "Prompt",
        "linkedin_url": "https://linkedin.com/company/x",
    })

    assert saved.linkedin_url == "https://linkedin.com/company/x"
    assert await store.get_site_settings() == saved


# ── Aggregates ──


@pytest.mark.asyncio
async def test_chatbot_config_composes_prompt_and_services(store: RecordStore):
    service = await store.add_service(_service_data())

    config = await store.get_chatbot_config()

    assert service in config.services
    assert config.prompt == DEFAULT_SITE_SETTINGS.chatbot_prompt

    await store.update_site_settings(_custom_settings())
    assert (await store.get_chatbot_config()).prompt == "Be brief and friendly."


@pytest.mark.asyncio
async def test_stats_reflect_collection_sizes(store: RecordStore):
    await store.add_service(_service_data())
    await store.add_service(_service_data(title="AI Chatbots"))
    await store.add_blog_post(_post_data("Post"))
    await store.add_contact_message({"name": "J", "email": "j@x.io", "message": "Hi"})
    await store.add_review({"name": "A", "rating": 4, "comment": "Nice"})

    stats = await store.get_stats()

    assert stats.services == 2
    assert stats.projects == 0
    assert stats.blog_posts == 1
    assert stats.messages == 1


# ── Hydration ──


@pytest.mark.asyncio
async def test_concurrent_ensure_loaded_hydrates_once(storage, clock):
    storage.entries.update({
        "service_s1": {
            "id": "s1", "title": "Web", "description": "d", "icon": "Code",
            "features": ["SEO"], "pricing_bands": [],
        },
        "session_c1": {"id": "c1", "title": "Chat", "created_at": 1, "last_active": 2},
    })
    store = RecordStore(storage, clock=clock)

    await asyncio.gather(*(store.ensure_loaded() for _ in range(5)))
    await store.ensure_loaded()

    assert storage.list_calls == 1
    assert store.is_loaded
    assert [s.id for s in await store.list_services()] == ["s1"]
    assert [s.id for s in await store.list_sessions()] == ["c1"]


@pytest.mark.asyncio
async def test_operations_racing_first_load_do_not_lose_entries(storage, clock):
    storage.entries["service_s1"] = {
        "id": "s1", "title": "Web", "description": "d", "icon": "Code",
        "features": [], "pricing_bands": [],
    }
    store = RecordStore(storage, clock=clock)

    await asyncio.gather(
        store.add_service(_service_data(title="A")),
        store.add_service(_service_data(title="B")),
        store.list_services(),
    )

    assert sorted(s.title for s in await store.list_services()) == ["A", "B", "Web"]


@pytest.mark.asyncio
async def test_hydration_dispatches_by_prefix(storage, clock):
    storage.entries.update({
        "contact_m1": {
            "id": "m1", "name": "J", "email": "j@x.io", "message": "Hi",
            "timestamp": 5, "read": True,
        },
        "project_p1": {
            "id": "p1", "title": "P", "description": "d", "image": "https://x/p.png",
            "status": "Completed", "tags": ["a"],
        },
        "blogpost_b1": {
            "id": "b1", "title": "B", "slug": "b", "content": "c", "author": "a",
            "published": True, "created_at": 10,
        },
        "banner_n1": {
            "id": "n1", "title": "N", "image_url": "https://x/n.png",
            "link": "https://x", "published": False,
        },
        "review_r1": {
            "id": "r1", "name": "R", "rating": 5, "comment": "c",
            "status": "approved", "created_at": 3,
        },
        "adminsession_tok": {"user_id": "admin", "expires": clock.now + 1000},
        "site_settings": {
            "hero_title": "Stored", "hero_subtitle": "s", "hero_cta_text": "c",
            "contact_email": "e@x.io", "contact_phone": "1", "chatbot_prompt": "p",
        },
        "legacy_thing": {"whatever": True},
    })
    store = RecordStore(storage, clock=clock)

    assert [m.id for m in await store.list_contact_messages()] == ["m1"]
    assert (await store.list_projects())[0].status is ProjectStatus.COMPLETED
    assert [p.id for p in await store.list_blog_posts()] == ["b1"]
    assert [b.id for b in await store.list_banners()] == ["n1"]
    assert [r.id for r in await store.list_reviews("approved")] == ["r1"]
    assert (await store.verify_admin_session("tok")).user_id == "admin"
    assert (await store.get_site_settings()).hero_title == "Stored"


@pytest.mark.asyncio
async def test_hydration_skips_malformed_entries(storage, clock):
    storage.entries.update({
        "service_bad": {"title": "missing everything else"},
        "review_bad": {
            "id": "bad", "name": "R", "rating": 5, "comment": "c",
            "status": "rejected", "created_at": 1,
        },
        "service_ok": {
            "id": "ok", "title": "Web", "description": "d", "icon": "Code",
            "features": [], "pricing_bands": [],
        },
    })
    store = RecordStore(storage, clock=clock)

    assert [s.id for s in await store.list_services()] == ["ok"]
    assert await store.list_reviews() == []


@pytest.mark.asyncio
async def test_state_survives_restart(store: RecordStore, storage, clock):
    service = await store.add_service(_service_data())
    await store.update_site_settings(_custom_settings())
    token = await store.create_admin_session("admin@creziapro.com")

    restarted = RecordStore(storage, clock=clock)

    assert await restarted.list_services() == [service]
    assert await restarted.get_site_settings() == _custom_settings()
    assert (await restarted.verify_admin_session(token)).user_id == "admin@creziapro.com"


# ── Storage failures ──


@pytest.mark.asyncio
async def test_failed_write_leaves_mirror_untouched(store: RecordStore, storage):
    service = await store.add_service(_service_data())
    storage.fail_writes = True

    with pytest.raises(StorageError):
        await store.add_service(_service_data(title="Never stored"))
    with pytest.raises(StorageError):
        await store.update_service(service.id, {"title": "Changed"})
    with pytest.raises(StorageError):
        await store.delete_service(service.id)
    with pytest.raises(StorageError):
        await store.update_site_settings(_custom_settings())

    assert await store.list_services() == [service]
    assert await store.get_site_settings() == DEFAULT_SITE_SETTINGS


@pytest.mark.asyncio
async def test_failed_hydration_is_retried(storage, clock):
    store = RecordStore(storage, clock=clock)
    original = storage.list_all

    async def broken():
        raise StorageError("list", "*", "offline")

    storage.list_all = broken
    with pytest.raises(StorageError):
        await store.list_services()
    assert not store.is_loaded

    storage.list_all = original
    assert await store.list_services() == []
    assert store.is_loaded
