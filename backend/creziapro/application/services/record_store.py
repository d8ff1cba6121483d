"""Record store — single source of truth for all site content.

Keeps an in-memory mirror of every collection, hydrated lazily from a
durable key-value medium and kept in lockstep with it. Each collection
lives under its own key prefix in storage; the site settings singleton
lives under one reserved key.

Write discipline: every mutation runs under one store-wide lock and
writes durable storage first, then the mirror. A failed durable write
propagates and leaves the mirror untouched.
"""

import asyncio
import logging
import secrets
import time
import uuid
from collections.abc import AsyncIterator, Callable, Mapping
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from creziapro.application.interfaces import KeyValueStorage
from creziapro.domain.entities import (
    DEFAULT_SITE_SETTINGS,
    AdminSession,
    Banner,
    BlogPost,
    ChatbotConfig,
    ContactMessage,
    DashboardStats,
    Project,
    Review,
    ReviewStatus,
    Service,
    SessionInfo,
    SiteSettings,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SITE_SETTINGS_KEY = "site_settings"
ADMIN_SESSION_TTL_MS = 24 * 60 * 60 * 1000


class Namespace(str, Enum):
    """Storage key prefix of each collection."""

    SESSION = "session_"
    CONTACT = "contact_"
    SERVICE = "service_"
    PROJECT = "project_"
    BLOG_POST = "blogpost_"
    BANNER = "banner_"
    REVIEW = "review_"
    ADMIN_SESSION = "adminsession_"

    def key(self, record_id: str) -> str:
        return f"{self.value}{record_id}"


class _Collection(Generic[T]):
    """Mirror of one namespace plus the adapter that validates its records."""

    def __init__(self, namespace: Namespace, entity_type: type[T]):
        self.namespace = namespace
        self.adapter: TypeAdapter[T] = TypeAdapter(entity_type)
        self.items: dict[str, T] = {}

    def decode(self, value: Any) -> T:
        return self.adapter.validate_python(value)

    def encode(self, entity: T) -> dict[str, Any]:
        return self.adapter.dump_python(entity, mode="json")

    def __len__(self) -> int:
        return len(self.items)


def _epoch_ms() -> int:
    return int(time.time() * 1000)


def _default_session_title(now_ms: int) -> str:
    day = datetime.fromtimestamp(now_ms / 1000, tz=timezone.utc)
    return f"Chat {day:%m/%d/%Y}"


class RecordStore:
    """Per-tenant persistent store with an in-memory mirror.

    Construct once per tenant with its durable storage. Not-found
    conditions are reported softly (``None`` / ``False``); storage
    failures raise ``StorageError``.

    Args:
        storage: Durable key-value medium.
        clock: Returns the current time in epoch milliseconds.
        admin_session_ttl_ms: Lifetime of a new admin session.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        clock: Callable[[], int] | None = None,
        admin_session_ttl_ms: int = ADMIN_SESSION_TTL_MS,
    ):
        self._storage = storage
        self._clock = clock or _epoch_ms
        self._admin_session_ttl_ms = admin_session_ttl_ms

        self._sessions: _Collection[SessionInfo] = _Collection(Namespace.SESSION, SessionInfo)
        self._contacts: _Collection[ContactMessage] = _Collection(Namespace.CONTACT, ContactMessage)
        self._services: _Collection[Service] = _Collection(Namespace.SERVICE, Service)
        self._projects: _Collection[Project] = _Collection(Namespace.PROJECT, Project)
        self._blog_posts: _Collection[BlogPost] = _Collection(Namespace.BLOG_POST, BlogPost)
        self._banners: _Collection[Banner] = _Collection(Namespace.BANNER, Banner)
        self._reviews: _Collection[Review] = _Collection(Namespace.REVIEW, Review)
        self._admin_sessions: _Collection[AdminSession] = _Collection(
            Namespace.ADMIN_SESSION, AdminSession
        )
        self._collections: dict[Namespace, _Collection[Any]] = {
            c.namespace: c
            for c in (
                self._sessions,
                self._contacts,
                self._services,
                self._projects,
                self._blog_posts,
                self._banners,
                self._reviews,
                self._admin_sessions,
            )
        }
        self._settings_adapter: TypeAdapter[SiteSettings] = TypeAdapter(SiteSettings)
        self._site_settings: SiteSettings | None = None

        self._loaded = False
        self._load_lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()

    # ── Hydration ────────────────────────────────────────────────────

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    async def ensure_loaded(self) -> None:
        """Populate the mirror from durable storage, exactly once.

        Concurrent first callers wait on the same hydration. If listing
        the storage fails the error propagates and the next call retries.
        """
        if self._loaded:
            return
        async with self._load_lock:
            if self._loaded:
                return
            entries = await self._storage.list_all()
            loaded = sum(1 for key, value in entries.items() if self._hydrate(key, value))
            self._loaded = True
            logger.info(
                "Record store hydrated: %d of %d stored entries loaded", loaded, len(entries)
            )

    def _hydrate(self, key: str, value: Any) -> bool:
        """Dispatch one stored entry into its collection by key prefix."""
        if key == SITE_SETTINGS_KEY:
            try:
                self._site_settings = self._settings_adapter.validate_python(value)
            except ValidationError as exc:
                logger.warning("Skipping malformed site settings entry: %s", exc)
                return False
            return True

        for namespace, collection in self._collections.items():
            if not key.startswith(namespace.value):
                continue
            record_id = key[len(namespace.value):]
            try:
                collection.items[record_id] = collection.decode(value)
            except ValidationError as exc:
                logger.warning("Skipping malformed entry '%s': %s", key, exc)
                return False
            return True

        logger.debug("Ignoring storage entry with unknown prefix: %s", key)
        return False

    # ── Write-through primitives ─────────────────────────────────────

    @asynccontextmanager
    async def _writing(self) -> AsyncIterator[None]:
        await self.ensure_loaded()
        async with self._write_lock:
            yield

    async def _put(self, collection: _Collection[T], record_id: str, entity: T) -> None:
        await self._storage.put(collection.namespace.key(record_id), collection.encode(entity))
        collection.items[record_id] = entity

    async def _discard(self, collection: _Collection[Any], record_id: str) -> bool:
        if record_id not in collection.items:
            return False
        await self._storage.delete(collection.namespace.key(record_id))
        del collection.items[record_id]
        return True

    async def _add(
        self, collection: _Collection[T], data: Mapping[str, Any], **generated: Any
    ) -> T:
        record_id = str(uuid.uuid4())
        entity = collection.decode({**data, **generated, "id": record_id})
        async with self._writing():
            await self._put(collection, record_id, entity)
        logger.debug("Added %s%s", collection.namespace.value, record_id)
        return entity

    async def _update(
        self,
        collection: _Collection[T],
        record_id: str,
        changes: Mapping[str, Any],
        *,
        protected: tuple[str, ...] = ("id",),
    ) -> T | None:
        """Shallow-merge ``changes`` over an existing record."""
        async with self._writing():
            existing = collection.items.get(record_id)
            if existing is None:
                return None
            current = collection.encode(existing)
            merged = {**current, **changes}
            for name in protected:
                merged[name] = current[name]
            entity = collection.decode(merged)
            await self._put(collection, record_id, entity)
        return entity

    async def _delete(self, collection: _Collection[Any], record_id: str) -> bool:
        async with self._writing():
            return await self._discard(collection, record_id)

    async def _list(
        self,
        collection: _Collection[T],
        newest_first_by: Callable[[T], int] | None = None,
    ) -> list[T]:
        await self.ensure_loaded()
        items = list(collection.items.values())
        if newest_first_by is not None:
            items.sort(key=newest_first_by, reverse=True)
        return items

    # ── Admin sessions ───────────────────────────────────────────────

    async def create_admin_session(self, user_id: str) -> str:
        """Open a new admin session and return its opaque token."""
        token = secrets.token_urlsafe(32)
        session = AdminSession(user_id=user_id, expires=self._clock() + self._admin_session_ttl_ms)
        async with self._writing():
            await self._put(self._admin_sessions, token, session)
        logger.info("Admin session created for %s", user_id)
        return token

    async def verify_admin_session(self, token: str) -> AdminSession | None:
        """Return the live session for ``token``.

        An expired session is deleted as a side effect of this read.
        """
        await self.ensure_loaded()
        session = self._admin_sessions.items.get(token)
        if session is None:
            return None
        if not session.is_expired(self._clock()):
            return session
        async with self._writing():
            await self._discard(self._admin_sessions, token)
        logger.info("Removed expired admin session for %s", session.user_id)
        return None

    async def delete_admin_session(self, token: str) -> None:
        async with self._writing():
            await self._storage.delete(Namespace.ADMIN_SESSION.key(token))
            self._admin_sessions.items.pop(token, None)

    # ── Chat sessions ────────────────────────────────────────────────

    async def add_session(self, session_id: str, title: str | None = None) -> SessionInfo:
        now = self._clock()
        info = SessionInfo(
            id=session_id,
            title=title or _default_session_title(now),
            created_at=now,
            last_active=now,
        )
        async with self._writing():
            await self._put(self._sessions, session_id, info)
        return info

    async def remove_session(self, session_id: str) -> bool:
        return await self._delete(self._sessions, session_id)

    async def update_session_activity(self, session_id: str) -> None:
        async with self._writing():
            session = self._sessions.items.get(session_id)
            if session is None:
                return
            last_active = max(self._clock(), session.created_at)
            await self._put(self._sessions, session_id, replace(session, last_active=last_active))

    async def update_session_title(self, session_id: str, title: str) -> bool:
        async with self._writing():
            session = self._sessions.items.get(session_id)
            if session is None:
                return False
            await self._put(self._sessions, session_id, replace(session, title=title))
        return True

    async def list_sessions(self) -> list[SessionInfo]:
        return await self._list(self._sessions, lambda s: s.last_active)

    async def clear_all_sessions(self) -> int:
        """Delete every chat session. Returns how many were removed."""
        async with self._writing():
            count = len(self._sessions)
            if count:
                keys = [Namespace.SESSION.key(session_id) for session_id in self._sessions.items]
                await self._storage.delete_many(keys)
                self._sessions.items.clear()
        logger.info("Cleared %d chat sessions", count)
        return count

    # ── Contact messages ─────────────────────────────────────────────

    async def add_contact_message(self, data: Mapping[str, Any]) -> ContactMessage:
        return await self._add(self._contacts, data, timestamp=self._clock(), read=False)

    async def list_contact_messages(self) -> list[ContactMessage]:
        return await self._list(self._contacts, lambda m: m.timestamp)

    async def mark_message_as_read(self, message_id: str) -> bool:
        updated = await self._update(
            self._contacts, message_id, {"read": True}, protected=("id", "timestamp")
        )
        return updated is not None

    async def delete_contact_message(self, message_id: str) -> bool:
        return await self._delete(self._contacts, message_id)

    # ── Services ─────────────────────────────────────────────────────

    async def add_service(self, data: Mapping[str, Any]) -> Service:
        return await self._add(self._services, data)

    async def update_service(self, service_id: str, changes: Mapping[str, Any]) -> Service | None:
        return await self._update(self._services, service_id, changes)

    async def delete_service(self, service_id: str) -> bool:
        return await self._delete(self._services, service_id)

    async def list_services(self) -> list[Service]:
        return await self._list(self._services)

    # ── Projects ─────────────────────────────────────────────────────

    async def add_project(self, data: Mapping[str, Any]) -> Project:
        return await self._add(self._projects, data)

    async def update_project(self, project_id: str, changes: Mapping[str, Any]) -> Project | None:
        return await self._update(self._projects, project_id, changes)

    async def delete_project(self, project_id: str) -> bool:
        return await self._delete(self._projects, project_id)

    async def list_projects(self) -> list[Project]:
        return await self._list(self._projects)

    # ── Blog posts ───────────────────────────────────────────────────

    async def add_blog_post(self, data: Mapping[str, Any]) -> BlogPost:
        return await self._add(self._blog_posts, data, created_at=self._clock())

    async def update_blog_post(self, post_id: str, changes: Mapping[str, Any]) -> BlogPost | None:
        return await self._update(
            self._blog_posts, post_id, changes, protected=("id", "created_at")
        )

    async def delete_blog_post(self, post_id: str) -> bool:
        return await self._delete(self._blog_posts, post_id)

    async def list_blog_posts(self, published_only: bool = False) -> list[BlogPost]:
        """Blog posts, newest first."""
        posts = await self._list(self._blog_posts, lambda p: p.created_at)
        if published_only:
            return [post for post in posts if post.published]
        return posts

    async def get_blog_post_by_slug(self, slug: str) -> BlogPost | None:
        """Newest published post with the given slug."""
        posts = await self.list_blog_posts(published_only=True)
        return next((post for post in posts if post.slug == slug), None)

    # ── Banners ──────────────────────────────────────────────────────

    async def add_banner(self, data: Mapping[str, Any]) -> Banner:
        return await self._add(self._banners, data)

    async def update_banner(self, banner_id: str, changes: Mapping[str, Any]) -> Banner | None:
        return await self._update(self._banners, banner_id, changes)

    async def delete_banner(self, banner_id: str) -> bool:
        return await self._delete(self._banners, banner_id)

    async def list_banners(self, published_only: bool = False) -> list[Banner]:
        banners = await self._list(self._banners)
        if published_only:
            return [banner for banner in banners if banner.published]
        return banners

    # ── Reviews ──────────────────────────────────────────────────────

    async def add_review(self, data: Mapping[str, Any]) -> Review:
        """Store a submitted review. New reviews always await moderation."""
        return await self._add(
            self._reviews, data, created_at=self._clock(), status=ReviewStatus.PENDING.value
        )

    async def list_reviews(self, status: ReviewStatus | str | None = None) -> list[Review]:
        """Reviews, newest first, optionally filtered by moderation status."""
        reviews = await self._list(self._reviews, lambda r: r.created_at)
        if status is None:
            return reviews
        wanted = ReviewStatus(status)
        return [review for review in reviews if review.status == wanted]

    async def update_review_status(
        self, review_id: str, status: ReviewStatus | str
    ) -> Review | None:
        return await self._update(
            self._reviews,
            review_id,
            {"status": ReviewStatus(status).value},
            protected=("id", "created_at"),
        )

    async def delete_review(self, review_id: str) -> bool:
        return await self._delete(self._reviews, review_id)

    # ── Site settings ────────────────────────────────────────────────

    async def get_site_settings(self) -> SiteSettings:
        """Stored settings, or the built-in defaults when none were saved."""
        await self.ensure_loaded()
        return self._site_settings or DEFAULT_SITE_SETTINGS

    async def update_site_settings(
        self, data: SiteSettings | Mapping[str, Any]
    ) -> SiteSettings:
        """Replace the settings singleton as a whole (no merge)."""
        if isinstance(data, SiteSettings):
            settings = data
        else:
            settings = self._settings_adapter.validate_python(dict(data))
        value = self._settings_adapter.dump_python(settings, mode="json")
        async with self._writing():
            await self._storage.put(SITE_SETTINGS_KEY, value)
            self._site_settings = settings
        logger.info("Site settings replaced")
        return settings

    # ── Aggregates ───────────────────────────────────────────────────

    async def get_chatbot_config(self) -> ChatbotConfig:
        settings = await self.get_site_settings()
        services = await self.list_services()
        return ChatbotConfig(prompt=settings.chatbot_prompt, services=tuple(services))

    async def get_stats(self) -> DashboardStats:
        await self.ensure_loaded()
        return DashboardStats(
            messages=len(self._contacts),
            services=len(self._services),
            projects=len(self._projects),
            blog_posts=len(self._blog_posts),
        )
