"""Supabase blog gateway — implements the BlogRepository port over PostgREST.

Talks to the ``blogs`` table and two counter RPCs of a Supabase project
(``{supabase_url}/rest/v1``) using httpx. Filtering and ordering happen on the
server via PostgREST query parameters; the counters are incremented by
``increment_blog_views`` / ``increment_blog_likes``, which run
``UPDATE ... SET views = views + 1`` server-side and return the new value
(``null`` when no row matched). Their definitions ship in
``backend/supabase/blogs.sql``.
"""

import logging
from datetime import datetime
from typing import Any

import httpx

from ayurhealth.application.interfaces import (
    BlogRepository,
    CredentialProvider,
    updatable_fields,
)
from ayurhealth.domain.entities import Blog
from ayurhealth.domain.entities.blog import utcnow
from ayurhealth.domain.exceptions import (
    BlogStoreError,
    DuplicateEntityError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)

_TABLE = "blogs"
_SINGLE_OBJECT = "application/vnd.pgrst.object+json"
_UNIQUE_VIOLATION = "23505"
_NO_SINGLE_ROW = "PGRST116"


class SupabaseBlogRepository(BlogRepository):
    """Infrastructure adapter — connects to a Supabase project's REST API.

    Each request carries ``apikey`` plus a bearer credential from the
    ``CredentialProvider``. When no credential is available the anon key is
    sent as the bearer, i.e. the request runs unauthenticated under the
    project's public row-level-security policies.
    """

    def __init__(
        self,
        base_url: str,
        anon_key: str,
        credentials: CredentialProvider | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._anon_key = anon_key
        self._credentials = credentials
        self._http_client = http_client
        self._timeout = timeout

    @property
    def store_name(self) -> str:
        return "supabase"

    # ── Queries ──

    async def list_all(self) -> list[Blog]:
        rows = await self._select({"order": "created_at.desc"})
        return [self._to_entity(row) for row in rows]

    async def list_published(self) -> list[Blog]:
        rows = await self._select({"published": "eq.true", "order": "published_at.desc"})
        return [self._to_entity(row) for row in rows]

    async def list_top_viewed(self, limit: int = 10) -> list[Blog]:
        rows = await self._select(
            {"published": "eq.true", "order": "views.desc", "limit": str(limit)}
        )
        return [self._to_entity(row) for row in rows]

    async def get_by_slug(self, slug: str) -> Blog:
        row = await self._select_single({"slug": f"eq.{slug}"}, key=("slug", slug))
        return self._to_entity(row)

    async def get_by_id(self, blog_id: str) -> Blog:
        row = await self._select_single({"id": f"eq.{blog_id}"}, key=("id", blog_id))
        return self._to_entity(row)

    # ── Mutations ──

    async def create(self, blog: Blog) -> Blog:
        now = utcnow()
        payload = self._to_payload(blog)
        payload.pop("id", None)
        payload["created_at"] = payload["updated_at"] = now.isoformat()

        response = await self._request(
            "POST",
            f"/rest/v1/{_TABLE}",
            json=payload,
            headers={"Prefer": "return=representation"},
        )
        self._raise_for_status(response, slug=blog.slug)
        rows = response.json()
        if not rows:
            raise BlogStoreError(self.store_name, response.status_code, "Insert returned no row")
        return self._to_entity(rows[0])

    async def update(self, blog_id: str, fields: dict[str, Any]) -> Blog:
        payload = self._serialize(updatable_fields(fields))
        payload["updated_at"] = utcnow().isoformat()

        response = await self._request(
            "PATCH",
            f"/rest/v1/{_TABLE}",
            params={"id": f"eq.{blog_id}"},
            json=payload,
            headers={"Prefer": "return=representation"},
        )
        self._raise_for_status(response, slug=fields.get("slug"), key=("id", blog_id))
        rows = response.json()
        if not rows:
            raise EntityNotFoundError("Blog", blog_id)
        return self._to_entity(rows[0])

    async def increment_views(self, blog_id: str) -> int:
        return await self._increment("increment_blog_views", blog_id)

    async def increment_likes(self, blog_id: str) -> int:
        return await self._increment("increment_blog_likes", blog_id)

    # ── Internals ──

    async def _increment(self, function: str, blog_id: str) -> int:
        response = await self._request(
            "POST", f"/rest/v1/rpc/{function}", json={"blog_id": blog_id}
        )
        self._raise_for_status(response, key=("id", blog_id))
        if not response.content:
            raise BlogStoreError(
                self.store_name,
                response.status_code,
                f"RPC {function} returned no counter value",
            )
        value = response.json()
        if value is None:
            raise EntityNotFoundError("Blog", blog_id)
        return int(value)

    async def _select(self, params: dict[str, str]) -> list[dict[str, Any]]:
        response = await self._request(
            "GET", f"/rest/v1/{_TABLE}", params={"select": "*", **params}
        )
        self._raise_for_status(response)
        return response.json()

    async def _select_single(
        self, params: dict[str, str], key: tuple[str, str]
    ) -> dict[str, Any]:
        response = await self._request(
            "GET",
            f"/rest/v1/{_TABLE}",
            params={"select": "*", **params},
            headers={"Accept": _SINGLE_OBJECT},
        )
        # PostgREST answers 406 when the filter matches zero or several rows
        if response.status_code == 406:
            field, value = key
            raise EntityNotFoundError("Blog", value, field=field)
        self._raise_for_status(response, key=key)
        return response.json()

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _auth_headers(self) -> dict[str, str]:
        token: str | None = None
        if self._credentials is not None:
            try:
                token = await self._credentials.get_token()
            except Exception as exc:
                logger.warning(
                    "Could not obtain store credential, continuing unauthenticated: %s", exc
                )
        return {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {token or self._anon_key}",
        }

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        request_headers = {"Content-Type": "application/json", **await self._auth_headers()}
        if headers:
            request_headers.update(headers)

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            logger.debug("%s %s params=%s", method, path, params)
            return await client.request(
                method,
                f"{self._base_url}{path}",
                params=params,
                json=json,
                headers=request_headers,
            )
        except httpx.TransportError as exc:
            logger.error("Supabase request %s %s failed: %s", method, path, exc)
            raise BlogStoreError(self.store_name, None, str(exc)) from exc
        finally:
            if should_close:
                await client.aclose()

    def _raise_for_status(
        self,
        response: httpx.Response,
        slug: str | None = None,
        key: tuple[str, str] | None = None,
    ) -> None:
        """Translate a PostgREST error response into a domain exception."""
        if response.is_success:
            return

        try:
            data = response.json()
            code = data.get("code")
            message = data.get("message", response.text)
        except (ValueError, AttributeError):
            code = None
            message = response.text

        # 409 also covers foreign-key violations (23503); only 23505 is a duplicate
        if code == _UNIQUE_VIOLATION or (response.status_code == 409 and code is None):
            raise DuplicateEntityError("Blog", "slug", slug or "")
        if code == _NO_SINGLE_ROW and key is not None:
            field, value = key
            raise EntityNotFoundError("Blog", value, field=field)

        logger.warning("Supabase returned %d: %s", response.status_code, message)
        raise BlogStoreError(self.store_name, response.status_code, message)

    # ── Mapping ──

    @staticmethod
    def _to_entity(row: dict[str, Any]) -> Blog:
        """Map a PostgREST row → domain entity."""
        return Blog(
            id=str(row["id"]) if row.get("id") is not None else None,
            title=row.get("title"),
            content=row.get("content"),
            excerpt=row.get("excerpt"),
            slug=row.get("slug"),
            meta_title=row.get("meta_title"),
            meta_description=row.get("meta_description"),
            keywords=list(row.get("keywords") or []),
            featured_image=row.get("featured_image"),
            author=row.get("author"),
            category=row.get("category"),
            published=bool(row.get("published")),
            published_at=_parse_timestamp(row.get("published_at")),
            views=row.get("views") or 0,
            likes=row.get("likes") or 0,
            reading_time=row.get("reading_time") or 0,
            created_at=_parse_timestamp(row.get("created_at")),
            updated_at=_parse_timestamp(row.get("updated_at")),
        )

    @classmethod
    def _to_payload(cls, blog: Blog) -> dict[str, Any]:
        """Map domain entity → insert payload."""
        return cls._serialize({
            "id": blog.id,
            "title": blog.title,
            "content": blog.content,
            "excerpt": blog.excerpt,
            "slug": blog.slug,
            "meta_title": blog.meta_title,
            "meta_description": blog.meta_description,
            "keywords": list(blog.keywords or []),
            "featured_image": blog.featured_image,
            "author": blog.author,
            "category": blog.category,
            "published": blog.published,
            "published_at": blog.published_at,
            "views": blog.views,
            "likes": blog.likes,
            "reading_time": blog.reading_time,
        })

    @staticmethod
    def _serialize(fields: dict[str, Any]) -> dict[str, Any]:
        """Make a field dict JSON-safe (datetimes as ISO-8601)."""
        return {
            key: value.isoformat() if isinstance(value, datetime) else value
            for key, value in fields.items()
        }


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
