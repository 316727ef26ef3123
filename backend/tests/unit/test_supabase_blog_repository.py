"""Unit tests for the SupabaseBlogRepository (PostgREST over httpx)."""

import json
from pathlib import Path

import httpx
import pytest

from ayurhealth.application.interfaces import CredentialProvider
from ayurhealth.domain.entities import Blog
from ayurhealth.domain.exceptions import (
    BlogStoreError,
    DuplicateEntityError,
    EntityNotFoundError,
)
from ayurhealth.infrastructure.supabase import (
    BearerHeaderCredentialProvider,
    StaticCredentialProvider,
    SupabaseBlogRepository,
)


# ── Helpers ──


def _row(**overrides) -> dict:
    row = {
        "id": "7f1c0a52-1111-4a5e-9d1a-000000000001",
        "title": "Balancing Vata Dosha Through the Autumn Months",
        "content": "Warm routines.",
        "excerpt": "Seasonal routines",
        "slug": "balancing-vata",
        "meta_title": "",
        "meta_description": None,
        "keywords": ["ayurveda"],
        "featured_image": None,
        "author": "Admin",
        "published": True,
        "published_at": "2024-03-01T09:30:00.12345+00:00",
        "created_at": "2024-02-28T10:00:00Z",
        "updated_at": "2024-02-28T10:00:00Z",
        "views": 12,
        "likes": 3,
        "reading_time": 1,
        "category": "ayurveda",
    }
    row.update(overrides)
    return row


class _Recorder:
    """Mock transport handler that records requests and replays canned responses."""

    def __init__(self, *responses: httpx.Response):
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responses.pop(0)


def _repository(
    recorder: _Recorder, credentials: CredentialProvider | None = None
) -> SupabaseBlogRepository:
    return SupabaseBlogRepository(
        base_url="https://demo.supabase.co/",
        anon_key="anon-key",
        credentials=credentials,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(recorder)),
    )


class _FailingCredentials(CredentialProvider):
    async def get_token(self) -> str | None:
        raise RuntimeError("token template not configured")


# ── Reads ──


@pytest.mark.asyncio
async def test_list_published_filters_and_orders_server_side():
    recorder = _Recorder(httpx.Response(200, json=[_row()]))
    blogs = await _repository(recorder).list_published()

    request = recorder.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/rest/v1/blogs"
    assert request.url.params["published"] == "eq.true"
    assert request.url.params["order"] == "published_at.desc"
    assert request.url.params["select"] == "*"

    assert len(blogs) == 1
    blog = blogs[0]
    assert isinstance(blog, Blog)
    assert blog.views == 12
    assert blog.published_at.year == 2024
    assert blog.created_at.tzinfo is not None
    assert blog.meta_description is None


@pytest.mark.asyncio
async def test_list_all_orders_by_created_at():
    recorder = _Recorder(httpx.Response(200, json=[]))
    assert await _repository(recorder).list_all() == []
    params = recorder.requests[0].url.params
    assert params["order"] == "created_at.desc"
    assert "published" not in params


@pytest.mark.asyncio
async def test_list_top_viewed_limits():
    recorder = _Recorder(httpx.Response(200, json=[_row()]))
    await _repository(recorder).list_top_viewed(limit=5)
    params = recorder.requests[0].url.params
    assert params["order"] == "views.desc"
    assert params["limit"] == "5"


@pytest.mark.asyncio
async def test_get_by_slug_requests_single_object():
    recorder = _Recorder(httpx.Response(200, json=_row()))
    blog = await _repository(recorder).get_by_slug("balancing-vata")

    request = recorder.requests[0]
    assert request.url.params["slug"] == "eq.balancing-vata"
    assert request.headers["Accept"] == "application/vnd.pgrst.object+json"
    assert blog.slug == "balancing-vata"


@pytest.mark.asyncio
async def test_get_by_slug_zero_rows_is_not_found():
    error = {"code": "PGRST116", "message": "JSON object requested, multiple (or no) rows returned"}
    recorder = _Recorder(httpx.Response(406, json=error))
    with pytest.raises(EntityNotFoundError) as exc_info:
        await _repository(recorder).get_by_slug("missing")
    assert exc_info.value.field == "slug"


# ── Writes ──


@pytest.mark.asyncio
async def test_create_sends_equal_timestamps_and_no_id():
    recorder = _Recorder(httpx.Response(201, json=[_row(views=0, likes=0)]))
    created = await _repository(recorder).create(Blog(title="New", slug="new", keywords=["a"]))

    request = recorder.requests[0]
    body = json.loads(request.content)
    assert request.method == "POST"
    assert request.headers["Prefer"] == "return=representation"
    assert "id" not in body
    assert body["created_at"] == body["updated_at"]
    assert body["keywords"] == ["a"]
    assert created.id == "7f1c0a52-1111-4a5e-9d1a-000000000001"


@pytest.mark.asyncio
async def test_create_duplicate_slug_raises_conflict():
    error = {"code": "23505", "message": 'duplicate key value violates unique constraint "blogs_slug_key"'}
    recorder = _Recorder(httpx.Response(409, json=error))
    with pytest.raises(DuplicateEntityError):
        await _repository(recorder).create(Blog(title="Dup", slug="balancing-vata"))


@pytest.mark.asyncio
async def test_update_patches_by_id_and_touches_updated_at():
    recorder = _Recorder(httpx.Response(200, json=[_row(title="Renamed")]))
    blog = await _repository(recorder).update("abc", {"title": "Renamed"})

    request = recorder.requests[0]
    body = json.loads(request.content)
    assert request.method == "PATCH"
    assert request.url.params["id"] == "eq.abc"
    assert body["title"] == "Renamed"
    assert "updated_at" in body
    assert blog.title == "Renamed"


@pytest.mark.asyncio
async def test_update_unknown_id_is_not_found():
    recorder = _Recorder(httpx.Response(200, json=[]))
    with pytest.raises(EntityNotFoundError):
        await _repository(recorder).update("missing", {"title": "x"})


@pytest.mark.asyncio
async def test_update_rejects_counter_fields_without_calling_store():
    recorder = _Recorder()
    with pytest.raises(ValueError):
        await _repository(recorder).update("abc", {"views": 10})
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_foreign_key_conflict_is_not_a_duplicate():
    error = {"code": "23503", "message": "insert or update violates foreign key constraint"}
    recorder = _Recorder(httpx.Response(409, json=error))
    with pytest.raises(BlogStoreError) as exc_info:
        await _repository(recorder).update("abc", {"author": "ghost"})
    assert exc_info.value.status_code == 409


@pytest.mark.asyncio
async def test_not_null_violation_is_not_a_duplicate():
    error = {"code": "23502", "message": "null value in column \"published\" violates not-null constraint"}
    recorder = _Recorder(httpx.Response(400, json=error))
    with pytest.raises(BlogStoreError) as exc_info:
        await _repository(recorder).update("abc", {"published": None})
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_single_row_error_names_lookup_field():
    error = {"code": "PGRST116", "message": "JSON object requested, multiple (or no) rows returned"}
    recorder = _Recorder(httpx.Response(400, json=error))
    with pytest.raises(EntityNotFoundError) as exc_info:
        await _repository(recorder).get_by_slug("twice")
    assert exc_info.value.field == "slug"
    assert exc_info.value.entity_id == "twice"


# ── Counters ──


@pytest.mark.asyncio
async def test_increment_views_calls_rpc():
    recorder = _Recorder(httpx.Response(200, json=13))
    views = await _repository(recorder).increment_views("abc")

    request = recorder.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/rest/v1/rpc/increment_blog_views"
    assert json.loads(request.content) == {"blog_id": "abc"}
    assert views == 13


@pytest.mark.asyncio
async def test_increment_likes_unknown_id_is_not_found():
    recorder = _Recorder(httpx.Response(200, content=b"null"))
    with pytest.raises(EntityNotFoundError):
        await _repository(recorder).increment_likes("missing")
    assert recorder.requests[0].url.path == "/rest/v1/rpc/increment_blog_likes"


@pytest.mark.asyncio
async def test_increment_without_counter_value_is_an_error():
    recorder = _Recorder(httpx.Response(204))
    with pytest.raises(BlogStoreError):
        await _repository(recorder).increment_views("abc")


# ── Errors & credentials ──


@pytest.mark.asyncio
async def test_server_error_surfaces_as_store_error():
    recorder = _Recorder(httpx.Response(503, json={"message": "upstream unavailable"}))
    with pytest.raises(BlogStoreError) as exc_info:
        await _repository(recorder).list_published()
    assert exc_info.value.status_code == 503
    assert "upstream unavailable" in exc_info.value.message


@pytest.mark.asyncio
async def test_transport_error_surfaces_as_store_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    repository = SupabaseBlogRepository(
        base_url="https://demo.supabase.co",
        anon_key="anon-key",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    with pytest.raises(BlogStoreError) as exc_info:
        await repository.list_all()
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_credential_is_sent_as_bearer():
    recorder = _Recorder(httpx.Response(200, json=[]))
    await _repository(recorder, StaticCredentialProvider("user-jwt")).list_all()
    headers = recorder.requests[0].headers
    assert headers["apikey"] == "anon-key"
    assert headers["Authorization"] == "Bearer user-jwt"


@pytest.mark.asyncio
async def test_missing_credential_falls_back_to_anon_key():
    recorder = _Recorder(httpx.Response(200, json=[]))
    await _repository(recorder, StaticCredentialProvider(None)).list_all()
    assert recorder.requests[0].headers["Authorization"] == "Bearer anon-key"


@pytest.mark.asyncio
async def test_failing_credential_provider_falls_back_to_anon_key():
    recorder = _Recorder(httpx.Response(200, json=[]))
    await _repository(recorder, _FailingCredentials()).list_all()
    assert recorder.requests[0].headers["Authorization"] == "Bearer anon-key"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("header", "token"),
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("bearer   xyz ", "xyz"),
        ("Basic dXNlcjpwYXNz", None),
        ("Bearer ", None),
        (None, None),
    ],
)
async def test_bearer_header_credential_provider(header: str | None, token: str | None):
    assert await BearerHeaderCredentialProvider(header).get_token() == token


def test_schema_defines_counter_functions_returning_new_value():
    sql = (Path(__file__).resolve().parents[2] / "supabase" / "blogs.sql").read_text()
    for function, column in (("increment_blog_views", "views"), ("increment_blog_likes", "likes")):
        assert f"function public.{function}(blog_id uuid)" in sql
        assert f"returning {column};" in sql
    assert sql.count("returns integer") == 2
