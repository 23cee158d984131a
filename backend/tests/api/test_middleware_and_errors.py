"""Middleware & Error Handling — logging, not-found, static files, catch-all.

Invariants:
    - Every request produces one access log line with method, path, status
    - API routes win over static files; missing files → 404 with generic message
    - Unmatched paths without a static directory → the same 404 body
    - Non-read methods on unmatched paths → the same 404 body, static dir or not
    - Other HTTP errors keep their status and carry a real kind
    - Unhandled exceptions → 500 without internal details
"""

import logging

import pytest
from fastapi import HTTPException

from posts_api.api.error_handlers import kind_for_status
from posts_api.config import Settings
from posts_api.core.domain_types import ErrorKind
from posts_api.infrastructure.memory_store import InMemoryPostStore
from posts_api.main import create_app


class _ExplodingStore(InMemoryPostStore):
    async def list_all(self):
        raise RuntimeError("disk on fire at /var/secret")


async def test_access_log_records_request(client, caplog):
    caplog.set_level(logging.INFO, logger="posts_api.access")
    await client.get("/api/posts")
    records = [r for r in caplog.records if r.name == "posts_api.access"]
    assert len(records) == 1
    record = records[0]
    assert record.method == "GET"
    assert record.path == "/api/posts"
    assert record.status_code == 200
    assert record.duration_ms >= 0


async def test_static_index_served(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert "<h1>Posts</h1>" in res.text


async def test_static_file_served(client):
    res = await client.get("/about.html")
    assert res.status_code == 200
    assert "About" in res.text


async def test_missing_static_file_is_404(client):
    res = await client.get("/nope.html")
    assert res.status_code == 404
    assert res.json()["error"] == {
        "code": "NOT_FOUND",
        "message": "Not found",
        "kind": "not_found",
        "severity": "error",
    }


async def test_unknown_api_path_is_404(client):
    res = await client.get("/api/unknown")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Not found"


async def test_not_found_without_static_dir(tmp_path, make_client):
    settings = Settings(
        _env_file=None, static_dir=tmp_path / "missing", log_format="text",
    )
    app = create_app(settings=settings, store=InMemoryPostStore())
    async with await make_client(app) as c:
        res = await c.get("/anything")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"


async def test_unmatched_method_without_static_dir_is_404(tmp_path, make_client):
    settings = Settings(
        _env_file=None, static_dir=tmp_path / "missing", log_format="text",
    )
    app = create_app(settings=settings, store=InMemoryPostStore())
    async with await make_client(app) as c:
        res = await c.patch("/api/posts/1", json={"title": "X"})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"


NOT_FOUND_BODY = {
    "code": "NOT_FOUND",
    "message": "Not found",
    "kind": "not_found",
    "severity": "error",
}


@pytest.mark.parametrize("method, path", [
    ("post", "/nowhere"),
    ("patch", "/api/posts/1"),
    ("delete", "/api/posts"),
    ("put", "/about.html"),
])
async def test_unmatched_method_with_static_dir_is_404(client, method, path):
    res = await client.request(method.upper(), path)
    assert res.status_code == 404
    assert res.json()["error"] == NOT_FOUND_BODY


async def test_static_file_head_is_served(client):
    res = await client.head("/about.html")
    assert res.status_code == 200


async def test_other_http_errors_carry_a_kind(tmp_path, make_client):
    settings = Settings(
        _env_file=None, static_dir=tmp_path / "missing", log_format="text",
    )
    app = create_app(settings=settings, store=InMemoryPostStore())

    async def teapot():
        raise HTTPException(status_code=418, detail="I'm a teapot")

    async def unavailable():
        raise HTTPException(status_code=503, detail="Try later")

    app.add_api_route("/teapot", teapot)
    app.add_api_route("/unavailable", unavailable)
    async with await make_client(app) as c:
        teapot_res = await c.get("/teapot")
        unavailable_res = await c.get("/unavailable")
    assert teapot_res.status_code == 418
    assert teapot_res.json()["error"]["kind"] == "validation"
    assert unavailable_res.status_code == 503
    assert unavailable_res.json()["error"]["kind"] == "unexpected"


@pytest.mark.parametrize("status_code, kind", [
    (404, ErrorKind.NOT_FOUND),
    (400, ErrorKind.VALIDATION),
    (413, ErrorKind.VALIDATION),
    (500, ErrorKind.UNEXPECTED),
    (503, ErrorKind.UNEXPECTED),
])
def test_kind_for_status(status_code, kind):
    assert kind_for_status(status_code) == kind


async def test_unhandled_exception_is_generic_500(settings, make_client):
    app = create_app(settings=settings, store=_ExplodingStore())
    async with await make_client(app) as c:
        res = await c.get("/api/posts")
    assert res.status_code == 500
    body = res.json()
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert "disk on fire" not in res.text
    assert "Traceback" not in res.text


async def test_lifespan_builds_and_closes_store(settings):
    app = create_app(settings=settings)
    assert app.state.post_store is None
    async with app.router.lifespan_context(app):
        assert isinstance(app.state.post_store, InMemoryPostStore)
    assert app.state.post_store is None


async def test_lifespan_keeps_injected_store(settings):
    store = InMemoryPostStore()
    app = create_app(settings=settings, store=store)
    async with app.router.lifespan_context(app):
        assert app.state.post_store is store
    assert app.state.post_store is store
