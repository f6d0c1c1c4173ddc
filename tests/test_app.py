"""Tests for the Starlette adapter."""

from pathlib import Path

import pytest
from starlette.testclient import TestClient

from slicekit.core.app import create_app, request_line
from slicekit.storage import FileStorage, InMemoryStorage, Key


@pytest.fixture
def client() -> TestClient:
    storage = InMemoryStorage(
        {
            Key.of("a/b.bin"): b"x" * 42,
            Key.of("dir/my file.txt"): b"hello",
        }
    )
    return TestClient(create_app(storage))


def test_head_existing(client: TestClient) -> None:
    r = client.head("/a/b.bin")
    assert r.status_code == 200
    assert r.headers["content-length"] == "42"
    assert r.headers["content-disposition"] == 'attachment; filename="b.bin"'


def test_head_encoded_path(client: TestClient) -> None:
    r = client.head("/dir/my%20file.txt")
    assert r.status_code == 200
    assert r.headers["content-length"] == "5"


def test_head_missing(client: TestClient) -> None:
    r = client.head("/nope")
    assert r.status_code == 404
    assert r.headers["content-length"] == str(len("Key nope not found"))


def test_get_not_allowed(client: TestClient) -> None:
    assert client.get("/a/b.bin").status_code == 405


def test_file_storage_backend(tmp_path: Path) -> None:
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "lib.tar.gz").write_bytes(b"0" * 1000)
    client = TestClient(create_app(FileStorage(tmp_path)))
    r = client.head("/pkg/lib.tar.gz")
    assert r.status_code == 200
    assert r.headers["content-length"] == "1000"


def test_custom_transform() -> None:
    storage = InMemoryStorage({Key.of("prefix/K"): b"abc"})
    client = TestClient(create_app(storage, lambda path: Key.of("prefix", path)))
    assert client.head("/K").headers["content-length"] == "3"


def test_request_line_from_scope() -> None:
    scope = {
        "method": "HEAD",
        "path": "/a b",
        "raw_path": b"/a%20b",
        "query_string": b"x=1",
        "http_version": "1.1",
    }
    assert request_line(scope) == "HEAD /a%20b?x=1 HTTP/1.1"


def test_request_line_without_raw_path() -> None:
    scope = {"method": "GET", "path": "/a b", "query_string": b""}
    assert request_line(scope) == "GET /a%20b HTTP/1.1"


def test_head_non_ascii_name() -> None:
    client = TestClient(create_app(InMemoryStorage({Key.of("docs/日本.txt"): b"abc"})))
    r = client.head("/docs/%E6%97%A5%E6%9C%AC.txt")
    assert r.status_code == 200
    assert r.headers["content-length"] == "3"
    assert r.headers["content-disposition"] == (
        "attachment; filename=\"__.txt\"; filename*=UTF-8''%E6%97%A5%E6%9C%AC.txt"
    )


def test_head_name_with_quote() -> None:
    client = TestClient(create_app(InMemoryStorage({Key.of('a/x"y'): b"abcd"})))
    r = client.head("/a/x%22y")
    assert r.status_code == 200
    assert r.headers["content-disposition"] == "attachment; filename=\"x_y\"; filename*=UTF-8''x%22y"


def test_head_outside_storage_root(tmp_path: Path) -> None:
    (tmp_path / "secret").write_bytes(b"s")
    client = TestClient(create_app(FileStorage(tmp_path / "root")))
    r = client.head("/%2e%2e/secret")
    assert r.status_code == 404
    assert r.headers["content-length"] == str(len("Key ../secret not found"))
