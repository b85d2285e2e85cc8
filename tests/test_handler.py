import pytest

from greeter.handler import GREETING, UNSUPPORTED_PATH, request_path, respond


def test_root_greets():
    assert respond("/") == (200, "Hello world")


@pytest.mark.parametrize("path", ["/foo", "//", "", "/x/y", "/missing", "/ ", "hello"])
def test_other_paths_are_unsupported(path):
    status, body = respond(path)
    assert status == 404
    assert "Unsupported path" in body


def test_respond_is_repeatable():
    assert {respond("/") for _ in range(5)} == {(200, GREETING)}
    assert {respond("/nope") for _ in range(5)} == {(404, UNSUPPORTED_PATH)}


@pytest.mark.parametrize(
    "target, expected",
    [
        ("/", "/"),
        ("/?name=x", "/"),
        ("/#top", "/"),
        ("/foo?a=1&b=2", "/foo"),
        ("//", "//"),
        ("//foo/", "//foo/"),
        ("", ""),
        ("http://example.com/?q=1", "/"),
        ("http://example.com", "/"),
        ("https://example.com/a/b", "/a/b"),
        ("x://", "/"),
        ("foo://bar", "/"),
    ],
)
def test_request_path(target, expected):
    assert request_path(target) == expected
