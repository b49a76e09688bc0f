"""Unit tests for Request and Response."""

from __future__ import annotations

import dataclasses

import pytest

from beatsaver.core import Request, Response


class TestRequest:
    """Test Request construction."""

    def test_get_encodes_params(self):
        """Query parameters are encoded into the URL."""
        req = Request.get("https://beatsaver.com/api/search/text/0", {"q": "shut up & dance"})
        assert req.method == "GET"
        assert req.url == "https://beatsaver.com/api/search/text/0?q=shut+up+%26+dance"
        assert req.body is None

    def test_get_appends_to_existing_query(self):
        req = Request.get("https://example.com/a?x=1", {"y": "2"})
        assert req.url == "https://example.com/a?x=1&y=2"

    def test_get_without_params_keeps_url(self):
        req = Request.get("https://example.com/a")
        assert req.url == "https://example.com/a"

    def test_method_is_uppercased(self):
        req = Request(method="post", url="https://example.com", body=b"{}")
        assert req.method == "POST"

    def test_is_immutable(self):
        """Requests cannot be changed once built."""
        req = Request.get("https://example.com", headers={"Accept": "application/json"})
        with pytest.raises(dataclasses.FrozenInstanceError):
            req.url = "https://other.example.com"  # type: ignore[misc]
        with pytest.raises(TypeError):
            req.headers["Accept"] = "text/html"  # type: ignore[index]


class TestResponse:
    """Test Response accessors."""

    def test_header_lookup_is_case_insensitive(self):
        resp = Response(status=429, headers={"Retry-After": "5"})
        assert resp.header("retry-after") == "5"
        assert resp.header("RETRY-AFTER") == "5"
        assert resp.header("Missing") is None
        assert resp.header("Missing", "x") == "x"

    def test_ok(self):
        assert Response(status=200).ok
        assert Response(status=302).ok
        assert not Response(status=404).ok
        assert not Response(status=503).ok

    def test_json_and_text(self):
        resp = Response(status=200, body=b'{"docs": []}')
        assert resp.json() == {"docs": []}
        assert resp.text() == '{"docs": []}'
