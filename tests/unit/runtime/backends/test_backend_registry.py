"""Unit tests for backend lookup and loading."""

import sys

import pytest

from beatsaver.config import ClientConfig
from beatsaver.core import BackendKind, ConfigurationError
from beatsaver.runtime.backends import available_backends, backend_class, load_backend
from beatsaver.runtime.backends.aiohttp_backend import AiohttpBackend
from beatsaver.runtime.backends.httpx_backend import HttpxBackend
from beatsaver.runtime.backends.requests_backend import RequestsBackend


@pytest.mark.parametrize(
    "kind, expected",
    [
        (BackendKind.AIOHTTP, AiohttpBackend),
        (BackendKind.HTTPX, HttpxBackend),
        ("requests", RequestsBackend),
    ],
)
def test_backend_class(kind, expected):
    assert backend_class(kind) is expected


def test_unknown_backend():
    with pytest.raises(ConfigurationError, match="Unknown backend"):
        backend_class("urllib")


def test_missing_library_names_the_extra(monkeypatch):
    """A backend whose library is not installed is reported with an install hint."""
    monkeypatch.setitem(sys.modules, "httpx", None)
    monkeypatch.delitem(sys.modules, "beatsaver.runtime.backends.httpx_backend", raising=False)

    with pytest.raises(ConfigurationError, match=r"beatsaver\[httpx\]"):
        backend_class(BackendKind.HTTPX)


def test_load_backend_uses_config():
    config = ClientConfig(backend=BackendKind.REQUESTS, timeout=3)
    backend = load_backend(config)
    assert isinstance(backend, RequestsBackend)
    assert backend.config is config


def test_load_backend_default_is_aiohttp():
    assert isinstance(load_backend(), AiohttpBackend)


def test_available_backends():
    assert set(available_backends()) == set(BackendKind)
