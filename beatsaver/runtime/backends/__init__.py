"""Interchangeable HTTP transport backends.

Backend modules are imported on demand so that only the selected backend's
library has to be installed:

    - aiohttp  -> AiohttpBackend  (async, always installed)
    - httpx    -> HttpxBackend    (async, ``pip install beatsaver[httpx]``)
    - requests -> RequestsBackend (sync, ``pip install beatsaver[requests]``)
"""

from __future__ import annotations

import importlib
import logging
from types import MappingProxyType

from ...config import ClientConfig
from ...core.enums import BackendKind
from ...core.exceptions import ConfigurationError
from .base import AsyncBackend, Backend, SyncBackend

logger = logging.getLogger(__name__)

BACKENDS = MappingProxyType(
    {
        BackendKind.AIOHTTP: ("beatsaver.runtime.backends.aiohttp_backend", "AiohttpBackend", "aiohttp"),
        BackendKind.HTTPX: ("beatsaver.runtime.backends.httpx_backend", "HttpxBackend", "httpx"),
        BackendKind.REQUESTS: ("beatsaver.runtime.backends.requests_backend", "RequestsBackend", "requests"),
    }
)


def backend_class(kind: BackendKind | str) -> type[Backend]:
    """Import and return the backend class for ``kind``.

    Raises:
        ConfigurationError: If the backend is unknown or its library is missing
    """
    try:
        kind = BackendKind(kind)
    except ValueError as e:
        choices = ", ".join(k.value for k in BackendKind)
        raise ConfigurationError(f"Unknown backend {kind!r} (choose from {choices})") from e

    module_name, class_name, extra = BACKENDS[kind]
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        raise ConfigurationError(
            f"Backend '{kind.value}' requires the '{e.name}' package; "
            f"install it with `pip install beatsaver[{extra}]`"
        ) from e
    return getattr(module, class_name)


def load_backend(config: ClientConfig | None = None) -> Backend:
    """Instantiate the backend selected by ``config.backend``."""
    config = config or ClientConfig()
    backend = backend_class(config.backend)(config)
    logger.debug("Backend loaded", extra={"backend": backend.name, "execution_model": backend.execution_model.value})
    return backend


def available_backends() -> list[BackendKind]:
    """Backends whose libraries can be imported in this environment."""
    available = []
    for kind in BackendKind:
        try:
            backend_class(kind)
        except ConfigurationError:
            continue
        available.append(kind)
    return available


__all__ = [
    "AsyncBackend",
    "BACKENDS",
    "Backend",
    "SyncBackend",
    "available_backends",
    "backend_class",
    "load_backend",
]
