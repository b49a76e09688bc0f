"""Client configuration.

This module centralizes the API base URL, the user agent and the transport
settings every backend has to honour, so that call sites stay
backend-agnostic.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.enums import BackendKind, ExecutionModel
from .core.exceptions import ConfigurationError

__version__ = "0.2.0"

BEATSAVER_URL = "https://beatsaver.com/"
USER_AGENT = f"beatsaver-py/{__version__}"

# Used when a throttled response carries no usable reset hint.
DEFAULT_RESET_AFTER = 60.0

ENV_PREFIX = "BEATSAVER_"


class ClientConfig(BaseModel):
    """Settings shared by every backend.

    Example:
        >>> config = ClientConfig(backend=BackendKind.REQUESTS, timeout=10)
        >>> config.execution_model
        <ExecutionModel.SYNC: 'sync'>
    """

    base_url: str = BEATSAVER_URL
    backend: BackendKind = BackendKind.AIOHTTP
    timeout: float = Field(default=30.0, gt=0)
    follow_redirects: bool = True
    max_redirects: int = Field(default=10, ge=0)
    user_agent: str = USER_AGENT
    default_reset_after: float = Field(default=DEFAULT_RESET_AFTER, ge=0)
    throttle_statuses: frozenset[int] = frozenset({429})

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        return value if value.endswith("/") else f"{value}/"

    @property
    def execution_model(self) -> ExecutionModel:
        return self.backend.execution_model

    def url(self, path: str) -> str:
        """Join an API path onto the base URL."""
        return f"{self.base_url}{path.lstrip('/')}"

    def with_backend(self, backend: BackendKind | str) -> ClientConfig:
        """Copy of this config bound to another backend."""
        try:
            kind = BackendKind(backend)
        except ValueError as e:
            raise ConfigurationError(f"Unknown backend {backend!r}") from e
        return self.model_copy(update={"backend": kind})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> ClientConfig:
        """Build a config from ``BEATSAVER_*`` environment variables.

        Recognized variables: BEATSAVER_BASE_URL, BEATSAVER_BACKEND,
        BEATSAVER_TIMEOUT, BEATSAVER_USER_AGENT, BEATSAVER_DEFAULT_RESET_AFTER.
        Keyword overrides take precedence over the environment.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        environ = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for field_name in ("base_url", "backend", "timeout", "user_agent", "default_reset_after"):
            raw = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is not None and raw != "":
                values[field_name] = raw
        values.update(overrides)
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid client configuration: {e}") from e
