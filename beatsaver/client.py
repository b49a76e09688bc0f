"""Client factory.

``create_client`` binds exactly one backend, and through it exactly one
execution model, for the lifetime of the returned client:

    - aiohttp, httpx -> BeatSaverAsync
    - requests       -> BeatSaverSync
"""

from __future__ import annotations

from .api.async_api import BeatSaverAsync
from .api.sync_api import BeatSaverSync
from .config import ClientConfig
from .core.enums import BackendKind, ExecutionModel
from .runtime.backends import load_backend


def create_client(
    config: ClientConfig | None = None,
    *,
    backend: BackendKind | str | None = None,
) -> BeatSaverAsync | BeatSaverSync:
    """Create a client for the configured backend.

    Args:
        config: Client settings; defaults to ``ClientConfig.from_env()``
        backend: Overrides ``config.backend``

    Returns:
        BeatSaverAsync for asynchronous backends, BeatSaverSync otherwise

    Raises:
        ConfigurationError: If the backend is unknown or not installed
    """
    config = config or ClientConfig.from_env()
    if backend is not None:
        config = config.with_backend(backend)

    instance = load_backend(config)
    if config.execution_model is ExecutionModel.SYNC:
        return BeatSaverSync(instance, config=config)  # type: ignore[arg-type]
    return BeatSaverAsync(instance, config=config)  # type: ignore[arg-type]
