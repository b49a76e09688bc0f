"""Request dispatch, rate-limit interpretation and pagination."""

from .backends import AsyncBackend, Backend, SyncBackend, available_backends, load_backend
from .dispatch import AsyncDispatcher, SyncDispatcher, decode
from .pagination import AsyncPageIterator, PageCursor, PageIterator
from .rate_limit import RateLimitInterpreter

__all__ = [
    "AsyncBackend",
    "AsyncDispatcher",
    "AsyncPageIterator",
    "Backend",
    "PageCursor",
    "PageIterator",
    "RateLimitInterpreter",
    "SyncBackend",
    "SyncDispatcher",
    "available_backends",
    "decode",
    "load_backend",
]
