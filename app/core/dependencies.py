# core/dependencies.py
import logging
from functools import lru_cache

from app.core.config import KV_BACKEND, KV_NAMESPACE, KV_LIST_PAGE_SIZE
from app.services.assignment_store import AssignmentStore
from app.services.kv import KVNamespace, MemoryKV, RedisKV

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_namespace() -> KVNamespace:
    """Build the configured key-value namespace once per process."""
    if KV_BACKEND == "memory":
        logger.warning("KV_BACKEND=memory: assignments are lost on restart")
        return MemoryKV(page_size=KV_LIST_PAGE_SIZE)
    if KV_BACKEND != "redis":
        raise RuntimeError(f"Unsupported KV_BACKEND '{KV_BACKEND}' (expected 'redis' or 'memory')")

    from app.core.redis import redis_client
    return RedisKV(redis_client, prefix=KV_NAMESPACE, page_size=KV_LIST_PAGE_SIZE)


def get_store() -> AssignmentStore:
    """
    FastAPI dependency yielding the record store.
    Use in your route functions as:
        def some_route(..., store: AssignmentStore = Depends(get_store)):
            ...
    """
    return AssignmentStore(get_namespace())
