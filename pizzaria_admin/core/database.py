# pizzaria_admin/core/database.py

import json
from contextlib import AbstractAsyncContextManager
from typing import Any, Dict, List, Optional, cast

import redis.asyncio as redis
from fastapi import HTTPException, status
from loguru import logger

from pizzaria_admin.core.config import settings

# --- Redis ---
class RedisContext(AbstractAsyncContextManager):
    client: Optional[redis.Redis] = None

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()

    async def connect(self):
        """Connects to Redis."""
        if self.client:
            logger.info("Redis connection already established.")
            return
        url = settings.REDIS_URL
        logger.info(f"Connecting to Redis at {url}...")
        try:
            pool = redis.ConnectionPool.from_url(
                url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_keepalive=True,
                max_connections=settings.REDIS_MAX_CONNECTIONS,
            )
            self.client = redis.Redis(connection_pool=pool)
            await self.client.ping()
            logger.success("Redis connection successful.")
        except Exception as e:
            # A API sobe mesmo assim; as rotas respondem 503 até o Redis voltar
            logger.error(f"Could not connect to Redis: {e}")
            self.client = None

    async def disconnect(self):
        """Closes the Redis connection pool."""
        if self.client:
            logger.info("Closing Redis connection pool...")
            try:
                await self.client.aclose()
                await self.client.connection_pool.disconnect()
                logger.info("Redis connection pool closed.")
            except Exception as e:
                logger.error(f"Error closing Redis connection pool: {e}")
            finally:
                self.client = None

    def get_client(self) -> redis.Redis:
        """Returns the Redis client instance."""
        if self.client is None:
            logger.critical("Attempted to get Redis instance, but it's not available.")
            raise RuntimeError("Redis client is not connected or initialized.")
        return cast(redis.Redis, self.client)

redis_manager = RedisContext()

# --- Key-value store ---
class KeyValueStore:
    """Armazena registros JSON sob chaves `<namespace>:<prefixo>:<id>`."""

    def __init__(self, client: redis.Redis, namespace: str = ""):
        self.client = client
        self.namespace = namespace

    def _full_key(self, key: str) -> str:
        return f"{self.namespace}:{key}" if self.namespace else key

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        raw = await self.client.get(self._full_key(key))
        return json.loads(raw) if raw is not None else None

    async def set(self, key: str, value: Dict[str, Any]) -> None:
        await self.client.set(self._full_key(key), json.dumps(value, ensure_ascii=False))

    async def delete(self, key: str) -> bool:
        return await self.client.delete(self._full_key(key)) > 0

    async def get_by_prefix(self, prefix: str) -> List[Dict[str, Any]]:
        """Todos os registros cuja chave começa com o prefixo (sem ordem garantida)."""
        keys = [key async for key in self.client.scan_iter(match=f"{self._full_key(prefix)}*", count=500)]
        if not keys:
            return []
        values = await self.client.mget(keys)
        return [json.loads(raw) for raw in values if raw is not None]

    async def next_sequence(self, name: str) -> int:
        """Incremento atômico de um contador nomeado (começa em 1)."""
        return int(await self.client.incr(self._full_key(f"counter:{name}")))

    async def ping(self) -> bool:
        return bool(await self.client.ping())

# --- Funções de Dependência FastAPI ---

async def get_redis_client() -> redis.Redis:
    """FastAPI dependency to get a Redis client instance."""
    try:
        return redis_manager.get_client()
    except RuntimeError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=f"Key-value store not available: {e}")

async def get_kv_store() -> KeyValueStore:
    """FastAPI dependency returning the namespaced key-value store."""
    client = await get_redis_client()
    return KeyValueStore(client, namespace=settings.KV_KEY_PREFIX)
