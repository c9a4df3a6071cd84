# tests/conftest.py
import os
from typing import AsyncGenerator, Awaitable, Callable, Dict
from unittest.mock import patch

import pytest
import pytest_asyncio
from fakeredis import FakeAsyncRedis, FakeServer
from httpx import ASGITransport, AsyncClient

API = "/api/v1"

@pytest.fixture(scope="session", autouse=True)
def mock_env_vars():
    mock_settings = {
        "PROJECT_NAME": "Pizzaria Admin Test",
        "API_V1_STR": API,
        "LOG_LEVEL": "DEBUG",
        "REDIS_URL": "redis://localhost:6379/1",
        "KV_KEY_PREFIX": "pizzaria_test",
        "SECRET_KEY": "test-secret-key",
        "ALGORITHM": "HS256",
    }
    with patch.dict(os.environ, mock_settings):
        yield

@pytest_asyncio.fixture(scope="function")
async def redis_client() -> AsyncGenerator[FakeAsyncRedis, None]:
    client = FakeAsyncRedis(server=FakeServer(), decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()

@pytest_asyncio.fixture(scope="function")
async def kv_store(redis_client):
    from pizzaria_admin.core.database import KeyValueStore
    return KeyValueStore(redis_client, namespace="pizzaria_test")

@pytest_asyncio.fixture(scope="function")
async def test_client(kv_store) -> AsyncGenerator[AsyncClient, None]:
    from pizzaria_admin.core.database import get_kv_store
    from pizzaria_admin.main import app

    async def override_get_kv_store():
        return kv_store

    app.dependency_overrides[get_kv_store] = override_get_kv_store
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()

@pytest_asyncio.fixture(scope="function")
async def auth_headers_for(kv_store) -> Callable[..., Awaitable[Dict[str, str]]]:
    """Cria um usuário com o papel pedido e devolve o header Bearer dele."""
    from pizzaria_admin.core.security import create_access_token, get_password_hash
    from pizzaria_admin.modules.usuarios.repository import UsuarioRepository

    async def _make(role: str = "admin", ativo: bool = True) -> Dict[str, str]:
        usuario = await UsuarioRepository(kv_store).create({
            "nome": f"Teste {role}",
            "email": f"{role}.{os.urandom(3).hex()}@pizzaria.com.br",
            "role": role,
            "ativo": ativo,
            "senhaHash": get_password_hash("segredo123"),
        })
        token = create_access_token(data={"sub": usuario["id"]})
        return {"Authorization": f"Bearer {token}"}

    return _make
