# tests/modules/usuarios/test_usuarios_api.py
import pytest
from fastapi import status
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

def _novo(nome: str, role: str = "operador") -> dict:
    return {"nome": nome, "email": f"{nome.lower()}@pizzaria.com.br", "role": role, "senha": "segredo123"}

async def test_create_usuario_hides_password_hash(test_client: AsyncClient, kv_store):
    response = await test_client.post("/api/v1/usuarios", json=_novo("Admin", "admin"))
    assert response.status_code == status.HTTP_201_CREATED
    usuario = response.json()["usuario"]
    assert usuario["ativo"] is True
    assert "senhaHash" not in usuario
    assert "senha" not in usuario

    stored = await kv_store.get(f"usuario:{usuario['id']}")
    assert stored["senhaHash"] and stored["senhaHash"] != "segredo123"

async def test_duplicate_email_is_409(test_client: AsyncClient):
    await test_client.post("/api/v1/usuarios", json=_novo("Ana"))
    response = await test_client.post("/api/v1/usuarios", json={**_novo("Ana"), "email": "ANA@pizzaria.com.br"})
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json() == {"error": "Email already registered"}

async def test_list_counts_per_role(test_client: AsyncClient):
    await test_client.post("/api/v1/usuarios", json=_novo("Bruno", "gerente"))
    await test_client.post("/api/v1/usuarios", json=_novo("Carla", "cozinheiro"))
    await test_client.post("/api/v1/usuarios", json=_novo("Davi", "cozinheiro"))

    body = (await test_client.get("/api/v1/usuarios")).json()
    assert [u["nome"] for u in body["usuarios"]] == ["Bruno", "Carla", "Davi"]
    assert body["contagemPorRole"] == {"admin": 0, "gerente": 1, "cozinheiro": 2, "operador": 0}
    assert all("senhaHash" not in u for u in body["usuarios"])

async def test_update_role_and_toggle_ativo(test_client: AsyncClient):
    usuario = (await test_client.post("/api/v1/usuarios", json=_novo("Eva"))).json()["usuario"]

    promovido = await test_client.put(f"/api/v1/usuarios/{usuario['id']}/role", json={"role": "gerente"})
    assert promovido.json()["usuario"]["role"] == "gerente"
    invalido = await test_client.put(f"/api/v1/usuarios/{usuario['id']}/role", json={"role": "dono"})
    assert invalido.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    desativado = (await test_client.put(f"/api/v1/usuarios/{usuario['id']}/ativo")).json()["usuario"]
    assert desativado["ativo"] is False
    reativado = (await test_client.put(f"/api/v1/usuarios/{usuario['id']}/ativo")).json()["usuario"]
    assert reativado["ativo"] is True

async def test_unknown_usuario_is_404(test_client: AsyncClient):
    response = await test_client.put("/api/v1/usuarios/nao-existe/ativo")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Usuario not found"}

async def test_permission_matrix_endpoint(test_client: AsyncClient):
    body = (await test_client.get("/api/v1/usuarios/permissoes")).json()
    assert "permissoes" in body["areas"]
    assert "permissoes" not in body["permissoes"]["gerente"]
    assert set(body["permissoes"]["cozinheiro"]) == {"cozinha", "pedidos", "estoque"}
    assert set(body["permissoes"]["operador"]) == {"pedidos", "clientes", "entregas", "cardapio"}

async def test_short_password_is_422(test_client: AsyncClient):
    response = await test_client.post("/api/v1/usuarios", json={**_novo("Fabio"), "senha": "123"})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
