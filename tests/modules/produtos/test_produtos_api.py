# tests/modules/produtos/test_produtos_api.py
import pytest
from fastapi import status
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

PIZZA = {
    "nome": "Pizza Portuguesa",
    "categoria": "pizza",
    "tamanho": "familia",
    "preco": 62.9,
    "descricao": "Presunto, ovo, cebola",
    "ingredientes": [{"ingredienteId": "presunto", "quantidade": 0.2}],
}

async def test_create_and_get_produto(test_client: AsyncClient):
    response = await test_client.post("/api/v1/produtos", json=PIZZA)
    assert response.status_code == status.HTTP_201_CREATED
    produto = response.json()["produto"]
    assert produto["ativo"] is True
    assert produto["ingredientes"] == [{"ingredienteId": "presunto", "quantidade": 0.2}]

    fetched = await test_client.get(f"/api/v1/produtos/{produto['id']}")
    assert fetched.json()["produto"] == produto

async def test_update_merges_only_named_fields(test_client: AsyncClient):
    produto = (await test_client.post("/api/v1/produtos", json=PIZZA)).json()["produto"]

    response = await test_client.put(f"/api/v1/produtos/{produto['id']}", json={"preco": 59.9, "ativo": False})
    assert response.status_code == status.HTTP_200_OK
    updated = response.json()["produto"]
    assert updated["preco"] == 59.9
    assert updated["ativo"] is False
    assert updated["nome"] == PIZZA["nome"]
    assert updated["descricao"] == PIZZA["descricao"]
    assert updated["id"] == produto["id"]

async def test_list_filters_by_categoria_and_ativo(test_client: AsyncClient):
    await test_client.post("/api/v1/produtos", json=PIZZA)
    await test_client.post("/api/v1/produtos", json={"nome": "Guaraná 2L", "categoria": "bebida", "preco": 12})
    await test_client.post("/api/v1/produtos", json={"nome": "Suco", "categoria": "bebida", "preco": 8, "ativo": False})

    todos = (await test_client.get("/api/v1/produtos")).json()["produtos"]
    assert len(todos) == 3

    bebidas = (await test_client.get("/api/v1/produtos", params={"categoria": "bebida", "ativo": "true"})).json()["produtos"]
    assert [p["nome"] for p in bebidas] == ["Guaraná 2L"]

async def test_negative_price_is_422(test_client: AsyncClient):
    response = await test_client.post("/api/v1/produtos", json={**PIZZA, "preco": -1})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

async def test_unknown_produto_is_404(test_client: AsyncClient):
    assert (await test_client.get("/api/v1/produtos/nao-existe")).status_code == status.HTTP_404_NOT_FOUND
    response = await test_client.put("/api/v1/produtos/nao-existe", json={"preco": 10})
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Produto not found"}

async def test_explicit_null_is_rejected_and_record_kept(test_client: AsyncClient):
    produto = (await test_client.post("/api/v1/produtos", json=PIZZA)).json()["produto"]

    for campo in ("ativo", "nome", "preco"):
        response = await test_client.put(f"/api/v1/produtos/{produto['id']}", json={campo: None})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["error"] == "Validation error"

    listed = await test_client.get("/api/v1/produtos")
    assert listed.status_code == status.HTTP_200_OK
    assert listed.json()["produtos"][0]["ativo"] is True
    assert listed.json()["produtos"][0]["nome"] == PIZZA["nome"]

    cleared = await test_client.put(f"/api/v1/produtos/{produto['id']}", json={"descricao": None})
    assert cleared.status_code == status.HTTP_200_OK
    assert cleared.json()["produto"]["descricao"] is None
