# tests/modules/clientes/test_clientes_api.py
import pytest
from fastapi import status
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

async def test_create_and_find_by_telefone(test_client: AsyncClient):
    payload = {"nome": "João Silva", "telefone": "11999990000", "email": "joao@pizzaria.com.br"}
    response = await test_client.post("/api/v1/clientes", json=payload)
    assert response.status_code == status.HTTP_201_CREATED
    cliente = response.json()["cliente"]
    assert cliente["pontosFidelidade"] == 0
    assert cliente["pedidosRealizados"] == 0

    found = await test_client.get("/api/v1/clientes/telefone/11999990000")
    assert found.status_code == status.HTTP_200_OK
    assert found.json()["cliente"]["id"] == cliente["id"]

async def test_unknown_telefone_is_404(test_client: AsyncClient):
    response = await test_client.get("/api/v1/clientes/telefone/000")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Cliente not found"}

async def test_add_pontos_accumulates_purchase(test_client: AsyncClient):
    cliente = (await test_client.post("/api/v1/clientes", json={"nome": "Maria", "telefone": "1188"})).json()["cliente"]
    url = f"/api/v1/clientes/{cliente['id']}/pontos"

    await test_client.put(url, json={"pontos": 10, "valorCompra": 55.5})
    response = await test_client.put(url, json={"pontos": 5, "valorCompra": 20})
    assert response.status_code == status.HTTP_200_OK
    atualizado = response.json()["cliente"]
    assert atualizado["pontosFidelidade"] == 15
    assert atualizado["totalCompras"] == pytest.approx(75.5)
    assert atualizado["pedidosRealizados"] == 2
    assert atualizado["nome"] == "Maria"

async def test_add_pontos_unknown_cliente_is_404(test_client: AsyncClient):
    response = await test_client.put("/api/v1/clientes/nao-existe/pontos", json={"pontos": 1})
    assert response.status_code == status.HTTP_404_NOT_FOUND

async def test_list_orders_best_customers_first(test_client: AsyncClient):
    await test_client.post("/api/v1/clientes", json={"nome": "Novo", "telefone": "1"})
    await test_client.post("/api/v1/clientes", json={"nome": "Fiel", "telefone": "2", "pedidosRealizados": 12})

    clientes = (await test_client.get("/api/v1/clientes")).json()["clientes"]
    assert [c["nome"] for c in clientes] == ["Fiel", "Novo"]
