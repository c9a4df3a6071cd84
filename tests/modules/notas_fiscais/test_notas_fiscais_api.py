# tests/modules/notas_fiscais/test_notas_fiscais_api.py
import pytest
from fastapi import status
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

async def test_emitir_nota_from_pedido(test_client: AsyncClient):
    pedido = (await test_client.post("/api/v1/pedidos", json={
        "clienteNome": "Padaria Central",
        "itens": [{"produtoId": "pz1", "nome": "Pizza", "quantidade": 3, "valor": 50}],
    })).json()["pedido"]

    response = await test_client.post("/api/v1/notas-fiscais", json={
        "cliente": "Padaria Central", "cnpj": "12.345.678/0001-90", "pedidoId": pedido["id"],
    })
    assert response.status_code == status.HTTP_201_CREATED
    nota = response.json()["notaFiscal"]
    assert nota["numero"] == "000001"
    assert nota["serie"] == "1"
    assert nota["status"] == "emitida"
    assert nota["naturezaOperacao"] == "Venda de Mercadoria"
    assert nota["valorTotal"] == 150
    assert nota["itens"][0]["produtoId"] == "pz1"
    assert nota["dataEmissao"].endswith("Z")

    fetched = await test_client.get(f"/api/v1/notas-fiscais/{nota['id']}")
    assert fetched.json()["notaFiscal"] == nota

async def test_emitir_nota_without_pedido_sums_items(test_client: AsyncClient):
    response = await test_client.post("/api/v1/notas-fiscais", json={
        "cliente": "Maria Santos",
        "itens": [{"produtoId": "bb1", "quantidade": 2, "valor": 10}],
    })
    assert response.json()["notaFiscal"]["valorTotal"] == 20

async def test_numbers_are_sequential_and_list_newest_first(test_client: AsyncClient):
    for cliente in ("João Silva", "Maria Santos", "Pedro Costa"):
        await test_client.post("/api/v1/notas-fiscais", json={"cliente": cliente, "valorTotal": 10})

    notas = (await test_client.get("/api/v1/notas-fiscais")).json()["notasFiscais"]
    assert [n["numero"] for n in notas] == ["000003", "000002", "000001"]

    busca = (await test_client.get("/api/v1/notas-fiscais", params={"busca": "maria"})).json()["notasFiscais"]
    assert [n["cliente"] for n in busca] == ["Maria Santos"]
    por_numero = (await test_client.get("/api/v1/notas-fiscais", params={"busca": "000003"})).json()["notasFiscais"]
    assert [n["cliente"] for n in por_numero] == ["Pedro Costa"]

async def test_cancelar_nota(test_client: AsyncClient):
    nota = (await test_client.post("/api/v1/notas-fiscais", json={"cliente": "João", "valorTotal": 99})).json()["notaFiscal"]
    url = f"/api/v1/notas-fiscais/{nota['id']}/cancelar"

    response = await test_client.put(url, json={"motivo": "Erro de digitação"})
    assert response.status_code == status.HTTP_200_OK
    cancelada = response.json()["notaFiscal"]
    assert cancelada["status"] == "cancelada"
    assert cancelada["motivoCancelamento"] == "Erro de digitação"
    assert cancelada["numero"] == nota["numero"]

    again = await test_client.put(url, json={"motivo": "De novo"})
    assert again.status_code == status.HTTP_409_CONFLICT
    assert again.json() == {"error": "Nota fiscal already cancelled"}

    canceladas = (await test_client.get("/api/v1/notas-fiscais", params={"status": "cancelada"})).json()["notasFiscais"]
    assert [n["id"] for n in canceladas] == [nota["id"]]

async def test_nota_validation_and_missing_references(test_client: AsyncClient):
    sem_cliente = await test_client.post("/api/v1/notas-fiscais", json={"valorTotal": 10})
    assert sem_cliente.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    pedido_fantasma = await test_client.post("/api/v1/notas-fiscais", json={"cliente": "X", "pedidoId": "nao-existe"})
    assert pedido_fantasma.status_code == status.HTTP_404_NOT_FOUND

    assert (await test_client.get("/api/v1/notas-fiscais/nao-existe")).status_code == status.HTTP_404_NOT_FOUND
    cancelar = await test_client.put("/api/v1/notas-fiscais/nao-existe/cancelar", json={"motivo": "x"})
    assert cancelar.status_code == status.HTTP_404_NOT_FOUND
