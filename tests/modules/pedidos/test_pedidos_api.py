# tests/modules/pedidos/test_pedidos_api.py
import pytest
from fastapi import status
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

async def _criar_estoque(client: AsyncClient, item_id: str, quantidade: float) -> None:
    payload = {"id": item_id, "nome": item_id.title(), "unidade": "kg", "quantidade": quantidade, "quantidadeMinima": 1}
    assert (await client.post("/api/v1/estoque", json=payload)).status_code == status.HTTP_201_CREATED

async def test_create_order_decrements_ingredient_stock(test_client: AsyncClient):
    await _criar_estoque(test_client, "mussarela", 10)
    await _criar_estoque(test_client, "tomate", 5)
    produto = (await test_client.post("/api/v1/produtos", json={
        "nome": "Pizza Margherita",
        "categoria": "pizza",
        "tamanho": "grande",
        "preco": 45.0,
        "ingredientes": [
            {"ingredienteId": "mussarela", "quantidade": 0.3},
            {"ingredienteId": "tomate", "quantidade": 0.5},
        ],
    })).json()["produto"]

    response = await test_client.post("/api/v1/pedidos", json={
        "clienteNome": "João Silva",
        "tipoPedido": "balcao",
        "itens": [{"produtoId": produto["id"], "nome": produto["nome"], "quantidade": 2, "valor": 45.0}],
    })
    assert response.status_code == status.HTTP_201_CREATED
    pedido = response.json()["pedido"]
    assert pedido["status"] == "pendente"
    assert pedido["valorTotal"] == 90.0

    mussarela = (await test_client.get("/api/v1/estoque/mussarela")).json()["item"]
    tomate = (await test_client.get("/api/v1/estoque/tomate")).json()["item"]
    assert mussarela["quantidade"] == pytest.approx(9.4)
    assert tomate["quantidade"] == pytest.approx(4.0)

async def test_order_with_unknown_ingredient_or_product_still_created(test_client: AsyncClient):
    produto = (await test_client.post("/api/v1/produtos", json={
        "nome": "Calabresa", "categoria": "pizza", "preco": 40,
        "ingredientes": [{"ingredienteId": "nao-cadastrado", "quantidade": 1}],
    })).json()["produto"]
    response = await test_client.post("/api/v1/pedidos", json={
        "itens": [
            {"produtoId": produto["id"], "quantidade": 1, "valor": 40},
            {"produtoId": "produto-fantasma", "quantidade": 1, "valor": 5},
        ],
        "valorTotal": 42.5,
    })
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["pedido"]["valorTotal"] == 42.5
    assert (await test_client.get("/api/v1/estoque")).json() == {"estoque": []}

async def test_created_order_is_returned_by_get_and_list(test_client: AsyncClient):
    pedido = (await test_client.post("/api/v1/pedidos", json={
        "clienteNome": "Maria", "tipoPedido": "delivery", "endereco": "Rua A, 10",
    })).json()["pedido"]

    fetched = await test_client.get(f"/api/v1/pedidos/{pedido['id']}")
    assert fetched.status_code == status.HTTP_200_OK
    assert fetched.json()["pedido"] == pedido

    delivery = (await test_client.get("/api/v1/pedidos", params={"tipoPedido": "delivery"})).json()["pedidos"]
    assert [p["id"] for p in delivery] == [pedido["id"]]
    assert (await test_client.get("/api/v1/pedidos", params={"tipoPedido": "balcao"})).json()["pedidos"] == []

async def test_list_orders_newest_first_and_status_filter(test_client: AsyncClient, kv_store):
    from pizzaria_admin.modules.pedidos.repository import PedidoRepository
    repo = PedidoRepository(kv_store)
    await repo.create({"status": "pendente", "criadoEm": "2026-01-01T10:00:00.000Z"}, record_id="antigo")
    await repo.create({"status": "pronto", "criadoEm": "2026-01-02T10:00:00.000Z"}, record_id="novo")

    pedidos = (await test_client.get("/api/v1/pedidos")).json()["pedidos"]
    assert [p["id"] for p in pedidos] == ["novo", "antigo"]

    prontos = (await test_client.get("/api/v1/pedidos", params={"status": "pronto"})).json()["pedidos"]
    assert [p["id"] for p in prontos] == ["novo"]

async def test_update_status_only_touches_status(test_client: AsyncClient):
    pedido = (await test_client.post("/api/v1/pedidos", json={"clienteNome": "Pedro"})).json()["pedido"]

    response = await test_client.put(f"/api/v1/pedidos/{pedido['id']}/status", json={"status": "preparo"})
    assert response.status_code == status.HTTP_200_OK
    updated = response.json()["pedido"]
    assert updated["status"] == "preparo"
    assert updated["clienteNome"] == "Pedro"
    assert updated["criadoEm"] == pedido["criadoEm"]

async def test_invalid_status_is_422(test_client: AsyncClient):
    pedido = (await test_client.post("/api/v1/pedidos", json={})).json()["pedido"]
    response = await test_client.put(f"/api/v1/pedidos/{pedido['id']}/status", json={"status": "voando"})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

async def test_unknown_order_is_404(test_client: AsyncClient):
    response = await test_client.get("/api/v1/pedidos/nao-existe")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Pedido not found"}

    response = await test_client.put("/api/v1/pedidos/nao-existe/status", json={"status": "pronto"})
    assert response.status_code == status.HTTP_404_NOT_FOUND
