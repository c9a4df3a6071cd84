# tests/modules/relatorios/test_relatorios_api.py
from datetime import timedelta

import pytest
import pytest_asyncio
from fastapi import status
from httpx import AsyncClient

from pizzaria_admin.core.repository import to_iso, utc_now
from pizzaria_admin.modules.estoque.repository import EstoqueRepository
from pizzaria_admin.modules.pedidos.repository import PedidoRepository

pytestmark = pytest.mark.asyncio

def _dias_atras(dias: int) -> str:
    return to_iso(utc_now() - timedelta(days=dias))

@pytest_asyncio.fixture
async def pedidos_variados(kv_store):
    repo = PedidoRepository(kv_store)
    itens_pizza = [{"produtoId": "pz1", "nome": "Margherita", "quantidade": 2, "valor": 40}]
    itens_bebida = [{"produtoId": "bb1", "nome": "Refrigerante", "quantidade": 3, "valor": 8}]
    await repo.create({"status": "entregue", "valorTotal": 80, "itens": itens_pizza, "criadoEm": _dias_atras(0)}, record_id="hoje")
    await repo.create({"status": "pronto", "valorTotal": 24, "itens": itens_bebida, "criadoEm": _dias_atras(3)}, record_id="semana")
    await repo.create({"status": "entregue", "valorTotal": 100, "itens": itens_pizza, "criadoEm": _dias_atras(20)}, record_id="mes")
    await repo.create({"status": "cancelado", "valorTotal": 500, "itens": itens_bebida, "criadoEm": _dias_atras(0)}, record_id="cancelado")
    await repo.create({"status": "entregue", "valorTotal": 999, "criadoEm": _dias_atras(90)}, record_id="antigo")

async def test_vendas_excludes_cancelled_and_old_orders(test_client: AsyncClient, pedidos_variados):
    response = await test_client.get("/api/v1/relatorios/vendas", params={"periodo": "mes"})
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["periodo"] == "mes"
    assert body["totalVendas"] == 204
    assert body["quantidadePedidos"] == 3
    assert body["ticketMedio"] == pytest.approx(68)
    assert [p["id"] for p in body["pedidos"]] == ["hoje", "semana", "mes"]

async def test_vendas_windows(test_client: AsyncClient, pedidos_variados):
    semana = (await test_client.get("/api/v1/relatorios/vendas", params={"periodo": "semana"})).json()
    assert semana["quantidadePedidos"] == 2

    default = (await test_client.get("/api/v1/relatorios/vendas")).json()
    assert default["periodo"] == "mes"

async def test_vendas_with_no_orders_has_zero_ticket(test_client: AsyncClient):
    body = (await test_client.get("/api/v1/relatorios/vendas", params={"periodo": "hoje"})).json()
    assert body["totalVendas"] == 0
    assert body["ticketMedio"] == 0

async def test_unknown_periodo_is_422(test_client: AsyncClient):
    response = await test_client.get("/api/v1/relatorios/vendas", params={"periodo": "seculo"})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

async def test_produtos_populares_ranked_by_quantity(test_client: AsyncClient, pedidos_variados):
    body = (await test_client.get("/api/v1/relatorios/produtos-populares")).json()
    populares = body["produtosPopulares"]
    # cancelado fica de fora: bebida só conta o pedido "semana"
    assert [p["produtoId"] for p in populares] == ["pz1", "bb1"]
    assert populares[0]["quantidade"] == 4
    assert populares[0]["valorTotal"] == 160
    assert populares[1]["quantidade"] == 3

async def test_estoque_baixo_uses_less_or_equal(test_client: AsyncClient, kv_store):
    repo = EstoqueRepository(kv_store)
    await repo.create({"nome": "No limite", "quantidade": 5, "quantidadeMinima": 5}, record_id="limite")
    await repo.create({"nome": "Abaixo", "quantidade": 1, "quantidadeMinima": 5}, record_id="abaixo")
    await repo.create({"nome": "Folgado", "quantidade": 6, "quantidadeMinima": 5}, record_id="folgado")

    alertas = (await test_client.get("/api/v1/relatorios/estoque-baixo")).json()["alertas"]
    assert sorted(a["id"] for a in alertas) == ["abaixo", "limite"]

async def test_dashboard_summary(test_client: AsyncClient, pedidos_variados, kv_store):
    await EstoqueRepository(kv_store).create({"nome": "Queijo", "quantidade": 0, "quantidadeMinima": 2})

    body = (await test_client.get("/api/v1/relatorios/dashboard")).json()
    assert body["estoqueBaixo"] == 1
    assert len(body["pedidosRecentes"]) == 5
    assert body["pedidosHoje"] == 1
    assert body["vendasHoje"] == 80
    assert {p["id"] for p in body["pedidosRecentes"][:2]} == {"hoje", "cancelado"}
    assert [p["id"] for p in body["pedidosRecentes"][2:]] == ["semana", "mes", "antigo"]
