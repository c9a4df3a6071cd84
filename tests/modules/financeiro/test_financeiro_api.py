# tests/modules/financeiro/test_financeiro_api.py
from datetime import timedelta

import pytest
from fastapi import status
from httpx import AsyncClient

from pizzaria_admin.core.repository import utc_now, utc_now_iso
from pizzaria_admin.modules.pedidos.repository import PedidoRepository

pytestmark = pytest.mark.asyncio

async def test_create_and_list_despesas(test_client: AsyncClient):
    antiga = {"descricao": "Aluguel", "categoria": "Aluguel", "valor": 3000, "data": "2026-01-05", "status": "pago"}
    recente = {"descricao": "Farinha", "categoria": "Fornecedores", "valor": 450.5, "data": "2026-02-10"}
    assert (await test_client.post("/api/v1/financeiro/despesas", json=antiga)).status_code == status.HTTP_201_CREATED
    response = await test_client.post("/api/v1/financeiro/despesas", json=recente)
    despesa = response.json()["despesa"]
    assert despesa["status"] == "pendente"
    assert despesa["data"] == "2026-02-10"

    despesas = (await test_client.get("/api/v1/financeiro/despesas")).json()["despesas"]
    assert [d["descricao"] for d in despesas] == ["Farinha", "Aluguel"]

async def test_despesa_requires_positive_valor(test_client: AsyncClient):
    payload = {"descricao": "Erro", "categoria": "Outros", "valor": 0}
    response = await test_client.post("/api/v1/financeiro/despesas", json=payload)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

async def test_update_despesa_status(test_client: AsyncClient):
    despesa = (await test_client.post("/api/v1/financeiro/despesas", json={
        "descricao": "Luz", "categoria": "Utilidades", "valor": 320,
    })).json()["despesa"]

    response = await test_client.put(f"/api/v1/financeiro/despesas/{despesa['id']}/status", json={"status": "pago"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["despesa"]["status"] == "pago"

    missing = await test_client.put("/api/v1/financeiro/despesas/nao-existe/status", json={"status": "pago"})
    assert missing.status_code == status.HTTP_404_NOT_FOUND
    assert missing.json() == {"error": "Despesa not found"}

async def test_resumo_combines_revenue_and_expenses(test_client: AsyncClient, kv_store):
    repo = PedidoRepository(kv_store)
    agora = utc_now_iso()
    await repo.create({"status": "entregue", "tipoPedido": "delivery", "valorTotal": 300, "criadoEm": agora})
    await repo.create({"status": "entregue", "tipoPedido": "balcao", "valorTotal": 200, "criadoEm": agora})
    await repo.create({"status": "cancelado", "tipoPedido": "balcao", "valorTotal": 1000, "criadoEm": agora})

    ontem = (utc_now().date() - timedelta(days=1)).isoformat()
    await test_client.post("/api/v1/financeiro/despesas", json={
        "descricao": "Mussarela", "categoria": "Fornecedores", "valor": 150, "data": ontem,
    })
    await test_client.post("/api/v1/financeiro/despesas", json={
        "descricao": "Salário", "categoria": "Salários", "valor": 50, "data": ontem, "status": "pago",
    })
    await test_client.post("/api/v1/financeiro/despesas", json={
        "descricao": "Velha", "categoria": "Outros", "valor": 999, "data": "2020-01-01",
    })

    response = await test_client.get("/api/v1/financeiro/resumo", params={"periodo": "mes"})
    assert response.status_code == status.HTTP_200_OK
    resumo = response.json()
    assert resumo["moeda"] == "BRL"
    assert resumo["receita"] == 500
    assert resumo["despesa"] == 200
    assert resumo["lucro"] == 300
    assert resumo["contasPagar"] == 150
    assert resumo["receitasPorTipo"][0] == {"tipo": "delivery", "valor": 300, "quantidadePedidos": 1}
    assert resumo["despesasPorCategoria"] == [
        {"categoria": "Fornecedores", "valor": 150, "percentual": 75},
        {"categoria": "Salários", "valor": 50, "percentual": 25},
    ]

async def test_resumo_includes_expense_on_window_start_day(test_client: AsyncClient):
    hoje = utc_now().date()
    await test_client.post("/api/v1/financeiro/despesas", json={
        "descricao": "Gás", "categoria": "Utilidades", "valor": 120, "data": (hoje - timedelta(days=7)).isoformat(),
    })
    await test_client.post("/api/v1/financeiro/despesas", json={
        "descricao": "Antiga", "categoria": "Outros", "valor": 80, "data": (hoje - timedelta(days=8)).isoformat(),
    })

    resumo = (await test_client.get("/api/v1/financeiro/resumo", params={"periodo": "semana"})).json()
    assert resumo["despesa"] == 120
    assert resumo["despesasPorCategoria"] == [{"categoria": "Utilidades", "valor": 120, "percentual": 100}]

async def test_despesa_defaults_to_current_utc_day(test_client: AsyncClient):
    response = await test_client.post("/api/v1/financeiro/despesas", json={
        "descricao": "Embalagens", "categoria": "Fornecedores", "valor": 60,
    })
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["despesa"]["data"] == utc_now().date().isoformat()
