# pizzaria_admin/modules/relatorios/services.py

import calendar
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from pizzaria_admin.core.repository import parse_timestamp, utc_now
from pizzaria_admin.modules.estoque.repository import EstoqueRepository
from pizzaria_admin.modules.estoque.services import is_low_stock
from pizzaria_admin.modules.pedidos.repository import PedidoRepository, sort_by_criado_em

PEDIDOS_RECENTES_LIMIT = 5

def subtract_months(value: datetime, months: int) -> datetime:
    """Volta `months` meses de calendário, limitando o dia ao fim do mês."""
    month_index = value.month - 1 - months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)

def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)

def periodo_start(periodo: str, now: Optional[datetime] = None) -> datetime:
    """Início da janela de um período do dashboard (UTC)."""
    now = now or utc_now()
    if periodo == "hoje":
        return start_of_day(now)
    if periodo == "semana":
        return now - timedelta(days=7)
    if periodo == "mes":
        return subtract_months(now, 1)
    if periodo == "trimestre":
        return subtract_months(now, 3)
    if periodo == "ano":
        return subtract_months(now, 12)
    raise ValueError(f"Unknown periodo: {periodo}")

def vendas_since(pedidos: Iterable[Dict[str, Any]], inicio: datetime) -> List[Dict[str, Any]]:
    """Pedidos não cancelados criados a partir de `inicio`."""
    selecionados = []
    for pedido in pedidos:
        criado_em = parse_timestamp(pedido.get("criadoEm"))
        if criado_em is None or criado_em < inicio:
            continue
        if pedido.get("status") == "cancelado":
            continue
        selecionados.append(pedido)
    return selecionados

def total_vendas(pedidos: Iterable[Dict[str, Any]]) -> float:
    return sum(p.get("valorTotal") or 0 for p in pedidos)

class RelatorioService:
    """Relatórios por varredura linear dos registros."""

    async def vendas(self, periodo: str, pedido_repo: PedidoRepository) -> Dict[str, Any]:
        pedidos = vendas_since(await pedido_repo.list_all(), periodo_start(periodo))
        total = total_vendas(pedidos)
        quantidade = len(pedidos)
        logger.debug(f"Sales report '{periodo}': {quantidade} pedidos, total {total:.2f}")
        return {
            "periodo": periodo,
            "totalVendas": total,
            "quantidadePedidos": quantidade,
            "ticketMedio": total / quantidade if quantidade else 0,
            "pedidos": sort_by_criado_em(pedidos),
        }

    async def produtos_populares(self, pedido_repo: PedidoRepository) -> List[Dict[str, Any]]:
        vendidos: Dict[str, Dict[str, Any]] = {}
        for pedido in await pedido_repo.list_all():
            if pedido.get("status") == "cancelado" or not pedido.get("itens"):
                continue
            for item in pedido["itens"]:
                produto_id = item.get("produtoId")
                entrada = vendidos.setdefault(produto_id, {
                    "produtoId": produto_id,
                    "nome": item.get("nome") or "Produto",
                    "quantidade": 0,
                    "valorTotal": 0,
                })
                quantidade = item.get("quantidade") or 0
                entrada["quantidade"] += quantidade
                entrada["valorTotal"] += (item.get("valor") or 0) * quantidade
        return sorted(vendidos.values(), key=lambda p: p["quantidade"], reverse=True)

    async def estoque_baixo(self, estoque_repo: EstoqueRepository) -> List[Dict[str, Any]]:
        return [item for item in await estoque_repo.list_all() if is_low_stock(item)]

    async def dashboard(self, pedido_repo: PedidoRepository, estoque_repo: EstoqueRepository) -> Dict[str, Any]:
        todos = await pedido_repo.list_all()
        hoje = vendas_since(todos, periodo_start("hoje"))
        vendas_hoje = total_vendas(hoje)
        return {
            "pedidosHoje": len(hoje),
            "vendasHoje": vendas_hoje,
            "estoqueBaixo": len(await self.estoque_baixo(estoque_repo)),
            "ticketMedio": vendas_hoje / len(hoje) if hoje else 0,
            "pedidosRecentes": sort_by_criado_em(todos)[:PEDIDOS_RECENTES_LIMIT],
        }

async def get_relatorio_service() -> RelatorioService:
    return RelatorioService()
