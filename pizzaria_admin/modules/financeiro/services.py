# pizzaria_admin/modules/financeiro/services.py

from typing import Any, Dict, List

from fastapi import HTTPException, status
from loguru import logger

from pizzaria_admin.core.config import settings
from pizzaria_admin.core.repository import parse_timestamp
from pizzaria_admin.modules.pedidos.repository import PedidoRepository
from pizzaria_admin.modules.relatorios.services import periodo_start, total_vendas, vendas_since
from .models import DespesaCreateAPI, DespesaStatusUpdateAPI
from .repository import DespesaRepository

class FinanceiroService:
    """Controle financeiro: despesas lançadas e receita vinda dos pedidos."""

    async def list_despesas(self, despesa_repo: DespesaRepository) -> List[Dict[str, Any]]:
        despesas = await despesa_repo.list_all()
        return sorted(despesas, key=lambda d: d.get("data") or "", reverse=True)

    async def create_despesa(self, despesa_in: DespesaCreateAPI, despesa_repo: DespesaRepository) -> Dict[str, Any]:
        despesa = await despesa_repo.create(despesa_in)
        logger.bind(despesa_id=despesa["id"]).info(f"Despesa registered: {despesa['categoria']} {despesa['valor']:.2f}")
        return despesa

    async def update_despesa_status(
        self, despesa_id: str, status_in: DespesaStatusUpdateAPI, despesa_repo: DespesaRepository
    ) -> Dict[str, Any]:
        despesa = await despesa_repo.update(despesa_id, status_in)
        if despesa is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Despesa not found")
        return despesa

    async def resumo(
        self, periodo: str, pedido_repo: PedidoRepository, despesa_repo: DespesaRepository
    ) -> Dict[str, Any]:
        inicio = periodo_start(periodo)

        pedidos = vendas_since(await pedido_repo.list_all(), inicio)
        receitas: Dict[str, Dict[str, Any]] = {}
        for pedido in pedidos:
            tipo = pedido.get("tipoPedido") or "outros"
            entrada = receitas.setdefault(tipo, {"tipo": tipo, "valor": 0, "quantidadePedidos": 0})
            entrada["valor"] += pedido.get("valorTotal") or 0
            entrada["quantidadePedidos"] += 1

        # Despesas têm data de competência, sem hora: compara só o dia
        despesas = []
        for despesa in await despesa_repo.list_all():
            data = parse_timestamp(despesa.get("data"))
            if data is not None and data.date() >= inicio.date():
                despesas.append(despesa)
        total_despesas = sum(d.get("valor") or 0 for d in despesas)
        por_categoria: Dict[str, float] = {}
        for despesa in despesas:
            categoria = despesa.get("categoria") or "Outros"
            por_categoria[categoria] = por_categoria.get(categoria, 0) + (despesa.get("valor") or 0)

        receita = total_vendas(pedidos)
        return {
            "periodo": periodo,
            "moeda": settings.DEFAULT_CURRENCY,
            "receita": receita,
            "despesa": total_despesas,
            "lucro": receita - total_despesas,
            "contasPagar": sum(d.get("valor") or 0 for d in despesas if d.get("status") == "pendente"),
            "receitasPorTipo": sorted(receitas.values(), key=lambda r: r["valor"], reverse=True),
            "despesasPorCategoria": [
                {
                    "categoria": categoria,
                    "valor": valor,
                    "percentual": round(valor * 100 / total_despesas) if total_despesas else 0,
                }
                for categoria, valor in sorted(por_categoria.items(), key=lambda kv: kv[1], reverse=True)
            ],
        }

async def get_financeiro_service() -> FinanceiroService:
    return FinanceiroService()
