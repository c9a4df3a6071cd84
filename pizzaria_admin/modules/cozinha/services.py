# pizzaria_admin/modules/cozinha/services.py

from typing import Any, Dict, List

from fastapi import HTTPException, status
from loguru import logger

from pizzaria_admin.modules.pedidos.repository import PedidoRepository, sort_by_criado_em

# Próxima etapa de cada status na linha de produção
PROXIMO_STATUS = {
    "pendente": "preparo",
    "preparo": "pronto",
    "pronto": "entregue",
}

class CozinhaService:
    """Fila da cozinha sobre os registros de pedido."""

    async def get_fila(self, pedido_repo: PedidoRepository) -> Dict[str, List[Dict[str, Any]]]:
        pedidos = await pedido_repo.list_by(status=("pendente", "preparo", "pronto"))
        pedidos = sort_by_criado_em(pedidos, newest_first=False)
        return {
            "pendentes": [p for p in pedidos if p.get("status") == "pendente"],
            "preparando": [p for p in pedidos if p.get("status") == "preparo"],
            "prontos": [p for p in pedidos if p.get("status") == "pronto"],
        }

    async def avancar(self, pedido_id: str, pedido_repo: PedidoRepository) -> Dict[str, Any]:
        pedido = await pedido_repo.get_by_id(pedido_id)
        if pedido is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pedido not found")

        atual = pedido.get("status")
        proximo = PROXIMO_STATUS.get(atual)
        if proximo is None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Pedido in status '{atual}' cannot advance",
            )

        pedido = await pedido_repo.update(pedido_id, {"status": proximo})
        logger.bind(pedido_id=pedido_id).info(f"Kitchen advanced pedido: {atual} -> {proximo}")
        return pedido

async def get_cozinha_service() -> CozinhaService:
    return CozinhaService()
