# pizzaria_admin/modules/clientes/services.py

from typing import Any, Dict, List

from fastapi import HTTPException, status
from loguru import logger

from pizzaria_admin.core.repository import utc_now_iso
from .models import ClienteCreateAPI, PontosUpdateAPI
from .repository import ClienteRepository

class ClienteService:
    """Cadastro de clientes e programa de fidelidade."""

    async def list_clientes(self, cliente_repo: ClienteRepository) -> List[Dict[str, Any]]:
        clientes = await cliente_repo.list_all()
        # Melhores clientes primeiro
        return sorted(clientes, key=lambda c: c.get("pedidosRealizados") or 0, reverse=True)

    async def create_cliente(self, cliente_in: ClienteCreateAPI, cliente_repo: ClienteRepository) -> Dict[str, Any]:
        cliente = await cliente_repo.create(cliente_in)
        logger.bind(cliente_id=cliente["id"]).success(f"Cliente '{cliente['nome']}' registered.")
        return cliente

    async def get_by_telefone(self, telefone: str, cliente_repo: ClienteRepository) -> Dict[str, Any]:
        cliente = await cliente_repo.get_by_telefone(telefone)
        if cliente is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente not found")
        return cliente

    async def add_pontos(
        self, cliente_id: str, pontos_in: PontosUpdateAPI, cliente_repo: ClienteRepository
    ) -> Dict[str, Any]:
        """Soma pontos e valor da compra e conta mais um pedido."""
        cliente = await cliente_repo.get_by_id(cliente_id)
        if cliente is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cliente not found")

        atualizado = {
            **cliente,
            "pontosFidelidade": (cliente.get("pontosFidelidade") or 0) + pontos_in.pontos,
            "totalCompras": (cliente.get("totalCompras") or 0) + pontos_in.valor_compra,
            "pedidosRealizados": (cliente.get("pedidosRealizados") or 0) + 1,
            "atualizadoEm": utc_now_iso(),
        }
        await cliente_repo.save(atualizado)
        logger.bind(cliente_id=cliente_id).info(
            f"Loyalty updated: +{pontos_in.pontos} pts, total points {atualizado['pontosFidelidade']}"
        )
        return atualizado

async def get_cliente_service() -> ClienteService:
    return ClienteService()
