# pizzaria_admin/modules/pedidos/routers.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from loguru import logger

from pizzaria_admin.modules.estoque.repository import EstoqueRepository, get_estoque_repository
from pizzaria_admin.modules.produtos.repository import ProdutoRepository, get_produto_repository
from .models import (
    STATUS_PEDIDO,
    TIPO_PEDIDO,
    PedidoCreateAPI,
    PedidoListResponse,
    PedidoResponse,
    PedidoStatusUpdateAPI,
)
from .repository import PedidoRepository, get_pedido_repository
from .services import PedidoService, get_pedido_service

pedidos_router = APIRouter()

@pedidos_router.get(
    "",
    response_model=PedidoListResponse,
    summary="List orders (newest first)",
    tags=["Pedidos"],
)
async def list_pedidos_endpoint(
    status_filter: Optional[STATUS_PEDIDO] = Query(None, alias="status"),
    tipo_pedido: Optional[TIPO_PEDIDO] = Query(None, alias="tipoPedido"),
    pedido_service: PedidoService = Depends(get_pedido_service),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
):
    try:
        pedidos = await pedido_service.list_pedidos(pedido_repo, status_filter=status_filter, tipo_pedido=tipo_pedido)
        return {"pedidos": pedidos}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching pedidos: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch pedidos: {e}")

@pedidos_router.get(
    "/{pedido_id}",
    response_model=PedidoResponse,
    summary="Get an order",
    tags=["Pedidos"],
)
async def get_pedido_endpoint(
    pedido_id: str = Path(..., description="Pedido ID"),
    pedido_service: PedidoService = Depends(get_pedido_service),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
):
    try:
        return {"pedido": await pedido_service.get_pedido(pedido_id, pedido_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching pedido {pedido_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch pedido: {e}")

@pedidos_router.post(
    "",
    response_model=PedidoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new order",
    tags=["Pedidos"],
)
async def create_pedido_endpoint(
    pedido_in: PedidoCreateAPI,
    pedido_service: PedidoService = Depends(get_pedido_service),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
    produto_repo: ProdutoRepository = Depends(get_produto_repository),
    estoque_repo: EstoqueRepository = Depends(get_estoque_repository),
):
    """
    Creates an order with status `pendente` and consumes the ingredients of
    every ordered product from stock.
    """
    log = logger.bind(tipo_pedido=pedido_in.tipo_pedido)
    log.info("Endpoint: Creating new pedido...")
    try:
        pedido = await pedido_service.create_pedido(pedido_in, pedido_repo, produto_repo, estoque_repo)
        return {"pedido": pedido}
    except HTTPException as http_exc:
        log.warning(f"Failed to create pedido: {http_exc.detail} (Status: {http_exc.status_code})")
        raise
    except Exception as e:
        log.exception(f"Unexpected error creating pedido: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to create pedido: {e}")

@pedidos_router.put(
    "/{pedido_id}/status",
    response_model=PedidoResponse,
    summary="Update order status",
    tags=["Pedidos"],
)
async def update_pedido_status_endpoint(
    status_in: PedidoStatusUpdateAPI,
    pedido_id: str = Path(..., description="Pedido ID"),
    pedido_service: PedidoService = Depends(get_pedido_service),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
):
    try:
        return {"pedido": await pedido_service.update_status(pedido_id, status_in, pedido_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error updating pedido status {pedido_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to update pedido status: {e}")
