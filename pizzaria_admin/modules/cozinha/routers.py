# pizzaria_admin/modules/cozinha/routers.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status
from loguru import logger

from pizzaria_admin.models.api_common import ApiModel
from pizzaria_admin.modules.pedidos.models import PedidoAPI, PedidoResponse
from pizzaria_admin.modules.pedidos.repository import PedidoRepository, get_pedido_repository
from .services import CozinhaService, get_cozinha_service

class FilaCozinhaResponse(ApiModel):
    pendentes: List[PedidoAPI]
    preparando: List[PedidoAPI]
    prontos: List[PedidoAPI]

cozinha_router = APIRouter()

@cozinha_router.get(
    "/fila",
    response_model=FilaCozinhaResponse,
    summary="Kitchen queue grouped by stage (oldest first)",
    tags=["Cozinha"],
)
async def get_fila_endpoint(
    cozinha_service: CozinhaService = Depends(get_cozinha_service),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
):
    try:
        return await cozinha_service.get_fila(pedido_repo)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching kitchen queue: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch fila: {e}")

@cozinha_router.post(
    "/pedidos/{pedido_id}/avancar",
    response_model=PedidoResponse,
    summary="Move an order to the next kitchen stage",
    tags=["Cozinha"],
)
async def avancar_pedido_endpoint(
    pedido_id: str = Path(..., description="Pedido ID"),
    cozinha_service: CozinhaService = Depends(get_cozinha_service),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
):
    try:
        return {"pedido": await cozinha_service.avancar(pedido_id, pedido_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error advancing pedido {pedido_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to advance pedido: {e}")
