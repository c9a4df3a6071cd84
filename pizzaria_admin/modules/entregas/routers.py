# pizzaria_admin/modules/entregas/routers.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from loguru import logger

from pizzaria_admin.core.counters import CounterService, get_counter_service
from pizzaria_admin.modules.pedidos.repository import PedidoRepository, get_pedido_repository
from .models import (
    STATUS_ENTREGA,
    AtribuirMotoboyAPI,
    EntregaCreateAPI,
    EntregaListResponse,
    EntregaResponse,
    EntregaStatusUpdateAPI,
    Localizacao,
    MapaResponse,
    MotoboyCreateAPI,
    MotoboyListResponse,
    MotoboyResponse,
)
from .repository import EntregaRepository, MotoboyRepository, get_entrega_repository, get_motoboy_repository
from .services import EntregaService, get_entrega_service

entregas_router = APIRouter()

# --- Motoboys (declarados antes de /{entrega_id}) ---

@entregas_router.get(
    "/motoboys",
    response_model=MotoboyListResponse,
    summary="List delivery couriers",
    tags=["Entregas"],
)
async def list_motoboys_endpoint(
    entrega_service: EntregaService = Depends(get_entrega_service),
    motoboy_repo: MotoboyRepository = Depends(get_motoboy_repository),
):
    try:
        return {"motoboys": await entrega_service.list_motoboys(motoboy_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching motoboys: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch motoboys: {e}")

@entregas_router.post(
    "/motoboys",
    response_model=MotoboyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a delivery courier",
    tags=["Entregas"],
)
async def create_motoboy_endpoint(
    motoboy_in: MotoboyCreateAPI,
    entrega_service: EntregaService = Depends(get_entrega_service),
    motoboy_repo: MotoboyRepository = Depends(get_motoboy_repository),
):
    try:
        return {"motoboy": await entrega_service.create_motoboy(motoboy_in, motoboy_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error creating motoboy: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to create motoboy: {e}")

@entregas_router.put(
    "/motoboys/{motoboy_id}/localizacao",
    response_model=MotoboyResponse,
    summary="Update a courier's position",
    tags=["Entregas"],
)
async def update_motoboy_localizacao_endpoint(
    localizacao: Localizacao,
    motoboy_id: str = Path(..., description="Motoboy ID"),
    entrega_service: EntregaService = Depends(get_entrega_service),
    motoboy_repo: MotoboyRepository = Depends(get_motoboy_repository),
):
    try:
        return {"motoboy": await entrega_service.update_motoboy_localizacao(motoboy_id, localizacao, motoboy_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error updating motoboy location {motoboy_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to update localizacao: {e}")

# --- Entregas ---

@entregas_router.get(
    "",
    response_model=EntregaListResponse,
    summary="List deliveries",
    tags=["Entregas"],
)
async def list_entregas_endpoint(
    status_filter: Optional[STATUS_ENTREGA] = Query(None, alias="status"),
    entrega_service: EntregaService = Depends(get_entrega_service),
    entrega_repo: EntregaRepository = Depends(get_entrega_repository),
):
    try:
        return {"entregas": await entrega_service.list_entregas(entrega_repo, status_filter=status_filter)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching entregas: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch entregas: {e}")

@entregas_router.post(
    "",
    response_model=EntregaResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Open a delivery for a delivery-type order",
    tags=["Entregas"],
)
async def create_entrega_endpoint(
    entrega_in: EntregaCreateAPI,
    entrega_service: EntregaService = Depends(get_entrega_service),
    entrega_repo: EntregaRepository = Depends(get_entrega_repository),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
    counter_service: CounterService = Depends(get_counter_service),
):
    try:
        entrega = await entrega_service.create_entrega_from_pedido(entrega_in, entrega_repo, pedido_repo, counter_service)
        return {"entrega": entrega}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error creating entrega: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to create entrega: {e}")

@entregas_router.get(
    "/{entrega_id}",
    response_model=EntregaResponse,
    summary="Get a delivery with its tracking history",
    tags=["Entregas"],
)
async def get_entrega_endpoint(
    entrega_id: str = Path(..., description="Entrega ID"),
    entrega_service: EntregaService = Depends(get_entrega_service),
    entrega_repo: EntregaRepository = Depends(get_entrega_repository),
):
    try:
        return {"entrega": await entrega_service.get_entrega(entrega_id, entrega_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching entrega {entrega_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch entrega: {e}")

@entregas_router.get(
    "/{entrega_id}/mapa",
    response_model=MapaResponse,
    summary="Get last known location and map link",
    tags=["Entregas"],
)
async def get_entrega_mapa_endpoint(
    entrega_id: str = Path(..., description="Entrega ID"),
    entrega_service: EntregaService = Depends(get_entrega_service),
    entrega_repo: EntregaRepository = Depends(get_entrega_repository),
):
    try:
        return await entrega_service.get_mapa(entrega_id, entrega_repo)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching entrega map {entrega_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch mapa: {e}")

@entregas_router.put(
    "/{entrega_id}/motoboy",
    response_model=EntregaResponse,
    summary="Assign an available courier to a delivery",
    tags=["Entregas"],
)
async def atribuir_motoboy_endpoint(
    atribuir_in: AtribuirMotoboyAPI,
    entrega_id: str = Path(..., description="Entrega ID"),
    entrega_service: EntregaService = Depends(get_entrega_service),
    entrega_repo: EntregaRepository = Depends(get_entrega_repository),
    motoboy_repo: MotoboyRepository = Depends(get_motoboy_repository),
):
    try:
        return {"entrega": await entrega_service.atribuir_motoboy(entrega_id, atribuir_in, entrega_repo, motoboy_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error assigning motoboy to entrega {entrega_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to assign motoboy: {e}")

@entregas_router.put(
    "/{entrega_id}/status",
    response_model=EntregaResponse,
    summary="Record a delivery status change",
    tags=["Entregas"],
)
async def update_entrega_status_endpoint(
    status_in: EntregaStatusUpdateAPI,
    entrega_id: str = Path(..., description="Entrega ID"),
    entrega_service: EntregaService = Depends(get_entrega_service),
    entrega_repo: EntregaRepository = Depends(get_entrega_repository),
    motoboy_repo: MotoboyRepository = Depends(get_motoboy_repository),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
):
    try:
        entrega = await entrega_service.update_status(entrega_id, status_in, entrega_repo, motoboy_repo, pedido_repo)
        return {"entrega": entrega}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error updating entrega status {entrega_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to update entrega: {e}")
