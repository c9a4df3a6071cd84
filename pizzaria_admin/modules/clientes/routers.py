# pizzaria_admin/modules/clientes/routers.py
from fastapi import APIRouter, Depends, HTTPException, Path, status
from loguru import logger

from .models import ClienteCreateAPI, ClienteListResponse, ClienteResponse, PontosUpdateAPI
from .repository import ClienteRepository, get_cliente_repository
from .services import ClienteService, get_cliente_service

clientes_router = APIRouter()

@clientes_router.get(
    "",
    response_model=ClienteListResponse,
    summary="List customers (most orders first)",
    tags=["Clientes"],
)
async def list_clientes_endpoint(
    cliente_service: ClienteService = Depends(get_cliente_service),
    cliente_repo: ClienteRepository = Depends(get_cliente_repository),
):
    try:
        return {"clientes": await cliente_service.list_clientes(cliente_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching clientes: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch clientes: {e}")

@clientes_router.post(
    "",
    response_model=ClienteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a customer",
    tags=["Clientes"],
)
async def create_cliente_endpoint(
    cliente_in: ClienteCreateAPI,
    cliente_service: ClienteService = Depends(get_cliente_service),
    cliente_repo: ClienteRepository = Depends(get_cliente_repository),
):
    try:
        return {"cliente": await cliente_service.create_cliente(cliente_in, cliente_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error creating cliente: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to create cliente: {e}")

@clientes_router.get(
    "/telefone/{telefone}",
    response_model=ClienteResponse,
    summary="Find a customer by phone number",
    tags=["Clientes"],
)
async def get_cliente_by_telefone_endpoint(
    telefone: str = Path(..., description="Telefone exato do cliente"),
    cliente_service: ClienteService = Depends(get_cliente_service),
    cliente_repo: ClienteRepository = Depends(get_cliente_repository),
):
    try:
        return {"cliente": await cliente_service.get_by_telefone(telefone, cliente_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching cliente by telefone: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch cliente: {e}")

@clientes_router.put(
    "/{cliente_id}/pontos",
    response_model=ClienteResponse,
    summary="Credit loyalty points for a purchase",
    tags=["Clientes"],
)
async def update_cliente_pontos_endpoint(
    pontos_in: PontosUpdateAPI,
    cliente_id: str = Path(..., description="Cliente ID"),
    cliente_service: ClienteService = Depends(get_cliente_service),
    cliente_repo: ClienteRepository = Depends(get_cliente_repository),
):
    try:
        return {"cliente": await cliente_service.add_pontos(cliente_id, pontos_in, cliente_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error updating cliente pontos {cliente_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to update pontos: {e}")
