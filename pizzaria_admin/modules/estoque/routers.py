# pizzaria_admin/modules/estoque/routers.py
from fastapi import APIRouter, Depends, HTTPException, Path, status
from loguru import logger

from .models import EstoqueItemCreateAPI, EstoqueItemResponse, EstoqueListResponse, QuantidadeUpdateAPI
from .repository import EstoqueRepository, get_estoque_repository
from .services import EstoqueService, get_estoque_service

estoque_router = APIRouter()

@estoque_router.get(
    "",
    response_model=EstoqueListResponse,
    summary="List stock items",
    tags=["Estoque"],
)
async def list_estoque_endpoint(
    estoque_service: EstoqueService = Depends(get_estoque_service),
    estoque_repo: EstoqueRepository = Depends(get_estoque_repository),
):
    try:
        return {"estoque": await estoque_service.list_itens(estoque_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching estoque: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch estoque: {e}")

@estoque_router.get(
    "/{item_id}",
    response_model=EstoqueItemResponse,
    summary="Get a stock item",
    tags=["Estoque"],
)
async def get_estoque_item_endpoint(
    item_id: str = Path(..., description="Estoque item ID"),
    estoque_service: EstoqueService = Depends(get_estoque_service),
    estoque_repo: EstoqueRepository = Depends(get_estoque_repository),
):
    try:
        return {"item": await estoque_service.get_item(item_id, estoque_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching estoque item {item_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch estoque item: {e}")

@estoque_router.post(
    "",
    response_model=EstoqueItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create or replace a stock item",
    tags=["Estoque"],
)
async def upsert_estoque_item_endpoint(
    item_in: EstoqueItemCreateAPI,
    estoque_service: EstoqueService = Depends(get_estoque_service),
    estoque_repo: EstoqueRepository = Depends(get_estoque_repository),
):
    try:
        return {"item": await estoque_service.upsert_item(item_in, estoque_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error creating/updating estoque item: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to manage estoque item: {e}")

@estoque_router.put(
    "/{item_id}/quantidade",
    response_model=EstoqueItemResponse,
    summary="Set the quantity of a stock item",
    tags=["Estoque"],
)
async def update_estoque_quantidade_endpoint(
    quantidade_in: QuantidadeUpdateAPI,
    item_id: str = Path(..., description="Estoque item ID"),
    estoque_service: EstoqueService = Depends(get_estoque_service),
    estoque_repo: EstoqueRepository = Depends(get_estoque_repository),
):
    try:
        return {"item": await estoque_service.set_quantidade(item_id, quantidade_in, estoque_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error updating estoque quantity {item_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to update quantity: {e}")
