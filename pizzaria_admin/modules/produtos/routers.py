# pizzaria_admin/modules/produtos/routers.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from loguru import logger

from .models import ProdutoCreateAPI, ProdutoListResponse, ProdutoResponse, ProdutoUpdateAPI
from .repository import ProdutoRepository, get_produto_repository
from .services import ProdutoService, get_produto_service

produtos_router = APIRouter()

@produtos_router.get(
    "",
    response_model=ProdutoListResponse,
    summary="List menu products",
    tags=["Cardápio"],
)
async def list_produtos_endpoint(
    categoria: Optional[str] = Query(None, description="Filtra por categoria (pizza, bebida...)"),
    ativo: Optional[bool] = Query(None, description="Filtra produtos ativos/inativos"),
    produto_service: ProdutoService = Depends(get_produto_service),
    produto_repo: ProdutoRepository = Depends(get_produto_repository),
):
    try:
        produtos = await produto_service.list_produtos(produto_repo, categoria=categoria, ativo=ativo)
        return {"produtos": produtos}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching produtos: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch produtos: {e}")

@produtos_router.get(
    "/{produto_id}",
    response_model=ProdutoResponse,
    summary="Get a menu product",
    tags=["Cardápio"],
)
async def get_produto_endpoint(
    produto_id: str = Path(..., description="Produto ID"),
    produto_service: ProdutoService = Depends(get_produto_service),
    produto_repo: ProdutoRepository = Depends(get_produto_repository),
):
    try:
        return {"produto": await produto_service.get_produto(produto_id, produto_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching produto {produto_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch produto: {e}")

@produtos_router.post(
    "",
    response_model=ProdutoResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a menu product",
    tags=["Cardápio"],
)
async def create_produto_endpoint(
    produto_in: ProdutoCreateAPI,
    produto_service: ProdutoService = Depends(get_produto_service),
    produto_repo: ProdutoRepository = Depends(get_produto_repository),
):
    try:
        return {"produto": await produto_service.create_produto(produto_in, produto_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error creating produto: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to create produto: {e}")

@produtos_router.put(
    "/{produto_id}",
    response_model=ProdutoResponse,
    summary="Update a menu product",
    tags=["Cardápio"],
)
async def update_produto_endpoint(
    produto_in: ProdutoUpdateAPI,
    produto_id: str = Path(..., description="Produto ID"),
    produto_service: ProdutoService = Depends(get_produto_service),
    produto_repo: ProdutoRepository = Depends(get_produto_repository),
):
    """Mescla os campos enviados no produto existente."""
    try:
        return {"produto": await produto_service.update_produto(produto_id, produto_in, produto_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error updating produto {produto_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to update produto: {e}")
