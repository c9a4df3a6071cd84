# pizzaria_admin/modules/financeiro/routers.py
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from loguru import logger

from pizzaria_admin.modules.pedidos.repository import PedidoRepository, get_pedido_repository
from .models import (
    PERIODO_FINANCEIRO,
    DespesaCreateAPI,
    DespesaListResponse,
    DespesaResponse,
    DespesaStatusUpdateAPI,
    ResumoFinanceiroResponse,
)
from .repository import DespesaRepository, get_despesa_repository
from .services import FinanceiroService, get_financeiro_service

financeiro_router = APIRouter()

@financeiro_router.get(
    "/resumo",
    response_model=ResumoFinanceiroResponse,
    summary="Revenue, expenses and profit for a period",
    tags=["Financeiro"],
)
async def resumo_financeiro_endpoint(
    periodo: PERIODO_FINANCEIRO = Query("mes"),
    financeiro_service: FinanceiroService = Depends(get_financeiro_service),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
    despesa_repo: DespesaRepository = Depends(get_despesa_repository),
):
    try:
        return await financeiro_service.resumo(periodo, pedido_repo, despesa_repo)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error generating financial summary: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to generate resumo: {e}")

@financeiro_router.get(
    "/despesas",
    response_model=DespesaListResponse,
    summary="List expenses (most recent first)",
    tags=["Financeiro"],
)
async def list_despesas_endpoint(
    financeiro_service: FinanceiroService = Depends(get_financeiro_service),
    despesa_repo: DespesaRepository = Depends(get_despesa_repository),
):
    try:
        return {"despesas": await financeiro_service.list_despesas(despesa_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching despesas: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch despesas: {e}")

@financeiro_router.post(
    "/despesas",
    response_model=DespesaResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an expense",
    tags=["Financeiro"],
)
async def create_despesa_endpoint(
    despesa_in: DespesaCreateAPI,
    financeiro_service: FinanceiroService = Depends(get_financeiro_service),
    despesa_repo: DespesaRepository = Depends(get_despesa_repository),
):
    try:
        return {"despesa": await financeiro_service.create_despesa(despesa_in, despesa_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error creating despesa: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to create despesa: {e}")

@financeiro_router.put(
    "/despesas/{despesa_id}/status",
    response_model=DespesaResponse,
    summary="Mark an expense as paid or pending",
    tags=["Financeiro"],
)
async def update_despesa_status_endpoint(
    status_in: DespesaStatusUpdateAPI,
    despesa_id: str = Path(..., description="Despesa ID"),
    financeiro_service: FinanceiroService = Depends(get_financeiro_service),
    despesa_repo: DespesaRepository = Depends(get_despesa_repository),
):
    try:
        return {"despesa": await financeiro_service.update_despesa_status(despesa_id, status_in, despesa_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error updating despesa status {despesa_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to update despesa: {e}")
