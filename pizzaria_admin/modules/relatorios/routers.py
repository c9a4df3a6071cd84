# pizzaria_admin/modules/relatorios/routers.py
from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger

from pizzaria_admin.modules.estoque.repository import EstoqueRepository, get_estoque_repository
from pizzaria_admin.modules.pedidos.repository import PedidoRepository, get_pedido_repository
from .models import (
    PERIODO_VENDAS,
    DashboardResponse,
    EstoqueBaixoResponse,
    ProdutosPopularesResponse,
    VendasReportResponse,
)
from .services import RelatorioService, get_relatorio_service

relatorios_router = APIRouter()

@relatorios_router.get(
    "/vendas",
    response_model=VendasReportResponse,
    summary="Sales report for a period",
    tags=["Relatórios"],
)
async def vendas_report_endpoint(
    periodo: PERIODO_VENDAS = Query("mes", description="hoje, semana ou mes"),
    relatorio_service: RelatorioService = Depends(get_relatorio_service),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
):
    """Total, quantity and average ticket of non-cancelled orders in the window."""
    try:
        return await relatorio_service.vendas(periodo, pedido_repo)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error generating vendas report: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to generate report: {e}")

@relatorios_router.get(
    "/produtos-populares",
    response_model=ProdutosPopularesResponse,
    summary="Best-selling products ranking",
    tags=["Relatórios"],
)
async def produtos_populares_endpoint(
    relatorio_service: RelatorioService = Depends(get_relatorio_service),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
):
    try:
        return {"produtosPopulares": await relatorio_service.produtos_populares(pedido_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error generating popular products report: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to generate report: {e}")

@relatorios_router.get(
    "/estoque-baixo",
    response_model=EstoqueBaixoResponse,
    summary="Stock items at or below their minimum",
    tags=["Relatórios"],
)
async def estoque_baixo_endpoint(
    relatorio_service: RelatorioService = Depends(get_relatorio_service),
    estoque_repo: EstoqueRepository = Depends(get_estoque_repository),
):
    try:
        return {"alertas": await relatorio_service.estoque_baixo(estoque_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error generating low stock report: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to generate report: {e}")

@relatorios_router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Today's headline numbers for the dashboard",
    tags=["Relatórios"],
)
async def dashboard_endpoint(
    relatorio_service: RelatorioService = Depends(get_relatorio_service),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
    estoque_repo: EstoqueRepository = Depends(get_estoque_repository),
):
    try:
        return await relatorio_service.dashboard(pedido_repo, estoque_repo)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error generating dashboard: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to generate dashboard: {e}")
