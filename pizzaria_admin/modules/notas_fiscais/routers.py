# pizzaria_admin/modules/notas_fiscais/routers.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from loguru import logger

from pizzaria_admin.core.counters import CounterService, get_counter_service
from pizzaria_admin.modules.pedidos.repository import PedidoRepository, get_pedido_repository
from .models import (
    STATUS_NOTA,
    CancelamentoAPI,
    NotaFiscalCreateAPI,
    NotaFiscalListResponse,
    NotaFiscalResponse,
)
from .repository import NotaFiscalRepository, get_nota_fiscal_repository
from .services import NotaFiscalService, get_nota_fiscal_service

notas_fiscais_router = APIRouter()

@notas_fiscais_router.get(
    "",
    response_model=NotaFiscalListResponse,
    summary="List invoices (newest number first)",
    tags=["Notas Fiscais"],
)
async def list_notas_endpoint(
    status_filter: Optional[STATUS_NOTA] = Query(None, alias="status"),
    busca: Optional[str] = Query(None, description="Matches cliente or numero"),
    nota_service: NotaFiscalService = Depends(get_nota_fiscal_service),
    nota_repo: NotaFiscalRepository = Depends(get_nota_fiscal_repository),
):
    try:
        notas = await nota_service.list_notas(nota_repo, status_filter=status_filter, busca=busca)
        return {"notasFiscais": notas}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching notas fiscais: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch notas fiscais: {e}")

@notas_fiscais_router.get(
    "/{nota_id}",
    response_model=NotaFiscalResponse,
    summary="Get an invoice",
    tags=["Notas Fiscais"],
)
async def get_nota_endpoint(
    nota_id: str = Path(..., description="Nota fiscal ID"),
    nota_service: NotaFiscalService = Depends(get_nota_fiscal_service),
    nota_repo: NotaFiscalRepository = Depends(get_nota_fiscal_repository),
):
    try:
        return {"notaFiscal": await nota_service.get_nota(nota_id, nota_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error fetching nota fiscal {nota_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to fetch nota fiscal: {e}")

@notas_fiscais_router.post(
    "",
    response_model=NotaFiscalResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Issue an invoice",
    tags=["Notas Fiscais"],
)
async def emitir_nota_endpoint(
    nota_in: NotaFiscalCreateAPI,
    nota_service: NotaFiscalService = Depends(get_nota_fiscal_service),
    nota_repo: NotaFiscalRepository = Depends(get_nota_fiscal_repository),
    pedido_repo: PedidoRepository = Depends(get_pedido_repository),
    counter_service: CounterService = Depends(get_counter_service),
):
    try:
        nota = await nota_service.emitir_nota(nota_in, nota_repo, pedido_repo, counter_service)
        return {"notaFiscal": nota}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error issuing nota fiscal: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to issue nota fiscal: {e}")

@notas_fiscais_router.put(
    "/{nota_id}/cancelar",
    response_model=NotaFiscalResponse,
    summary="Cancel an issued invoice",
    tags=["Notas Fiscais"],
)
async def cancelar_nota_endpoint(
    cancelamento_in: CancelamentoAPI,
    nota_id: str = Path(..., description="Nota fiscal ID"),
    nota_service: NotaFiscalService = Depends(get_nota_fiscal_service),
    nota_repo: NotaFiscalRepository = Depends(get_nota_fiscal_repository),
):
    try:
        return {"notaFiscal": await nota_service.cancelar_nota(nota_id, cancelamento_in, nota_repo)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Error cancelling nota fiscal {nota_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to cancel nota fiscal: {e}")
