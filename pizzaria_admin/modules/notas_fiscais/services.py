# pizzaria_admin/modules/notas_fiscais/services.py

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from loguru import logger

from pizzaria_admin.core.counters import CounterService
from pizzaria_admin.core.repository import utc_now_iso
from pizzaria_admin.modules.pedidos.repository import PedidoRepository
from .models import SERIE_PADRAO, CancelamentoAPI, NotaFiscalCreateAPI
from .repository import NotaFiscalRepository

class NotaFiscalService:
    """Emissão e cancelamento de notas fiscais (registro local, sem envio à SEFAZ)."""

    async def list_notas(
        self,
        nota_repo: NotaFiscalRepository,
        status_filter: Optional[str] = None,
        busca: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        notas = await nota_repo.list_all()
        if status_filter:
            notas = [n for n in notas if n.get("status") == status_filter]
        if busca:
            termo = busca.lower()
            notas = [
                n for n in notas
                if termo in (n.get("cliente") or "").lower() or termo in (n.get("numero") or "")
            ]
        return sorted(notas, key=lambda n: n.get("numero") or "", reverse=True)

    async def get_nota(self, nota_id: str, nota_repo: NotaFiscalRepository) -> Dict[str, Any]:
        nota = await nota_repo.get_by_id(nota_id)
        if nota is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Nota fiscal not found")
        return nota

    async def emitir_nota(
        self,
        nota_in: NotaFiscalCreateAPI,
        nota_repo: NotaFiscalRepository,
        pedido_repo: PedidoRepository,
        counter_service: CounterService,
    ) -> Dict[str, Any]:
        data = nota_in.model_dump(mode="json", by_alias=True)
        log = logger.bind(pedido_id=nota_in.pedido_id, service="NotaFiscalService")

        if nota_in.pedido_id:
            pedido = await pedido_repo.get_by_id(nota_in.pedido_id)
            if pedido is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pedido not found")
            if data["valorTotal"] is None:
                data["valorTotal"] = pedido.get("valorTotal") or 0
            if data["itens"] is None:
                data["itens"] = pedido.get("itens") or []

        if data["itens"] is None:
            data["itens"] = []
        if data["valorTotal"] is None:
            data["valorTotal"] = sum((i.get("valor") or 0) * (i.get("quantidade") or 0) for i in data["itens"])

        data["numero"] = await counter_service.generate_reference("nota_fiscal", width=6)
        data["serie"] = SERIE_PADRAO
        data["status"] = "emitida"
        data["dataEmissao"] = utc_now_iso()

        nota = await nota_repo.create(data)
        log.success(f"Nota fiscal {nota['numero']} emitida. Valor: {nota['valorTotal']:.2f}")
        return nota

    async def cancelar_nota(
        self, nota_id: str, cancelamento_in: CancelamentoAPI, nota_repo: NotaFiscalRepository
    ) -> Dict[str, Any]:
        nota = await self.get_nota(nota_id, nota_repo)
        if nota.get("status") == "cancelada":
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Nota fiscal already cancelled")
        nota = await nota_repo.update(nota_id, {"status": "cancelada", "motivoCancelamento": cancelamento_in.motivo})
        logger.bind(nota_id=nota_id).warning(f"Nota fiscal cancelled: {cancelamento_in.motivo}")
        return nota

async def get_nota_fiscal_service() -> NotaFiscalService:
    return NotaFiscalService()
