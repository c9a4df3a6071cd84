# pizzaria_admin/modules/entregas/services.py

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from loguru import logger

from pizzaria_admin.core.counters import CounterService
from pizzaria_admin.core.repository import utc_now_iso
from pizzaria_admin.modules.pedidos.repository import PedidoRepository, sort_by_criado_em
from .models import (
    STATUS_FINAIS,
    AtribuirMotoboyAPI,
    EntregaCreateAPI,
    EntregaStatusUpdateAPI,
    Localizacao,
    MotoboyCreateAPI,
)
from .repository import EntregaRepository, MotoboyRepository

# --- Utility Function ---
def generate_map_link(lat: float, lng: float) -> str:
    return f"https://maps.google.com/?q={lat},{lng}"

def _evento(status_evento: str, observacao: Optional[str] = None, localizacao: Optional[Localizacao] = None) -> Dict[str, Any]:
    evento: Dict[str, Any] = {"status": status_evento, "timestamp": utc_now_iso()}
    if localizacao is not None:
        evento["localizacao"] = localizacao.model_dump()
    if observacao:
        evento["observacao"] = observacao
    return evento

class EntregaService:
    """Lógica de negócio para Entregas e Motoboys."""

    # --- Motoboys ---

    async def list_motoboys(self, motoboy_repo: MotoboyRepository) -> List[Dict[str, Any]]:
        motoboys = await motoboy_repo.list_all()
        return sorted(motoboys, key=lambda m: (m.get("nome") or "").lower())

    async def create_motoboy(self, motoboy_in: MotoboyCreateAPI, motoboy_repo: MotoboyRepository) -> Dict[str, Any]:
        data = motoboy_in.model_dump(mode="json", by_alias=True)
        data["entregasRealizadas"] = 0
        return await motoboy_repo.create(data)

    async def update_motoboy_localizacao(
        self, motoboy_id: str, localizacao: Localizacao, motoboy_repo: MotoboyRepository
    ) -> Dict[str, Any]:
        motoboy = await motoboy_repo.update(motoboy_id, {"localizacao": localizacao.model_dump()})
        if motoboy is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Motoboy not found")
        return motoboy

    # --- Entregas ---

    async def list_entregas(self, entrega_repo: EntregaRepository, status_filter: Optional[str] = None) -> List[Dict[str, Any]]:
        entregas = await entrega_repo.list_all()
        if status_filter:
            entregas = [e for e in entregas if e.get("status") == status_filter]
        return sort_by_criado_em(entregas, newest_first=True)

    async def get_entrega(self, entrega_id: str, entrega_repo: EntregaRepository) -> Dict[str, Any]:
        entrega = await entrega_repo.get_by_id(entrega_id)
        if entrega is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Entrega not found")
        return entrega

    async def create_entrega_from_pedido(
        self,
        entrega_in: EntregaCreateAPI,
        entrega_repo: EntregaRepository,
        pedido_repo: PedidoRepository,
        counter_service: CounterService,
    ) -> Dict[str, Any]:
        """Abre a entrega de um pedido delivery copiando cliente, endereço e valor."""
        log = logger.bind(pedido_id=entrega_in.pedido_id, service="EntregaService")
        log.info("Creating entrega from pedido...")

        pedido = await pedido_repo.get_by_id(entrega_in.pedido_id)
        if pedido is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pedido not found")
        if pedido.get("tipoPedido") != "delivery":
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Pedido is not a delivery order")
        if await entrega_repo.get_by_pedido_id(pedido["id"]):
            log.warning("Entrega already exists for this pedido.")
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Entrega already exists for this pedido")

        numero = await counter_service.generate_reference("entrega", prefix="ENT", width=3)
        entrega = await entrega_repo.create({
            "numero": numero,
            "pedidoId": pedido["id"],
            "cliente": pedido.get("clienteNome"),
            "endereco": pedido.get("endereco"),
            "bairro": entrega_in.bairro,
            "telefone": pedido.get("telefone"),
            "valor": pedido.get("valorTotal") or 0,
            "status": "pendente",
            "historico": [_evento("pendente", "Entrega criada")],
        })
        log.success(f"Entrega {numero} created.")
        return entrega

    async def atribuir_motoboy(
        self,
        entrega_id: str,
        atribuir_in: AtribuirMotoboyAPI,
        entrega_repo: EntregaRepository,
        motoboy_repo: MotoboyRepository,
    ) -> Dict[str, Any]:
        entrega = await self.get_entrega(entrega_id, entrega_repo)
        if entrega.get("status") in STATUS_FINAIS:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Entrega already {entrega['status']}")
        if entrega.get("motoboyId"):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Entrega already has a motoboy")

        motoboy = await motoboy_repo.get_by_id(atribuir_in.motoboy_id)
        if motoboy is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Motoboy not found")
        if motoboy.get("status") != "disponivel":
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Motoboy is {motoboy.get('status')}")

        entrega = await entrega_repo.add_tracking_event(
            entrega,
            _evento("coletado", f"Coletado por {motoboy.get('nome')}"),
            status="coletado",
            motoboyId=motoboy["id"],
            motoboy=motoboy.get("nome"),
            inicio=utc_now_iso(),
        )
        await motoboy_repo.update(motoboy["id"], {"status": "em_entrega"})
        logger.bind(entrega_id=entrega_id, motoboy_id=motoboy["id"]).info("Motoboy assigned.")
        return entrega

    async def update_status(
        self,
        entrega_id: str,
        status_in: EntregaStatusUpdateAPI,
        entrega_repo: EntregaRepository,
        motoboy_repo: MotoboyRepository,
        pedido_repo: PedidoRepository,
    ) -> Dict[str, Any]:
        entrega = await self.get_entrega(entrega_id, entrega_repo)
        if entrega.get("status") in STATUS_FINAIS:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Entrega already {entrega['status']}")

        changes: Dict[str, Any] = {"status": status_in.status}
        if status_in.status in STATUS_FINAIS:
            changes["fim"] = utc_now_iso()

        entrega = await entrega_repo.add_tracking_event(
            entrega,
            _evento(status_in.status, status_in.observacao, status_in.localizacao),
            **changes,
        )

        if status_in.status in STATUS_FINAIS:
            await self._liberar_motoboy(entrega.get("motoboyId"), motoboy_repo, entregue=status_in.status == "entregue")
        if status_in.status == "entregue" and entrega.get("pedidoId"):
            if await pedido_repo.update(entrega["pedidoId"], {"status": "entregue"}) is None:
                logger.warning(f"Pedido {entrega['pedidoId']} of entrega {entrega_id} no longer exists.")
        return entrega

    async def _liberar_motoboy(self, motoboy_id: Optional[str], motoboy_repo: MotoboyRepository, entregue: bool) -> None:
        if not motoboy_id:
            return
        motoboy = await motoboy_repo.get_by_id(motoboy_id)
        if motoboy is None:
            logger.warning(f"Motoboy {motoboy_id} not found while closing entrega.")
            return
        changes: Dict[str, Any] = {"status": "disponivel"}
        if entregue:
            changes["entregasRealizadas"] = (motoboy.get("entregasRealizadas") or 0) + 1
        await motoboy_repo.update(motoboy_id, changes)

    async def get_mapa(self, entrega_id: str, entrega_repo: EntregaRepository) -> Dict[str, Any]:
        """Última localização conhecida e link do mapa."""
        entrega = await self.get_entrega(entrega_id, entrega_repo)
        localizacao = entrega.get("localizacao")
        if not localizacao:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Entrega has no known location")
        return {
            "localizacao": localizacao,
            "mapaUrl": generate_map_link(localizacao["lat"], localizacao["lng"]),
        }

async def get_entrega_service() -> EntregaService:
    return EntregaService()
