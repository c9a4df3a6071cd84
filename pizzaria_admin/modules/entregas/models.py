# pizzaria_admin/modules/entregas/models.py

from typing import List, Literal, Optional

from pydantic import Field

from pizzaria_admin.models.api_common import ApiModel, RecordModel

# --- Constants ---
STATUS_ENTREGA = Literal["pendente", "coletado", "em_transito", "entregue", "falha"]
STATUS_MOTOBOY = Literal["disponivel", "em_entrega", "offline"]
STATUS_FINAIS = ("entregue", "falha")

# --- Sub-Schemas ---
class Localizacao(ApiModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

class EventoRastreio(ApiModel):
    status: str
    timestamp: str
    localizacao: Optional[Localizacao] = None
    observacao: Optional[str] = None

# --- Motoboys ---
class MotoboyAPI(RecordModel):
    nome: Optional[str] = None
    telefone: Optional[str] = None
    placa: Optional[str] = None
    status: str = "disponivel"
    entregas_realizadas: int = 0
    localizacao: Optional[Localizacao] = None

class MotoboyCreateAPI(ApiModel):
    nome: str = Field(..., min_length=1)
    telefone: str = Field(..., min_length=1)
    placa: str = Field(..., min_length=1)
    status: STATUS_MOTOBOY = "disponivel"
    localizacao: Optional[Localizacao] = None

class MotoboyResponse(ApiModel):
    motoboy: MotoboyAPI

class MotoboyListResponse(ApiModel):
    motoboys: List[MotoboyAPI]

# --- Entregas ---
class EntregaAPI(RecordModel):
    numero: Optional[str] = None
    pedido_id: Optional[str] = None
    cliente: Optional[str] = None
    endereco: Optional[str] = None
    bairro: Optional[str] = None
    telefone: Optional[str] = None
    valor: float = 0
    status: str = "pendente"
    motoboy_id: Optional[str] = None
    motoboy: Optional[str] = None
    inicio: Optional[str] = None
    fim: Optional[str] = None
    localizacao: Optional[Localizacao] = None
    historico: List[EventoRastreio] = Field(default_factory=list)

class EntregaCreateAPI(ApiModel):
    pedido_id: str
    bairro: Optional[str] = None

class AtribuirMotoboyAPI(ApiModel):
    motoboy_id: str

class EntregaStatusUpdateAPI(ApiModel):
    status: STATUS_ENTREGA
    localizacao: Optional[Localizacao] = None
    observacao: Optional[str] = None

class EntregaResponse(ApiModel):
    entrega: EntregaAPI

class EntregaListResponse(ApiModel):
    entregas: List[EntregaAPI]

class MapaResponse(ApiModel):
    localizacao: Localizacao
    mapa_url: str
