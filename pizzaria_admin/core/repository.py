# pizzaria_admin/core/repository.py

import random
import string
import time
from abc import ABC
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel
from loguru import logger

from pizzaria_admin.core.database import KeyValueStore

_ID_ALPHABET = string.ascii_lowercase + string.digits

def generate_record_id() -> str:
    """ID no formato `<epoch-millis>-<9 caracteres base36>`."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{int(time.time() * 1000)}-{suffix}"

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def to_iso(value: datetime) -> str:
    """ISO-8601 UTC com milissegundos e sufixo Z (mesmo formato do dashboard)."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def utc_now_iso() -> str:
    return to_iso(utc_now())

def parse_timestamp(value: Any) -> Optional[datetime]:
    """Converte um timestamp armazenado para datetime UTC; None se inválido."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

class BaseRepository(ABC):
    """Classe base para repositórios de registros planos em um key-value store."""

    key_prefix: str
    entity_name: str = "Record"
    # Campos que um update nunca sobrescreve
    immutable_fields = ("id", "criadoEm")

    def __init__(self, store: KeyValueStore):
        if not getattr(self, "key_prefix", None):
            raise AttributeError("Repository subclass must define a 'key_prefix'")
        if not isinstance(store, KeyValueStore):
            raise TypeError("BaseRepository requires a valid KeyValueStore instance.")
        self.store = store
        logger.debug(f"BaseRepository initialized for prefix: '{self.key_prefix}:'")

    def _key(self, record_id: str) -> str:
        return f"{self.key_prefix}:{record_id}"

    def _handle_store_exception(self, e: Exception, operation: str, record_id: Any = None):
        """Loga e levanta exceções do store padronizadas."""
        context = f"op='{operation}' prefix='{self.key_prefix}'"
        if record_id: context += f" id='{record_id}'"
        logger.exception(f"Store error during {context}: {e}")
        raise RuntimeError(f"Store error during {operation} on {self.entity_name}: {e}") from e

    @staticmethod
    def _to_dict(data_in: BaseModel | Dict, exclude_unset: bool = False) -> Dict[str, Any]:
        if isinstance(data_in, BaseModel):
            return data_in.model_dump(mode="json", by_alias=True, exclude_unset=exclude_unset)
        return dict(data_in)

    async def get_by_id(self, record_id: str) -> Optional[Dict[str, Any]]:
        """Busca um registro pelo id."""
        if not record_id:
            return None
        try:
            return await self.store.get(self._key(record_id))
        except Exception as e:
            self._handle_store_exception(e, "get_by_id", record_id)

    async def list_all(self) -> List[Dict[str, Any]]:
        """Lista todos os registros do prefixo (varredura completa)."""
        try:
            return await self.store.get_by_prefix(f"{self.key_prefix}:")
        except Exception as e:
            self._handle_store_exception(e, "list_all")

    async def save(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Grava o registro inteiro sob a sua chave."""
        try:
            await self.store.set(self._key(record["id"]), record)
            return record
        except Exception as e:
            self._handle_store_exception(e, "save", record.get("id"))

    async def create(self, data_in: BaseModel | Dict, record_id: Optional[str] = None) -> Dict[str, Any]:
        """Cria um novo registro com id e timestamps."""
        record = self._to_dict(data_in)
        now = utc_now_iso()
        record["id"] = record_id or record.get("id") or generate_record_id()
        if not record.get("criadoEm"):
            record["criadoEm"] = now
        record["atualizadoEm"] = now
        await self.save(record)
        logger.info(f"{self.entity_name} created: ID {record['id']}")
        return record

    async def update(self, record_id: str, data_in: BaseModel | Dict) -> Optional[Dict[str, Any]]:
        """Mescla os campos informados no registro existente; None se não existir."""
        existing = await self.get_by_id(record_id)
        if existing is None:
            logger.warning(f"{self.entity_name} not found for update: ID {record_id}")
            return None

        changes = self._to_dict(data_in, exclude_unset=True)
        for field in self.immutable_fields:
            changes.pop(field, None)

        updated = {**existing, **changes, "atualizadoEm": utc_now_iso()}
        await self.save(updated)
        logger.debug(f"{self.entity_name} updated: ID {record_id}, fields={sorted(changes)}")
        return updated

