# pizzaria_admin/core/counters.py

from fastapi import Depends
from loguru import logger

from pizzaria_admin.core.database import KeyValueStore, get_kv_store

class CounterService:
    """Gera números sequenciais amigáveis (ex: ENT001, 000042)."""

    def __init__(self, store: KeyValueStore):
        if not isinstance(store, KeyValueStore):
            raise TypeError("CounterService requires a valid KeyValueStore instance.")
        self.store = store

    async def _get_next_sequence(self, name: str) -> int:
        """Obtém o próximo valor da sequência de forma atômica."""
        log = logger.bind(counter_name=name)
        try:
            next_val = await self.store.next_sequence(name)
            log.debug(f"Next sequence value obtained: {next_val}")
            return next_val
        except Exception as e:
            log.exception(f"Store error while getting next sequence for counter '{name}': {e}")
            raise RuntimeError(f"Store error accessing counter '{name}'") from e

    async def generate_reference(self, counter_name: str, prefix: str = "", width: int = 3) -> str:
        """Gera a referência completa: prefixo + sequência com zeros à esquerda."""
        if not counter_name or not counter_name.replace("_", "").isalnum():
            raise ValueError("Counter name must be a non-empty alphanumeric string.")

        sequence = await self._get_next_sequence(counter_name)
        ref_id = f"{prefix.upper()}{sequence:0{width}d}"
        logger.bind(counter_name=counter_name).info(f"Reference generated: {ref_id}")
        return ref_id

async def get_counter_service(store: KeyValueStore = Depends(get_kv_store)) -> CounterService:
    """FastAPI dependency to get CounterService instance."""
    return CounterService(store)
