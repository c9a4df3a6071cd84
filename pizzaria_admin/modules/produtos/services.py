# pizzaria_admin/modules/produtos/services.py

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from loguru import logger

from .models import ProdutoCreateAPI, ProdutoUpdateAPI
from .repository import ProdutoRepository

class ProdutoService:
    """Cardápio: produtos e suas fichas de ingredientes."""

    async def list_produtos(
        self,
        produto_repo: ProdutoRepository,
        categoria: Optional[str] = None,
        ativo: Optional[bool] = None,
    ) -> List[Dict[str, Any]]:
        produtos = await produto_repo.list_all()
        if categoria is not None:
            produtos = [p for p in produtos if p.get("categoria") == categoria]
        if ativo is not None:
            produtos = [p for p in produtos if p.get("ativo", True) == ativo]
        return sorted(produtos, key=lambda p: (p.get("categoria") or "", p.get("nome") or ""))

    async def get_produto(self, produto_id: str, produto_repo: ProdutoRepository) -> Dict[str, Any]:
        produto = await produto_repo.get_by_id(produto_id)
        if produto is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Produto not found")
        return produto

    async def create_produto(self, produto_in: ProdutoCreateAPI, produto_repo: ProdutoRepository) -> Dict[str, Any]:
        produto = await produto_repo.create(produto_in)
        logger.bind(produto_id=produto["id"]).success(f"Produto '{produto['nome']}' added to the menu.")
        return produto

    async def update_produto(
        self, produto_id: str, produto_in: ProdutoUpdateAPI, produto_repo: ProdutoRepository
    ) -> Dict[str, Any]:
        produto = await produto_repo.update(produto_id, produto_in)
        if produto is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Produto not found")
        return produto

async def get_produto_service() -> ProdutoService:
    return ProdutoService()
