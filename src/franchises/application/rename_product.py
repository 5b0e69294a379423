"""Application service: Rename Product use case."""

from __future__ import annotations

import logging

from franchises.domain.exceptions import NotFoundError
from franchises.domain.model.franchise import Product
from franchises.domain.model.value_objects import Name
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class RenameProductHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    async def handle(
        self,
        franchise_id: str,
        branch_id: str,
        product_id: str,
        new_name: str | None,
    ) -> Product:
        name = Name.of(new_name, "Product")

        franchise = await self._franchise_repo.find_by_id(franchise_id)
        if franchise is None:
            raise NotFoundError("franchise", franchise_id)

        product = franchise.product(branch_id, product_id)
        saved = await self._franchise_repo.save(
            franchise.replace_product(branch_id, product.renamed(name))
        )

        stored = saved.product(branch_id, product_id)
        logger.info("Product renamed: product_id=%s name=%s", stored.id, stored.name)
        return stored
