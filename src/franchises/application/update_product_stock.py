"""Application service: Update Product Stock use case."""

from __future__ import annotations

import logging

from franchises.domain.exceptions import NotFoundError
from franchises.domain.model.franchise import Product
from franchises.domain.model.value_objects import StockQuantity
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class UpdateProductStockHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    async def handle(
        self,
        franchise_id: str,
        branch_id: str,
        product_id: str,
        new_stock: int | None,
    ) -> Product:
        """Set a product's stock to *new_stock*.

        A missing or negative value is rejected before storage is
        touched.  Setting the current value again still reads and
        writes the franchise.
        """
        stock = StockQuantity.of(new_stock)

        franchise = await self._franchise_repo.find_by_id(franchise_id)
        if franchise is None:
            raise NotFoundError("franchise", franchise_id)

        product = franchise.product(branch_id, product_id)
        updated = franchise.replace_product(branch_id, product.with_stock(stock))

        saved = await self._franchise_repo.save(updated)

        stored = saved.product(branch_id, product_id)
        logger.info(
            "Stock updated: product_id=%s stock=%d", stored.id, stored.stock_quantity
        )
        return stored
