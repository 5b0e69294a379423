"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from franchises.domain.exceptions import NotFoundError
from franchises.domain.model.franchise import Product
from franchises.domain.model.value_objects import Name, StockQuantity
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    async def handle(
        self,
        franchise_id: str,
        branch_id: str,
        name: str | None,
        stock: int | None = None,
    ) -> Product:
        """Add a product to one branch of a franchise.

        Unlike a stock update, a missing or negative initial stock is
        not an error here: it is stored as 0.
        """
        product_name = Name.of(name, "Product")
        initial_stock = StockQuantity.clamped(stock)

        franchise = await self._franchise_repo.find_by_id(franchise_id)
        if franchise is None:
            raise NotFoundError("franchise", franchise_id)

        branch = franchise.branch(branch_id)
        product = Product.create(product_name, initial_stock)
        updated = franchise.replace_branch(branch.with_product(product))

        saved = await self._franchise_repo.save(updated)

        stored = saved.product(branch_id, product.id)
        logger.info(
            "Product added: franchise_id=%s branch_id=%s product_id=%s stock=%d",
            saved.id, branch_id, stored.id, stored.stock_quantity,
        )
        return stored
