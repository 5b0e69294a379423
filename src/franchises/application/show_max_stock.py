"""Application service: Product With Most Stock Per Branch (query)."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from franchises.application.dto import BranchTopProduct
from franchises.domain.exceptions import NotFoundError
from franchises.domain.model.franchise import Franchise
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class MaxStockPerBranchHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    async def handle(self, franchise_id: str) -> Iterator[BranchTopProduct]:
        """Return one entry per branch that has at least one product.

        The franchise is loaded up front, so an unknown id raises here.
        The entries themselves are produced lazily and can be iterated
        only once.
        """
        franchise = await self._franchise_repo.find_by_id(franchise_id)
        if franchise is None:
            raise NotFoundError("franchise", franchise_id)

        logger.debug("Max stock per branch: franchise_id=%s", franchise_id)
        return self._top_products(franchise)

    @staticmethod
    def _top_products(franchise: Franchise) -> Iterator[BranchTopProduct]:
        for branch in franchise.branches:
            top = branch.top_product()
            if top is None:
                continue
            yield BranchTopProduct(
                branch_id=branch.id, branch_name=branch.name, product=top
            )
