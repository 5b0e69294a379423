"""Application service: Delete Product use case.

Removal is physical: the product disappears from its branch.  The
``enabled`` flag is left alone.
"""

from __future__ import annotations

import logging

from franchises.domain.exceptions import NotFoundError
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    async def handle(
        self, franchise_id: str, branch_id: str, product_id: str
    ) -> None:
        franchise = await self._franchise_repo.find_by_id(franchise_id)
        if franchise is None:
            raise NotFoundError("franchise", franchise_id)

        branch = franchise.branch(branch_id)
        updated = franchise.replace_branch(branch.without_product(product_id))

        await self._franchise_repo.save(updated)
        logger.info(
            "Product deleted: franchise_id=%s branch_id=%s product_id=%s",
            franchise_id, branch_id, product_id,
        )
