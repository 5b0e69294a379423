"""Application service: Show Franchise use case (query).

A pass-through to the repository: a missing id yields None and the
caller decides whether that is an error.
"""

from __future__ import annotations

import logging

from franchises.domain.model.franchise import Franchise
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class ShowFranchiseHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    async def handle(self, franchise_id: str) -> Franchise | None:
        logger.debug("Find franchise: id=%s", franchise_id)
        return await self._franchise_repo.find_by_id(franchise_id)
