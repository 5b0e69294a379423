"""Application service: Rename Franchise use case."""

from __future__ import annotations

import logging

from franchises.domain.exceptions import NotFoundError
from franchises.domain.model.franchise import Franchise
from franchises.domain.model.value_objects import Name
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class RenameFranchiseHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    async def handle(self, franchise_id: str, new_name: str | None) -> Franchise:
        name = Name.of(new_name, "Franchise")

        franchise = await self._franchise_repo.find_by_id(franchise_id)
        if franchise is None:
            raise NotFoundError("franchise", franchise_id)

        saved = await self._franchise_repo.save(franchise.renamed(name))
        logger.info("Franchise renamed: id=%s name=%s", saved.id, saved.name)
        return saved
