"""Application service: Add Franchise use case."""

from __future__ import annotations

import logging

from franchises.domain.model.franchise import Franchise
from franchises.domain.model.value_objects import Name
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class AddFranchiseHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    async def handle(self, name: str | None) -> Franchise:
        """Create a new franchise with no branches."""
        franchise = Franchise.create(Name.of(name, "Franchise"))
        saved = await self._franchise_repo.save(franchise)
        logger.info("Franchise created: id=%s name=%s", saved.id, saved.name)
        return saved
