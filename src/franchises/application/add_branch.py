"""Application service: Add Branch use case."""

from __future__ import annotations

import logging

from franchises.domain.exceptions import NotFoundError
from franchises.domain.model.franchise import Branch
from franchises.domain.model.value_objects import Name
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class AddBranchHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    async def handle(self, franchise_id: str, name: str | None) -> Branch:
        """Append a new, empty branch to an existing franchise.

        The returned branch is read back from the saved franchise, not
        the in-memory value built before the save.
        """
        branch_name = Name.of(name, "Branch")

        franchise = await self._franchise_repo.find_by_id(franchise_id)
        if franchise is None:
            raise NotFoundError("franchise", franchise_id)

        branch = Branch.create(branch_name)
        saved = await self._franchise_repo.save(franchise.with_branch(branch))

        stored = saved.branch(branch.id)
        logger.info(
            "Branch added: franchise_id=%s branch_id=%s", saved.id, stored.id
        )
        return stored
