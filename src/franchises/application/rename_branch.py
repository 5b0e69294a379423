"""Application service: Rename Branch use case."""

from __future__ import annotations

import logging

from franchises.domain.exceptions import NotFoundError
from franchises.domain.model.franchise import Branch
from franchises.domain.model.value_objects import Name
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class RenameBranchHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    async def handle(
        self, franchise_id: str, branch_id: str, new_name: str | None
    ) -> Branch:
        name = Name.of(new_name, "Branch")

        franchise = await self._franchise_repo.find_by_id(franchise_id)
        if franchise is None:
            raise NotFoundError("franchise", franchise_id)

        branch = franchise.branch(branch_id)
        saved = await self._franchise_repo.save(
            franchise.replace_branch(branch.renamed(name))
        )

        stored = saved.branch(branch_id)
        logger.info("Branch renamed: branch_id=%s name=%s", stored.id, stored.name)
        return stored
