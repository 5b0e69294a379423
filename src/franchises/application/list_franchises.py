"""Application service: List Franchises use case (query)."""

from __future__ import annotations

from franchises.domain.model.franchise import Franchise
from franchises.domain.repository.franchise_repository import FranchiseRepository


class ListFranchisesHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    async def handle(self) -> list[Franchise]:
        return await self._franchise_repo.find_all()
