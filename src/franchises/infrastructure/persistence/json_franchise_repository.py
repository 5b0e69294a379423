"""JSON-file-backed implementation of FranchiseRepository.

The file holds one JSON array of franchise documents with their
branches and products embedded.  File access runs in a worker thread so
the event loop is never blocked, and a per-loop lock keeps one process from
interleaving two read-modify-write cycles on the same file.
"""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from dataclasses import replace
from pathlib import Path

from franchises.domain.exceptions import StorageError
from franchises.domain.model.franchise import Branch, Franchise, Product
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class JsonFranchiseRepository(FranchiseRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    def _file_lock(self) -> asyncio.Lock:
        """Lock for the running event loop.

        An asyncio.Lock is bound to the first loop it waits on, and one
        repository may be driven by several ``asyncio.run`` calls.
        """
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    # --- FranchiseRepository interface ----------------------------------------

    async def save(self, franchise: Franchise) -> Franchise:
        if not franchise.id:
            franchise = replace(franchise, id=str(uuid.uuid4()))

        async with self._file_lock():
            records = await self._read()

            # Upsert: replace if exists, otherwise append
            replaced = False
            for i, raw in enumerate(records):
                if raw["id"] == franchise.id:
                    records[i] = self._to_raw(franchise)
                    replaced = True
                    break
            if not replaced:
                records.append(self._to_raw(franchise))

            await self._write(records)

        logger.debug("Franchise saved: id=%s", franchise.id)
        return self._to_domain(self._to_raw(franchise))

    async def find_by_id(self, franchise_id: str) -> Franchise | None:
        async with self._file_lock():
            records = await self._read()
        for raw in records:
            if raw["id"] == franchise_id:
                logger.debug("Franchise found: id=%s", franchise_id)
                return self._to_domain(raw)
        return None

    async def find_all(self) -> list[Franchise]:
        async with self._file_lock():
            records = await self._read()
        return [self._to_domain(raw) for raw in records]

    async def delete_by_id(self, franchise_id: str) -> None:
        async with self._file_lock():
            records = await self._read()
            remaining = [raw for raw in records if raw["id"] != franchise_id]
            if len(remaining) != len(records):
                await self._write(remaining)
        logger.debug("Franchise deleted: id=%s", franchise_id)

    async def exists_by_id(self, franchise_id: str) -> bool:
        async with self._file_lock():
            records = await self._read()
        return any(raw["id"] == franchise_id for raw in records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(franchise: Franchise) -> dict:
        return {
            "id": franchise.id,
            "name": franchise.name,
            "branches": [
                {
                    "id": branch.id,
                    "name": branch.name,
                    "products": [
                        {
                            "id": product.id,
                            "name": product.name,
                            "stock_quantity": product.stock_quantity,
                            "enabled": product.enabled,
                        }
                        for product in branch.products
                    ],
                }
                for branch in franchise.branches
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Franchise:
        branches = tuple(
            Branch(
                id=b["id"],
                name=b["name"],
                products=tuple(
                    Product(
                        id=p["id"],
                        name=p["name"],
                        stock_quantity=p.get("stock_quantity") or 0,
                        enabled=p.get("enabled", True),
                    )
                    for p in b.get("products") or []
                ),
            )
            for b in raw.get("branches") or []
        )
        return Franchise(id=raw["id"], name=raw["name"], branches=branches)

    # --- File helpers ---------------------------------------------------------

    async def _read(self) -> list[dict]:
        try:
            return await asyncio.to_thread(self._load_raw)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.error("Error reading %s", self._file_path, exc_info=True)
            raise StorageError(f"Cannot read franchises from {self._file_path}") from exc

    async def _write(self, records: list[dict]) -> None:
        try:
            await asyncio.to_thread(self._persist_raw, records)
        except (OSError, TypeError) as exc:
            logger.error("Error writing %s", self._file_path, exc_info=True)
            raise StorageError(f"Cannot write franchises to {self._file_path}") from exc

    def _load_raw(self) -> list[dict]:
        self._ensure_file()
        records = json.loads(self._file_path.read_text(encoding="utf-8"))
        if not isinstance(records, list):
            raise ValueError(f"Expected a JSON array, got {type(records).__name__}")
        for raw in records:
            if not isinstance(raw, dict):
                raise ValueError(f"Expected a franchise object, got {type(raw).__name__}")
            # Fails here, inside _read, if a document is missing a field
            self._to_domain(raw)
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        self._ensure_file()
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
