"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from franchises.infrastructure.persistence.json_franchise_repository import (
    JsonFranchiseRepository,
)

DATA_DIR_ENV = "FRANCHISES_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def franchise_repository() -> JsonFranchiseRepository:
    return JsonFranchiseRepository(data_dir() / "franchises.json")
