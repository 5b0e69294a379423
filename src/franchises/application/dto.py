"""Data Transfer Objects: plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass

from franchises.domain.model.franchise import Product


@dataclass(frozen=True)
class BranchTopProduct:
    """Output: the best-stocked product of one branch, tagged with the branch."""

    branch_id: str
    branch_name: str
    product: Product
