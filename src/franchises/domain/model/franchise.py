"""Franchise aggregate: the core of the domain.

A Franchise owns its Branches, and each Branch owns its Products; the
whole tree is stored and replaced as one document.

All three entities are frozen.  Every change returns a *new* value in
which only the targeted child is swapped out and every sibling is
carried over unchanged, so a value read earlier is never altered
underneath whoever still holds it.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace

from franchises.domain.exceptions import NotFoundError
from franchises.domain.model.value_objects import Name, StockQuantity


def new_id() -> str:
    """Fresh opaque identifier for a branch or product."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Product:
    """A product offered by a branch.

    ``enabled`` marks logical deletion.  No operation sets it yet;
    removing a product is always physical.
    """

    id: str
    name: str
    stock_quantity: int = 0
    enabled: bool = True

    @staticmethod
    def create(name: Name, stock: StockQuantity) -> Product:
        return Product(id=new_id(), name=name.value, stock_quantity=stock.value)

    def with_stock(self, stock: StockQuantity) -> Product:
        return replace(self, stock_quantity=stock.value)

    def renamed(self, name: Name) -> Product:
        return replace(self, name=name.value)


@dataclass(frozen=True)
class Branch:
    """A branch of a franchise and the products it offers."""

    id: str
    name: str
    products: tuple[Product, ...] = ()

    @staticmethod
    def create(name: Name) -> Branch:
        return Branch(id=new_id(), name=name.value)

    # --- Lookup ---------------------------------------------------------------

    def product(self, product_id: str) -> Product:
        for product in self.products:
            if product.id == product_id:
                return product
        raise NotFoundError("product", product_id)

    def top_product(self) -> Product | None:
        """The product with the greatest stock; first one wins a tie."""
        if not self.products:
            return None
        return max(self.products, key=lambda p: p.stock_quantity)

    # --- Rebuilds -------------------------------------------------------------

    def with_product(self, product: Product) -> Branch:
        return replace(self, products=self.products + (product,))

    def replace_product(self, product: Product) -> Branch:
        self.product(product.id)
        return replace(
            self,
            products=tuple(
                product if p.id == product.id else p for p in self.products
            ),
        )

    def without_product(self, product_id: str) -> Branch:
        self.product(product_id)
        return replace(
            self,
            products=tuple(p for p in self.products if p.id != product_id),
        )

    def renamed(self, name: Name) -> Branch:
        return replace(self, name=name.value)


@dataclass(frozen=True)
class Franchise:
    """Aggregate root.

    Use ``Franchise.create()`` for new franchises.  The id stays empty
    until the repository assigns one on the first save; ``__init__`` is
    kept plain so the repository can reconstitute stored documents.
    """

    id: str
    name: str
    branches: tuple[Branch, ...] = ()

    @staticmethod
    def create(name: Name) -> Franchise:
        return Franchise(id="", name=name.value)

    # --- Lookup ---------------------------------------------------------------

    def branch(self, branch_id: str) -> Branch:
        for branch in self.branches:
            if branch.id == branch_id:
                return branch
        raise NotFoundError("branch", branch_id)

    def product(self, branch_id: str, product_id: str) -> Product:
        return self.branch(branch_id).product(product_id)

    # --- Rebuilds -------------------------------------------------------------

    def with_branch(self, branch: Branch) -> Franchise:
        return replace(self, branches=self.branches + (branch,))

    def replace_branch(self, branch: Branch) -> Franchise:
        self.branch(branch.id)
        return replace(
            self,
            branches=tuple(
                branch if b.id == branch.id else b for b in self.branches
            ),
        )

    def replace_product(self, branch_id: str, product: Product) -> Franchise:
        """Swap one product inside one branch, rebuilding both levels."""
        return self.replace_branch(self.branch(branch_id).replace_product(product))

    def renamed(self, name: Name) -> Franchise:
        return replace(self, name=name.value)
