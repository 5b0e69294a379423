"""Mutations return the child as storage handed it back, not as built."""

from franchises.application.add_branch import AddBranchHandler
from franchises.application.add_product import AddProductHandler
from franchises.application.rename_branch import RenameBranchHandler
from franchises.application.rename_franchise import RenameFranchiseHandler
from franchises.application.rename_product import RenameProductHandler
from franchises.application.update_product_stock import UpdateProductStockHandler
from franchises.domain.model.franchise import Branch, Franchise, Product
from tests.fakes import StampingFranchiseRepository, run


def _repo() -> StampingFranchiseRepository:
    franchise = Franchise(
        id="f1",
        name="Nequi",
        branches=(
            Branch(
                id="b1",
                name="Centro",
                products=(Product(id="p1", name="Pan", stock_quantity=10),),
            ),
        ),
    )
    return StampingFranchiseRepository([franchise])


class TestReturnsStoredChild:

    def test_add_branch(self):
        repo = _repo()
        branch = run(AddBranchHandler(repo).handle("f1", "Norte"))
        assert branch.name == "Norte (stored)"
        assert run(repo.find_by_id("f1")).branch(branch.id) == branch

    def test_add_product(self):
        repo = _repo()
        product = run(AddProductHandler(repo).handle("f1", "b1", "Leche", 30))
        assert product.name == "Leche (stored)"
        assert product.stock_quantity == 30
        assert run(repo.find_by_id("f1")).product("b1", product.id) == product

    def test_update_stock(self):
        repo = _repo()
        product = run(UpdateProductStockHandler(repo).handle("f1", "b1", "p1", 20))
        assert product.name == "Pan (stored)"
        assert product.stock_quantity == 20

    def test_rename_franchise(self):
        repo = _repo()
        franchise = run(RenameFranchiseHandler(repo).handle("f1", "Bancolombia"))
        assert franchise.name == "Bancolombia (stored)"
        assert franchise.branch("b1").name == "Centro (stored)"

    def test_rename_branch(self):
        repo = _repo()
        branch = run(RenameBranchHandler(repo).handle("f1", "b1", "Sur"))
        assert branch.name == "Sur (stored)"
        assert branch.product("p1").name == "Pan (stored)"

    def test_rename_product(self):
        repo = _repo()
        product = run(RenameProductHandler(repo).handle("f1", "b1", "p1", "Arepa"))
        assert product.name == "Arepa (stored)"
        assert product.stock_quantity == 10
