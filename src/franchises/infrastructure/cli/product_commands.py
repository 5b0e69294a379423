"""CLI commands for products of a branch."""

from __future__ import annotations

import asyncio

import click

from franchises.application.add_product import AddProductHandler
from franchises.application.delete_product import DeleteProductHandler
from franchises.application.rename_product import RenameProductHandler
from franchises.application.update_product_stock import UpdateProductStockHandler
from franchises.domain.exceptions import DomainException
from franchises.infrastructure.bootstrap import franchise_repository


@click.command("add")
@click.option("--franchise", "franchise_id", required=True, help="Franchise ID.")
@click.option("--branch", "branch_id", required=True, help="Branch ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--stock", type=int, default=None, help="Initial stock (default 0).")
def product_add(franchise_id: str, branch_id: str, name: str, stock: int | None) -> None:
    """Add a product to a branch."""
    handler = AddProductHandler(franchise_repo=franchise_repository())

    try:
        product = asyncio.run(handler.handle(franchise_id, branch_id, name, stock))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product {product.id} '{product.name}' added with stock {product.stock_quantity}"
    )


@click.command("delete")
@click.option("--franchise", "franchise_id", required=True, help="Franchise ID.")
@click.option("--branch", "branch_id", required=True, help="Branch ID.")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(franchise_id: str, branch_id: str, product_id: str) -> None:
    """Remove a product from a branch."""
    handler = DeleteProductHandler(franchise_repo=franchise_repository())

    try:
        asyncio.run(handler.handle(franchise_id, branch_id, product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted")


@click.command("stock")
@click.option("--franchise", "franchise_id", required=True, help="Franchise ID.")
@click.option("--branch", "branch_id", required=True, help="Branch ID.")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--stock", required=True, type=int, help="New stock quantity.")
def product_stock(franchise_id: str, branch_id: str, product_id: str, stock: int) -> None:
    """Set a product's stock quantity."""
    handler = UpdateProductStockHandler(franchise_repo=franchise_repository())

    try:
        product = asyncio.run(
            handler.handle(franchise_id, branch_id, product_id, stock)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} stock set to {product.stock_quantity}")


@click.command("rename")
@click.option("--franchise", "franchise_id", required=True, help="Franchise ID.")
@click.option("--branch", "branch_id", required=True, help="Branch ID.")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="New product name.")
def product_rename(franchise_id: str, branch_id: str, product_id: str, name: str) -> None:
    """Change a product's name."""
    handler = RenameProductHandler(franchise_repo=franchise_repository())

    try:
        product = asyncio.run(
            handler.handle(franchise_id, branch_id, product_id, name)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} renamed to '{product.name}'")
