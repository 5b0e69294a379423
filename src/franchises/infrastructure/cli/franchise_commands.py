"""CLI commands for the Franchise aggregate."""

from __future__ import annotations

import asyncio

import click

from franchises.application.add_franchise import AddFranchiseHandler
from franchises.application.list_franchises import ListFranchisesHandler
from franchises.application.rename_franchise import RenameFranchiseHandler
from franchises.application.show_franchise import ShowFranchiseHandler
from franchises.application.show_max_stock import MaxStockPerBranchHandler
from franchises.domain.exceptions import DomainException, NotFoundError
from franchises.domain.model.franchise import Franchise
from franchises.infrastructure.bootstrap import franchise_repository


def _display_franchise(franchise: Franchise) -> None:
    """Shared formatting for displaying a franchise tree."""
    click.echo(f"Franchise {franchise.id}  '{franchise.name}'")
    if not franchise.branches:
        click.echo("  (no branches)")
        return
    for branch in franchise.branches:
        click.echo(f"  Branch {branch.id}  '{branch.name}'")
        for p in branch.products:
            click.echo(f"    {p.id:<36} {p.name:<20} {p.stock_quantity:>8}")


@click.command("add")
@click.option("--name", required=True, help="Franchise name.")
def franchise_add(name: str) -> None:
    """Create a new franchise with no branches."""
    handler = AddFranchiseHandler(franchise_repo=franchise_repository())

    try:
        franchise = asyncio.run(handler.handle(name))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Franchise {franchise.id} '{franchise.name}' created")


@click.command("show")
@click.option("--id", "franchise_id", required=True, help="Franchise ID.")
def franchise_show(franchise_id: str) -> None:
    """Show a franchise with its branches and products."""
    handler = ShowFranchiseHandler(franchise_repo=franchise_repository())

    try:
        franchise = asyncio.run(handler.handle(franchise_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if franchise is None:
        raise click.ClickException(str(NotFoundError("franchise", franchise_id)))

    _display_franchise(franchise)


@click.command("list")
def franchise_list() -> None:
    """List all franchises."""
    handler = ListFranchisesHandler(franchise_repo=franchise_repository())

    try:
        franchises = asyncio.run(handler.handle())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not franchises:
        click.echo("No franchises found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Branches':>8}")
    click.echo("-" * 66)
    for f in franchises:
        click.echo(f"{f.id:<36} {f.name:<20} {len(f.branches):>8}")


@click.command("rename")
@click.option("--id", "franchise_id", required=True, help="Franchise ID.")
@click.option("--name", required=True, help="New franchise name.")
def franchise_rename(franchise_id: str, name: str) -> None:
    """Change a franchise's name."""
    handler = RenameFranchiseHandler(franchise_repo=franchise_repository())

    try:
        franchise = asyncio.run(handler.handle(franchise_id, name))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Franchise {franchise.id} renamed to '{franchise.name}'")


@click.command("top-stock")
@click.option("--id", "franchise_id", required=True, help="Franchise ID.")
def franchise_top_stock(franchise_id: str) -> None:
    """Show the product with the most stock in each branch."""
    handler = MaxStockPerBranchHandler(franchise_repo=franchise_repository())

    try:
        entries = list(asyncio.run(handler.handle(franchise_id)))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not entries:
        click.echo("No products found.")
        return

    click.echo(f"{'Branch':<20} {'Product':<20} {'Stock':>8}")
    click.echo("-" * 50)
    for entry in entries:
        click.echo(
            f"{entry.branch_name:<20} {entry.product.name:<20} "
            f"{entry.product.stock_quantity:>8}"
        )
