"""CLI commands for branches of a franchise."""

from __future__ import annotations

import asyncio

import click

from franchises.application.add_branch import AddBranchHandler
from franchises.application.rename_branch import RenameBranchHandler
from franchises.domain.exceptions import DomainException
from franchises.infrastructure.bootstrap import franchise_repository


@click.command("add")
@click.option("--franchise", "franchise_id", required=True, help="Franchise ID.")
@click.option("--name", required=True, help="Branch name.")
def branch_add(franchise_id: str, name: str) -> None:
    """Add a branch to a franchise."""
    handler = AddBranchHandler(franchise_repo=franchise_repository())

    try:
        branch = asyncio.run(handler.handle(franchise_id, name))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Branch {branch.id} '{branch.name}' added")


@click.command("rename")
@click.option("--franchise", "franchise_id", required=True, help="Franchise ID.")
@click.option("--id", "branch_id", required=True, help="Branch ID.")
@click.option("--name", required=True, help="New branch name.")
def branch_rename(franchise_id: str, branch_id: str, name: str) -> None:
    """Change a branch's name."""
    handler = RenameBranchHandler(franchise_repo=franchise_repository())

    try:
        branch = asyncio.run(handler.handle(franchise_id, branch_id, name))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Branch {branch.id} renamed to '{branch.name}'")
