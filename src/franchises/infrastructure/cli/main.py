import logging

import click

from franchises.infrastructure.cli.branch_commands import branch_add, branch_rename
from franchises.infrastructure.cli.franchise_commands import (
    franchise_add,
    franchise_list,
    franchise_rename,
    franchise_show,
    franchise_top_stock,
)
from franchises.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_rename,
    product_stock,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Franchises: franchise, branch and product management"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def franchise() -> None:
    """Manage franchises."""


@cli.group()
def branch() -> None:
    """Manage branches of a franchise."""


@cli.group()
def product() -> None:
    """Manage products of a branch."""


# Register subcommands
franchise.add_command(franchise_add)
franchise.add_command(franchise_list)
franchise.add_command(franchise_rename)
franchise.add_command(franchise_show)
franchise.add_command(franchise_top_stock)
branch.add_command(branch_add)
branch.add_command(branch_rename)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_rename)
product.add_command(product_stock)
