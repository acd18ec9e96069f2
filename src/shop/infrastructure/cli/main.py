import click

from shop.infrastructure.bootstrap import configure_logging
from shop.infrastructure.cli.catalog_commands import product_list, recommend
from shop.infrastructure.cli.demo_commands import demo


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log registry activity.")
def cli(verbose: bool) -> None:
    """Shop: in-memory e-commerce catalog demo"""
    configure_logging(verbose)


# Register subcommands
cli.add_command(demo)
cli.add_command(product_list)
cli.add_command(recommend)
