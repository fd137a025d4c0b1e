"""Main CLI entry point for datarecipe."""

import click

from datarecipe import __version__
from datarecipe.cli.commands.bake import bake
from datarecipe.cli.commands.describe import describe
from datarecipe.cli.commands.list import list_steps
from datarecipe.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """DataRecipe - declarative preprocessing for tabular data."""
    pass


# Register commands
main.add_command(validate)
main.add_command(list_steps)
main.add_command(describe)
main.add_command(bake)


if __name__ == "__main__":
    main()
