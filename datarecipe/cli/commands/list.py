"""CLI command for listing available steps."""

import click

from datarecipe.steps import list_step_types


@click.command("list-steps")
def list_steps():
    """List available step types.

    Shows all registered step types that can be used in a recipe file.
    """
    click.echo("Available Steps:")
    for step_type in list_step_types():
        click.echo(f"  - {step_type}")
