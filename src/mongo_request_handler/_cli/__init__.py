import click

from .cli_send import send


@click.group()
def cli() -> None:
    """Command line access to the MongoDB Data API."""


cli.add_command(send)

__all__ = ["cli"]
