"""Command-line interface for the JSON Reformatter."""

import asyncio
import click
from . import __version__
from .json_reformatter import JSONReformatter, DEFAULT_TARGET
from .types import ReformatError


@click.command()
@click.version_option(version=__version__)
def main():
    """Pretty-print messages.json in the current directory, in place."""
    reformatter = JSONReformatter(DEFAULT_TARGET)
    try:
        asyncio.run(reformatter.reformat())
    except ReformatError as e:
        raise click.ClickException(str(e)) from e


if __name__ == '__main__':
    main()
