"""
Entry point for the `mcpc` package.

This file allows the package to be executed as a module using the command:

    python -m mcpc

It imports and calls the `cli` function from `mcpc.cli.main`,
which handles the command-line interface.
"""

from .cli.main import cli

if __name__ == "__main__":
    cli()
