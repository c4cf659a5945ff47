"""Main entry point for rkconfigurator."""

from rkconfigurator.cli import cli

if __name__ == "__main__":
    cli()
