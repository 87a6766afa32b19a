"""Main entry point for colorstate."""

from colorstate.cli.main import cli

if __name__ == "__main__":
    cli()
