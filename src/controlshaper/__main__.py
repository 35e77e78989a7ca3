"""Main entry point for controlshaper."""

from controlshaper.cli.main import cli

if __name__ == "__main__":
    cli()
