"""Allow ``python -m numview``."""

from numview.cli import cli

if __name__ == "__main__":
    cli()
