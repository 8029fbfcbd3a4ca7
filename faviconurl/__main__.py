"""Allow running the command line interface with `python -m faviconurl`."""

from faviconurl.cli import cli

cli(prog_name="faviconurl")
