"""Entrypoint for the command line interface."""

import logging

import typer

from faviconurl.config import settings
from faviconurl.config_logging import configure_logging
from faviconurl.discovery import FaviconDiscovery, RedirectFetcher
from faviconurl.exceptions import FaviconUrlError
from faviconurl.models import DiscoveryResult
from faviconurl.utils.http_client import create_http_client

logger = logging.getLogger(__name__)

cli = typer.Typer(no_args_is_help=True, add_completion=False)

json_option = typer.Option(
    False,
    "--json",
    help="Write each result as a JSON document instead of a numbered list",
)


@cli.callback()
def setup():
    """Discover favicon URLs for web addresses."""
    configure_logging()


@cli.command()
def discover(
    addresses: list[str] = typer.Argument(
        ..., help="Domains or URLs, e.g. example.com or https://example.com/page"
    ),
    as_json: bool = json_option,
):
    """Print every favicon URL found for each address.

    Icons come from <link> and <meta> tags, the web app manifest, and
    /favicon.ico at the domain root. Problems are reported on stderr and
    never stop the remaining addresses from being processed.
    """
    timeout = float(settings.http.timeout_sec)
    with create_http_client(request_timeout=timeout, connect_timeout=timeout) as client:
        discovery = FaviconDiscovery(RedirectFetcher(client, settings.http.max_redirects))

        for address in addresses:
            try:
                result = discovery.discover_address(address)
            except FaviconUrlError as e:
                logger.debug(f"Skipping {address}: {e}")
                typer.echo(address)
                typer.echo(f"Error: {e}", err=True)
                continue

            for warning in result.warnings:
                typer.echo(f"Error: {warning.message}", err=True)

            if as_json:
                typer.echo(result.model_dump_json())
            else:
                typer.echo(render_result(result))


def render_result(result: DiscoveryResult) -> str:
    """Format a result as the address line followed by numbered icon URLs."""
    if result.redirected:
        lines = [f"{result.original_url} -> {result.resolved_url}"]
    else:
        lines = [result.original_url]

    lines.extend(f"{index}. {icon}" for index, icon in enumerate(result.icons, start=1))
    # Two blank lines separate a result from the next address.
    lines.extend(["", ""])
    return "\n".join(lines)


if __name__ == "__main__":
    cli()
