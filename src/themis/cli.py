"""Themis CLI - diary entries for MCP clients."""

import json
import logging
import sys

import click

from .adapters.file_entries import VaultUnavailableError
from .config import load_config
from .workflows import get_recent_entries, get_store


@click.group()
@click.version_option()
def main():
    """Themis - diary entry server."""
    pass


@main.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def serve(debug: bool):
    """Run the MCP server on stdio."""
    from .server import run_server

    config = load_config()
    if debug:
        config.log_level = "DEBUG"

    try:
        run_server(config)
    except KeyboardInterrupt:
        click.echo("\nServer stopped.", err=True)


@main.command()
@click.option("--days", "-n", default=7, show_default=True, help="Number of days to look back")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def recent(days: int, as_json: bool, debug: bool):
    """Show diary entries from the last N days."""
    config = load_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )

    try:
        entries = get_recent_entries(get_store(config), days, order=config.entry_order)
    except VaultUnavailableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(
            json.dumps(
                {"entries": [e.to_dict() for e in entries], "count": len(entries)},
                indent=2,
            )
        )
        return

    if not entries:
        click.echo(f"No entries in the last {days} days.")
        return

    for entry in entries:
        click.echo(f"### {entry.entry_date.strftime('%A, %B %d, %Y')}")
        click.echo(f"({entry.path})\n")
        click.echo(entry.content.strip())
        click.echo()


@main.command()
def vault():
    """Show the resolved vault directory."""
    config = load_config()
    click.echo(str(config.vault_path))
