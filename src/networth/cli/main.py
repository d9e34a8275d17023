#!/usr/bin/env python3
"""
Main CLI Entry Point for the Net Worth Tracker

Provides the unified command-line interface over the entry store.
"""

import logging
import os

import click

from .. import __author__, __version__
from ..core.config import get_config, reload_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Net Worth Tracker - record dated snapshots of assets and debts.

    Entries are stored locally, one per date, and can be listed, charted,
    exported to CSV and imported back.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["NETWORTH_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("networth").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    # Environment overrides only take effect on a fresh load
    ctx.obj["config"] = reload_config() if config_env or debug else get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    click.echo(f"Net Worth Tracker v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Entries File: {config_obj.storage.entries_file}")
    click.echo(f"  Export Directory: {config_obj.interchange.export_dir}")
    click.echo(f"  Import Size Limit: {config_obj.interchange.import_max_bytes:,} bytes")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .entries import register_entry_commands  # noqa: E402

register_entry_commands(main)


if __name__ == "__main__":
    main()
