#!/usr/bin/env python3
"""
Entry CLI - Net Worth Snapshot Commands

Thin presentation layer over NetWorthSession: every command opens the
configured session, runs one command method, and prints the refreshed data.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from pathlib import Path

import click

from ..analysis.growth import NetWorthView, format_rate
from ..core.config import get_config
from ..core.dates import FinancialDate
from ..core.errors import ImportAborted, NetWorthError
from ..entries.models import Entry, SortOrder
from ..session import NetWorthSession


@contextmanager
def _reporting_errors() -> Iterator[None]:
    """Turn domain errors into click errors (exit status 1)."""
    try:
        yield
    except ImportAborted as e:
        raise click.ClickException(
            f"Import stopped at row {e.row_number}: {e.cause}. "
            f"{e.rows_imported} row(s) before it were imported."
        ) from e
    except NetWorthError as e:
        raise click.ClickException(str(e)) from e


def _open_session() -> NetWorthSession:
    config = get_config()
    with _reporting_errors():
        return NetWorthSession.from_config(config)


def _entry_line(entry: Entry) -> str:
    return (
        f"{entry.key}  {str(entry.assets):>16}  {str(entry.debts):>16}  "
        f"{str(entry.net_worth):>16}  {entry.notes}"
    )


def _print_growth(view: NetWorthView) -> None:
    click.echo(f"Monthly growth rate: {format_rate(view.growth.monthly_rate)}")
    click.echo(f"Yearly growth rate: {format_rate(view.growth.yearly_rate)}")


def _print_table(entries: list[Entry]) -> None:
    click.echo(f"{'Date':<10}  {'Assets':>16}  {'Debts':>16}  {'Net Worth':>16}  Notes")
    click.echo("-" * 80)
    for entry in entries:
        click.echo(_entry_line(entry))


@click.command(name="add")
@click.option("--date", "date_str", help="Entry date (default: today)")
@click.option("--assets", default="0", show_default=True, help="Total assets, e.g. $125,000")
@click.option("--debts", default="0", show_default=True, help="Total debts")
@click.option("--notes", default="", help="Free-text notes")
def add(date_str: str | None, assets: str, debts: str, notes: str) -> None:
    """
    Record a snapshot. An existing entry for the same date is replaced.

    Example:
      networth add --date 2024-05-01 --assets 125000 --debts 40000
    """
    session = _open_session()
    session.begin_add()
    with _reporting_errors():
        entry = session.save_entry(date_str or FinancialDate.today(), assets, debts, notes)
    click.echo(f"Saved entry for {entry.key}: net worth {entry.net_worth}")


@click.command(name="edit")
@click.argument("entry_date")
@click.option("--date", "new_date", help="Move the entry to a new date")
@click.option("--assets", help="New assets amount")
@click.option("--debts", help="New debts amount")
@click.option("--notes", help="New notes")
def edit(entry_date: str, new_date: str | None, assets: str | None, debts: str | None, notes: str | None) -> None:
    """
    Change an existing entry. Unspecified fields keep their current values.

    Example:
      networth edit 2024-05-01 --date 2024-05-02 --notes "moved"
    """
    session = _open_session()
    with _reporting_errors():
        current = session.begin_edit(entry_date)
        entry = session.save_entry(
            new_date or current.key,
            assets if assets is not None else current.assets.to_plain_str(),
            debts if debts is not None else current.debts.to_plain_str(),
            notes if notes is not None else current.notes,
        )
    if entry.key != current.key:
        click.echo(f"Moved entry {current.key} to {entry.key}")
    click.echo(f"Saved entry for {entry.key}: net worth {entry.net_worth}")


@click.command(name="delete")
@click.argument("entry_date")
def delete(entry_date: str) -> None:
    """Delete the entry for a date (restore it with `networth undo`)."""
    session = _open_session()
    with _reporting_errors():
        removed = session.delete_entry(entry_date)
    if removed is None:
        click.echo(f"No entry for {entry_date}; nothing deleted.")
        return
    click.echo(f"Entry for {removed.date.to_display_string()} has been deleted.")


@click.command(name="list")
@click.option("--ascending", is_flag=True, help="Oldest entries first")
def list_entries(ascending: bool) -> None:
    """List all entries with growth rates."""
    session = _open_session()
    with _reporting_errors():
        view = session.view()

    if not view.rows:
        click.echo("No entries recorded.")
        return

    rows = list(reversed(view.rows)) if ascending else view.rows
    _print_table(rows)
    click.echo()
    _print_growth(view)


@click.command(name="stats")
def stats() -> None:
    """Show net worth growth statistics."""
    session = _open_session()
    with _reporting_errors():
        view = session.view()

    if view.latest is None:
        click.echo("No entries recorded.")
        return

    click.echo(f"Entries: {len(view.rows)}")
    click.echo(f"Latest ({view.latest.key}): {view.latest.net_worth}")
    if view.growth.begin_net_worth is not None:
        click.echo(f"Span: {view.growth.days} days, starting at {view.growth.begin_net_worth}")
    _print_growth(view)


@click.command(name="clear")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
def clear(yes: bool) -> None:
    """Remove every entry (restore them with `networth undo`)."""
    if not yes and not click.confirm("Delete all entries?"):
        click.echo("Cancelled.")
        return

    session = _open_session()
    with _reporting_errors():
        count = session.clear_entries()
    click.echo(f"All data has been cleared ({count} entries).")


@click.command(name="undo")
def undo() -> None:
    """Restore what the last delete or clear removed."""
    session = _open_session()
    description = session.undo_buffer.describe()
    with _reporting_errors():
        restored = session.undo()
    if restored == 0:
        click.echo("Nothing to undo.")
        return
    click.echo(f"Restored {description.lower()} ({restored} entries).")


@click.command(name="import")
@click.argument("csv_file", type=click.Path(path_type=Path))
def import_entries(csv_file: Path) -> None:
    """
    Import entries from a CSV file of "date","assets","debts","notes" rows.

    Rows are stored one at a time; the first invalid row stops the import.
    """
    config = get_config()
    session = _open_session()
    with _reporting_errors():
        result = session.import_csv_file(csv_file, config.interchange.import_max_bytes)
    click.echo(f"Imported {result.rows_imported} entries from {csv_file}")


@click.command(name="export")
@click.option("--output-dir", type=click.Path(file_okay=False, path_type=Path), help="Directory for the export file")
@click.option("--stdout", "to_stdout", is_flag=True, help="Write CSV to standard output instead of a file")
def export_entries(output_dir: Path | None, to_stdout: bool) -> None:
    """Export all entries to NetWorthExport_<date>.csv."""
    config = get_config()
    session = _open_session()

    if to_stdout:
        click.echo(session.export_csv_text())
        return

    with _reporting_errors():
        output_file = session.export_csv_file(output_dir or config.interchange.export_dir)
    click.echo(f"Exported {len(session.entries(SortOrder.ASCENDING))} entries to {output_file}")


@click.command(name="chart")
@click.option("--output-file", type=click.Path(dir_okay=False, path_type=Path), help="Image path (default: charts dir)")
def chart(output_file: Path | None) -> None:
    """Render the net worth trend chart to an image."""
    from ..analysis.chart import render_trend_chart

    config = get_config()
    session = _open_session()
    with _reporting_errors():
        view = session.view()

    if not view.rows:
        raise click.ClickException("No entries to chart.")

    if output_file is None:
        output_file = config.chart.output_dir / f"net_worth_{date.today().isoformat()}.png"

    written = render_trend_chart(
        view.series,
        output_file,
        growth=view.growth,
        figure_size=(config.chart.width, config.chart.height),
        dpi=config.chart.dpi,
    )
    click.echo(f"Chart written to {written}")


ENTRY_COMMANDS = (add, edit, delete, list_entries, stats, clear, undo, import_entries, export_entries, chart)


def register_entry_commands(group: click.Group) -> None:
    """Attach every entry command to a click group."""
    for command in ENTRY_COMMANDS:
        group.add_command(command)
