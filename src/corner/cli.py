# src/corner/cli.py
"""
Corner Command Line Interface (CLI).

This module implements the terminal surface of the dashboard using `typer`
and `rich`. Every widget is reachable as a command, and `corner watch` runs
the live dashboard with its periodic render loops.

Features
--------
- **Countdowns**: `corner next` for the annual anchor, `corner cd ...` for the
  saved custom list.
- **Notes**: `corner notes ...` for the two-party log; text is escaped before
  it reaches Rich, so `[bold]` typed into a note stays literal.
- **Quote / Prompt**: fresh content, optionally copied to the clipboard.
- **Live View**: `corner watch` refreshes the clock, the anchor countdown and
  the custom list on independent intervals.

Usage
-----
    $ corner cd add "Trip" 2026-12-24
    $ corner notes add "Lunch at noon?" --reply "Yes!" --as me
    $ corner watch
"""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from corner.core.contracts import Author, Notice
from corner.core.countdown import Remaining
from corner.core.result import Result
from corner.core.settings import load_settings
from corner.dashboard import Dashboard
from corner.render import EMPTY_PANEL, note_panels
from corner.store import CollectionStore, MemoryBackend, get_store
from corner.widgets import CountdownRow, embed_url
from corner.widgets.clipboard import copy_text
from corner.widgets.prompts import draw_prompt

# Ensure .env overrides (CORNER_DATA_DIR, CORNER_TIMEZONE, ...) are visible.
load_dotenv()

app = typer.Typer(
    help="Corner: a personal dashboard of clocks, countdowns, notes and quotes.",
    rich_markup_mode="markdown",
    no_args_is_help=True,
)
cd_app = typer.Typer(help="Saved custom countdowns.", no_args_is_help=True)
notes_app = typer.Typer(help="Two-party note log.", no_args_is_help=True)
playlist_app = typer.Typer(help="Embedded playlist.", no_args_is_help=True)
app.add_typer(cd_app, name="cd")
app.add_typer(notes_app, name="notes")
app.add_typer(playlist_app, name="playlist")

console = Console()


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _build_dashboard(ephemeral: bool = False) -> Dashboard:
    """
    Helper: Construct the dashboard session for one command.

    Split out so tests can patch it and inject a memory-backed session.
    """
    store = CollectionStore(MemoryBackend()) if ephemeral else get_store()
    return Dashboard.create(store)


def _notice(notice: Notice) -> None:
    style = "yellow" if notice.is_failure else "green"
    console.print(f"[{style}]{escape(notice.value)}[/{style}]")


def _report(result: Result[object, Notice], success: Notice) -> bool:
    """Print the notice for ``result``; return True on success."""
    if result.is_err():
        _notice(result.unwrap_err())
        return False
    _notice(success)
    return True


def _copy(text: str) -> None:
    if copy_text(text):
        _notice(Notice.COPIED)


def _anchor_line(dash: Dashboard, rem: Remaining) -> str:
    target = dash.anniversary.target
    when = f"{target:%b %d, %H:%M} {dash.clock.label}" if target else "?"
    return (
        f"[bold]{escape(dash.anniversary.label)}[/bold] in "
        f"[cyan]{rem.days}d {rem.hours:02d}h {rem.minutes:02d}m {rem.seconds:02d}s[/cyan]"
        f" [dim]({when})[/dim]"
    )


def _countdown_table(rows: list[CountdownRow], dash: Dashboard) -> Table | Text:
    if not rows:
        return Text("No saved countdowns yet. Add one with `corner cd add`.", style="dim")
    table = Table(box=None, show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Date")
    table.add_column("Remaining", justify="right")
    table.add_column("ID", style="dim")
    for row in rows:
        style = "green" if row.is_done else "cyan"
        table.add_row(
            escape(row.record.name),
            f"{row.record.date.isoformat()} • {dash.clock.label} midnight",
            f"[{style}]{escape(row.label)}[/{style}]",
            row.id,
        )
    return table


def _note_renderables(dash: Dashboard) -> list[Panel]:
    labels = {
        Author.KUNJUS: dash.settings.party_a_label,
        Author.ME: dash.settings.party_b_label,
    }
    out: list[Panel] = []
    for note in dash.notes.notes():
        bubbles = []
        for panel in note_panels(note, labels):
            body = escape(panel.text) if panel.text else f"[dim]{EMPTY_PANEL}[/dim]"
            color = "magenta" if panel.author is Author.ME else "cyan"
            bubbles.append(
                Panel(body, title=escape(panel.title), border_style=color, width=38)
            )
        stamp = f"{dash.clock.format_timestamp(note.created_at)} • {dash.clock.label}"
        out.append(
            Panel(
                Columns(bubbles),
                title=f"[dim]{escape(stamp)}[/dim]",
                subtitle=f"[dim]{note.id}[/dim]",
                border_style="dim",
            )
        )
    return out


def _render_watch(dash: Dashboard) -> Group:
    """Build the full live-view renderable from the current dashboard state."""
    parts: list[RenderableType] = [Text(dash.clock_text, style="bold")]
    if dash.anchor_remaining is not None:
        parts.append(_anchor_line(dash, dash.anchor_remaining))
    parts.append(
        Panel(_countdown_table(dash.countdown_rows, dash), title="Countdowns", border_style="cyan")
    )
    if dash.quote is not None:
        parts.append(
            Panel(
                f"{escape(dash.quote.text)}\n[dim]{escape(dash.quote.meta_line())}[/dim]",
                title="Boost",
                border_style="magenta",
            )
        )
    else:
        parts.append(Text("Fetching a quote…", style="dim"))
    return Group(*parts)


# --------------------------------------------------------------------------- #
# Top-level commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def clock() -> None:
    """Show the current time in the dashboard's civil timezone."""
    dash = _build_dashboard()
    console.print(dash.refresh_clock())


@app.command(name="next")  # type: ignore[misc]
def next_anchor() -> None:
    """Show the countdown to the next occurrence of the annual anchor."""
    dash = _build_dashboard()
    console.print(_anchor_line(dash, dash.refresh_anchor()))


@app.command()  # type: ignore[misc]
def quote(
    copy: Annotated[bool, typer.Option("--copy", "-c", help="Copy the quote.")] = False,
) -> None:
    """Fetch a quote (falls back to the offline set when the network fails)."""
    dash = _build_dashboard()
    result = dash.quotes.fetch()
    console.print(Panel(escape(result.text), subtitle=escape(result.meta_line())))
    if copy:
        _copy(f"{result.text} {result.meta_line()}".strip())


@app.command()  # type: ignore[misc]
def prompt(
    copy: Annotated[bool, typer.Option("--copy", "-c", help="Copy the prompt.")] = False,
) -> None:
    """Draw a random prompt and a tiny mission."""
    drawn = draw_prompt()
    console.print(f"[bold]{escape(drawn.text)}[/bold]")
    console.print(f"[dim]Tiny mission:[/dim] {escape(drawn.mission)}")
    if copy:
        _copy(drawn.text)


@app.command()  # type: ignore[misc]
def watch(
    once: Annotated[
        bool, typer.Option("--once", help="Render a single frame and exit.")
    ] = False,
    ephemeral: Annotated[
        bool, typer.Option("--ephemeral", help="Use an in-memory store.")
    ] = False,
) -> None:
    """
    Run the live dashboard.

    The clock, the annual countdown and the custom countdown list refresh on
    their own intervals (see `CORNER_*_INTERVAL`). Press Ctrl+C to quit.
    """
    dash = _build_dashboard(ephemeral=ephemeral)
    dash.render_all()

    if once:
        dash.quote = dash.quotes.fetch()
        console.print(_render_watch(dash))
        return

    async def _run() -> None:
        sync = dash.build_sync()
        with Live(_render_watch(dash), console=console, refresh_per_second=4) as live:
            quote_task = asyncio.create_task(dash.refresh_quote())
            try:
                await sync.run(on_tick=lambda _name: live.update(_render_watch(dash)))
            finally:
                quote_task.cancel()

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        console.print("[dim]Bye.[/dim]")


@app.command()  # type: ignore[misc]
def serve(
    host: Annotated[str, typer.Option(help="Interface to bind.")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port to listen on.")] = 8000,
    reload: Annotated[bool, typer.Option(help="Auto-reload on code changes.")] = False,
) -> None:
    """Serve the HTTP API with uvicorn."""
    from corner.api.server import main as serve_main

    serve_main(host=host, port=port, reload=reload)


# --------------------------------------------------------------------------- #
# Countdowns
# --------------------------------------------------------------------------- #


@cd_app.command("list")  # type: ignore[misc]
def cd_list() -> None:
    """List saved countdowns with their remaining time."""
    dash = _build_dashboard()
    console.print(_countdown_table(dash.countdowns.render(), dash))


@cd_app.command("add")  # type: ignore[misc]
def cd_add(
    name: Annotated[str, typer.Argument(help="Event name.")] = "",
    date: Annotated[str, typer.Argument(help="Target date, YYYY-MM-DD.")] = "",
) -> None:
    """Add a countdown to civil midnight of DATE."""
    dash = _build_dashboard()
    if _report(dash.countdowns.add(name, date), Notice.COUNTDOWN_ADDED):
        console.print(_countdown_table(dash.countdowns.rows, dash))


@cd_app.command("rm")  # type: ignore[misc]
def cd_remove(record_id: Annotated[str, typer.Argument(help="Countdown id.")]) -> None:
    """Delete a countdown by id (unknown ids are ignored)."""
    dash = _build_dashboard()
    dash.countdowns.remove(record_id)
    _notice(Notice.COUNTDOWN_DELETED)


@cd_app.command("clear")  # type: ignore[misc]
def cd_clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation.")] = False,
) -> None:
    """Delete every saved countdown."""
    if not yes and not typer.confirm("Clear all saved countdowns?", default=False):
        raise typer.Exit(code=0)
    dash = _build_dashboard()
    dash.countdowns.clear_all()
    _notice(Notice.COUNTDOWNS_CLEARED)


# --------------------------------------------------------------------------- #
# Notes
# --------------------------------------------------------------------------- #


@notes_app.command("list")  # type: ignore[misc]
def notes_list() -> None:
    """Show every note, newest first, author's panel first."""
    dash = _build_dashboard()
    panels = _note_renderables(dash)
    console.print(f"[bold]Notes[/bold] ({len(panels)})")
    if not panels:
        console.print("[dim]No notes yet. Add one with `corner notes add`.[/dim]")
    for panel in panels:
        console.print(panel)


@notes_app.command("add")  # type: ignore[misc]
def notes_add(
    text: Annotated[str, typer.Argument(help="Primary note text.")] = "",
    reply: Annotated[str, typer.Option("--reply", "-r", help="Optional reply.")] = "",
    author: Annotated[
        Author, typer.Option("--as", "-a", help="Who writes the primary text.")
    ] = Author.KUNJUS,
) -> None:
    """Add a note (with an optional reply from the other party)."""
    dash = _build_dashboard()
    dash.notes.set_author(author)
    _report(dash.notes.add(text, reply), Notice.NOTE_ADDED)


@notes_app.command("rm")  # type: ignore[misc]
def notes_remove(note_id: Annotated[str, typer.Argument(help="Note id.")]) -> None:
    """Delete a note by id (unknown ids are ignored)."""
    dash = _build_dashboard()
    dash.notes.remove(note_id)
    _notice(Notice.NOTE_DELETED)


@notes_app.command("clear")  # type: ignore[misc]
def notes_clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation.")] = False,
) -> None:
    """Delete every note."""
    if not yes and not typer.confirm("Clear all notes?", default=False):
        raise typer.Exit(code=0)
    dash = _build_dashboard()
    dash.notes.clear_all()
    _notice(Notice.NOTES_CLEARED)


# --------------------------------------------------------------------------- #
# Playlist
# --------------------------------------------------------------------------- #


@playlist_app.command("show")  # type: ignore[misc]
def playlist_show() -> None:
    """Show the saved playlist id and its embed URL."""
    dash = _build_dashboard()
    playlist_id = dash.playlist.load()
    console.print(f"{escape(playlist_id)}\n[dim]{escape(embed_url(playlist_id))}[/dim]")


@playlist_app.command("set")  # type: ignore[misc]
def playlist_set(
    value: Annotated[str, typer.Argument(help="Playlist id or URL with list=.")] = "",
) -> None:
    """Save a playlist by id or URL."""
    dash = _build_dashboard()
    result = dash.playlist.save(value)
    if _report(result, Notice.PLAYLIST_SAVED):
        console.print(f"[dim]{escape(embed_url(result.unwrap()))}[/dim]")


@playlist_app.command("reset")  # type: ignore[misc]
def playlist_reset() -> None:
    """Restore the default playlist."""
    dash = _build_dashboard()
    dash.playlist.reset()
    _notice(Notice.PLAYLIST_RESET)


def main() -> None:
    """Console-script entry point."""
    load_settings()
    app()


if __name__ == "__main__":
    main()
