#!/usr/bin/env python3
"""
Hiking Survey - command line entry point.

Record opinions, see how they score, and view the summary.
"""

import asyncio
import sys
from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from errors import Cancelled, NotFound, PersistFailed, ScoringFailed
from models import Sentiment
from reporting import summarize
from repositories import configure_backend
from store import ResponseStore

console = Console()

SENTIMENT_STYLES = {
    Sentiment.POSITIVE: "green",
    Sentiment.MODERATE: "yellow",
    Sentiment.NEGATIVE: "red",
}


def show_responses(store: ResponseStore, sentiment: Optional[Sentiment] = None):
    """Print responses as a table, newest first."""
    responses = store.filtered(sentiment)
    if not responses:
        console.print("[dim]No responses yet.[/dim]")
        return

    title = "Opinions on Hiking" if sentiment is None else f"Opinions on Hiking ({sentiment.label})"
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Response")
    table.add_column("Score", justify="right")
    table.add_column("Confidence", justify="right")
    table.add_column("Sentiment")

    for r in responses:
        style = SENTIMENT_STYLES[r.sentiment]
        table.add_row(
            str(r.id)[:8],
            r.text,
            f"{r.score:+.2f}",
            f"{r.confidence:.0%}",
            f"[{style}]{r.sentiment.label}[/{style}]",
        )

    console.print(table)


def show_summary(store: ResponseStore):
    """Print total, average and distribution."""
    summary = summarize(store.responses)

    console.print(Panel.fit(
        f"[bold]Total responses:[/bold] {summary.total}\n"
        f"[bold]Average sentiment:[/bold] {summary.average_score:+.2f} ({summary.overall.label})",
        title="Survey Summary"
    ))

    table = Table(box=box.SIMPLE)
    table.add_column("Sentiment")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")
    for share in summary.shares:
        style = SENTIMENT_STYLES[share.sentiment]
        table.add_row(f"[{style}]{share.sentiment.label}[/{style}]", str(share.count), f"{share.percentage:.1f}%")
    console.print(table)


def resolve_id(store: ResponseStore, prefix: str) -> str:
    """Expand a short id (as shown in the table) to a full one."""
    matches = [str(r.id) for r in store.responses if str(r.id).startswith(prefix)]
    if len(matches) == 1:
        return matches[0]
    return prefix


async def run_command(args, store: Optional[ResponseStore] = None) -> int:
    if store is None:
        store = ResponseStore()
    await store.load_all()

    if args.command == "list":
        sentiment = Sentiment(args.filter) if args.filter else None
        show_responses(store, sentiment)

    elif args.command == "add":
        response = await store.add(args.text)
        console.print(f"[green]Added[/green] {response.id} ({response.sentiment.label}, {response.score:+.2f})")

    elif args.command == "edit":
        response = await store.edit(resolve_id(store, args.id), args.text)
        console.print(f"[green]Updated[/green] {response.id} ({response.sentiment.label}, {response.score:+.2f})")

    elif args.command == "delete":
        target = store.get(resolve_id(store, args.id))
        if target is None:
            console.print(f"[dim]No response matches '{args.id}', nothing deleted[/dim]")
        else:
            await store.delete(target.id)
            console.print(f"[green]Deleted[/green] {target.id}")

    elif args.command == "summary":
        show_summary(store)

    return 0


def cli():
    """Main CLI entry point"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Record hiking opinions and analyze their sentiment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hiking-survey list                       # All responses, newest first
  hiking-survey list --filter negative     # Only negative responses
  hiking-survey add "Loved the ridge walk"
  hiking-survey edit 1a2b3c4d "It was fine"
  hiking-survey delete 1a2b3c4d
  hiking-survey summary
        """
    )
    parser.add_argument("--data-dir", type=Path, help="Directory holding responses.json")
    parser.add_argument("--backend", choices=["json", "memory"], help="Storage backend")

    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List responses")
    list_parser.add_argument("--filter", choices=[s.value for s in Sentiment])

    add_parser = sub.add_parser("add", help="Add a response")
    add_parser.add_argument("text")

    edit_parser = sub.add_parser("edit", help="Edit a response and re-score it")
    edit_parser.add_argument("id")
    edit_parser.add_argument("text")

    delete_parser = sub.add_parser("delete", help="Delete a response")
    delete_parser.add_argument("id")

    sub.add_parser("summary", help="Show aggregate statistics")

    args = parser.parse_args()

    if args.backend == "memory":
        configure_backend("memory")
    elif args.backend == "json" or args.data_dir:
        options = {"data_dir": args.data_dir} if args.data_dir else {}
        configure_backend("json", **options)

    try:
        return asyncio.run(run_command(args))
    except NotFound as e:
        console.print(f"[red]{e}[/red]")
    except ScoringFailed as e:
        console.print(f"[red]Could not score text: {e}[/red]")
    except PersistFailed as e:
        console.print(f"[red]Storage error: {e}[/red]")
    except Cancelled:
        console.print("[dim]Cancelled[/dim]")
    return 1


if __name__ == "__main__":
    sys.exit(cli())
