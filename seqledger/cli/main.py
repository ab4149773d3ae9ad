# seqledger/cli/main.py
"""
CLI for querying a ledger: list and sum actions, browse accounts, flavors,
transactions and usage stats.
"""

import itertools
import json
import logging
from typing import Any, Callable, Iterable, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from seqledger.api import account, action, flavor, stats, transaction
from seqledger.exceptions import APIError, ChainError
from seqledger.http import BaseClient, create_client
from seqledger.query.builder import QueryBuilder

app = typer.Typer(
    name="seqledger",
    help="Query a Sequence ledger from the command line",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def build_client(url: Optional[str], ledger: Optional[str], credential: Optional[str]) -> BaseClient:
    """Resolve connection settings in this order:
    1. --url / --ledger / --credential flags
    2. SEQLEDGER_URL / SEQLEDGER_LEDGER / SEQLEDGER_CREDENTIAL env vars
    3. Default URL (ledger name is required)
    """
    return create_client(url=url, ledger=ledger, credential=credential)


@app.callback()
def main(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(None, "--url", help="Ledger API URL (overrides SEQLEDGER_URL)"),
    ledger: Optional[str] = typer.Option(None, "--ledger", help="Ledger name (overrides SEQLEDGER_LEDGER)"),
    credential: Optional[str] = typer.Option(None, "--credential", help="API credential (overrides SEQLEDGER_CREDENTIAL)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every page request"),
):
    """Query a Sequence ledger."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )
    ctx.obj = {"url": url, "ledger": ledger, "credential": credential}


def _client(ctx: typer.Context) -> BaseClient:
    try:
        return build_client(**ctx.obj)
    except ChainError as e:
        console.print(f"[red]{e}[/]")
        raise typer.Exit(1)


def _configure(builder: QueryBuilder, filter: Optional[str], params: List[str], page_size: Optional[int]) -> None:
    if filter:
        builder.set_filter(filter)
    for p in params:
        builder.add_filter_parameter(p)
    if page_size is not None:
        try:
            builder.set_page_size(page_size)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(2)


def _run(
    ctx: typer.Context,
    builder: QueryBuilder,
    title: str,
    columns: List[str],
    row: Callable[[Any], Iterable[str]],
    limit: int,
    cursor: Optional[str],
) -> None:
    """Fetch items (one page when --cursor is given) and print them as a table."""
    client = _client(ctx)
    try:
        if cursor:
            page = builder.get_page(client, cursor)
            items = list(page.items)
            next_cursor = None if page.last_page else page.cursor
        else:
            items = list(itertools.islice(builder.get_iterable(client), limit))
            next_cursor = None
    except APIError as e:
        console.print(f"[red]API error {e.seq_code}: {e.message}[/]")
        if e.detail:
            console.print(f"  {e.detail}")
        raise typer.Exit(1)
    except ChainError as e:
        console.print(f"[red]Request failed: {e}[/]")
        raise typer.Exit(1)
    finally:
        client.close()

    if not items:
        console.print("[yellow]No results.[/]")
        return

    table = Table(title=title)
    for c in columns:
        table.add_column(c)
    for item in items:
        table.add_row(*row(item))
    console.print(table)

    if next_cursor:
        console.print(f"Next cursor: {next_cursor}")


def _tags(tags: Optional[dict]) -> str:
    return json.dumps(tags, separators=(",", ":")) if tags else ""


FILTER_OPT = typer.Option(None, "--filter", "-f", help="Filter expression, e.g. 'type=$1'")
PARAM_OPT = typer.Option([], "--param", "-p", help="Filter parameter (repeat for $1, $2, ...)")
PAGE_SIZE_OPT = typer.Option(None, "--page-size", help="Items per request")
LIMIT_OPT = typer.Option(50, "--limit", "-n", help="Maximum items to show")
CURSOR_OPT = typer.Option(None, "--cursor", help="Resume from a cursor (fetches a single page)")


@app.command()
def actions(
    ctx: typer.Context,
    filter: Optional[str] = FILTER_OPT,
    param: List[str] = PARAM_OPT,
    page_size: Optional[int] = PAGE_SIZE_OPT,
    limit: int = LIMIT_OPT,
    cursor: Optional[str] = CURSOR_OPT,
):
    """List actions matching a filter."""
    b = action.ListBuilder()
    _configure(b, filter, param, page_size)
    _run(
        ctx, b, "Actions",
        ["ID", "Type", "Amount", "Flavor", "Source", "Destination", "Timestamp"],
        lambda a: (
            a.id, a.type, str(a.amount), a.flavor_id or "—",
            a.source_account_id or "—", a.destination_account_id or "—",
            a.timestamp.isoformat() if a.timestamp else "—",
        ),
        limit, cursor,
    )


@app.command()
def sums(
    ctx: typer.Context,
    group_by: List[str] = typer.Option([], "--group-by", "-g", help="Field to group sums by (repeatable)"),
    filter: Optional[str] = FILTER_OPT,
    param: List[str] = PARAM_OPT,
    page_size: Optional[int] = PAGE_SIZE_OPT,
    limit: int = LIMIT_OPT,
    cursor: Optional[str] = CURSOR_OPT,
):
    """Sum action amounts, grouped by the given fields."""
    b = action.SumBuilder()
    _configure(b, filter, param, page_size)
    for g in group_by:
        b.add_group_by_field(g)
    _run(
        ctx, b, "Action sums",
        ["Group", "Amount"],
        lambda s: (json.dumps(s.fields, separators=(",", ":")) if s.fields else "(all)", str(s.amount)),
        limit, cursor,
    )


@app.command()
def accounts(
    ctx: typer.Context,
    filter: Optional[str] = FILTER_OPT,
    param: List[str] = PARAM_OPT,
    page_size: Optional[int] = PAGE_SIZE_OPT,
    limit: int = LIMIT_OPT,
    cursor: Optional[str] = CURSOR_OPT,
):
    """List accounts."""
    b = account.ListBuilder()
    _configure(b, filter, param, page_size)
    _run(
        ctx, b, "Accounts",
        ["ID", "Keys", "Quorum", "Tags"],
        lambda a: (a.id, ", ".join(a.key_ids), str(a.quorum), _tags(a.tags)),
        limit, cursor,
    )


@app.command()
def flavors(
    ctx: typer.Context,
    filter: Optional[str] = FILTER_OPT,
    param: List[str] = PARAM_OPT,
    page_size: Optional[int] = PAGE_SIZE_OPT,
    limit: int = LIMIT_OPT,
    cursor: Optional[str] = CURSOR_OPT,
):
    """List flavors."""
    b = flavor.ListBuilder()
    _configure(b, filter, param, page_size)
    _run(
        ctx, b, "Flavors",
        ["ID", "Keys", "Quorum", "Tags"],
        lambda f: (f.id, ", ".join(f.key_ids), str(f.quorum), _tags(f.tags)),
        limit, cursor,
    )


@app.command()
def transactions(
    ctx: typer.Context,
    filter: Optional[str] = FILTER_OPT,
    param: List[str] = PARAM_OPT,
    page_size: Optional[int] = PAGE_SIZE_OPT,
    limit: int = LIMIT_OPT,
    cursor: Optional[str] = CURSOR_OPT,
):
    """List transactions."""
    b = transaction.ListBuilder()
    _configure(b, filter, param, page_size)
    _run(
        ctx, b, "Transactions",
        ["ID", "Sequence", "Actions", "Timestamp"],
        lambda t: (t.id, str(t.sequence_number), str(len(t.actions)),
                   t.timestamp.isoformat() if t.timestamp else "—"),
        limit, cursor,
    )


@app.command("stats")
def show_stats(ctx: typer.Context):
    """Show flavor, account and transaction counts."""
    client = _client(ctx)
    try:
        s = stats.get(client)
    except ChainError as e:
        console.print(f"[red]Request failed: {e}[/]")
        raise typer.Exit(1)
    finally:
        client.close()

    table = Table(title="Ledger Stats")
    table.add_column("Flavors")
    table.add_column("Accounts")
    table.add_column("Transactions")
    table.add_row(str(s.flavor_count), str(s.account_count), str(s.tx_count))
    console.print(table)


if __name__ == "__main__":
    app()
