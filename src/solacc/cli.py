import click
from rich.console import Console

from solacc.constants import DEFAULT_RPC_URL, DEFAULT_TIMEOUT_S, RPC_URL_ENV
from solacc.core.config import AccountsQuery
from solacc.core.errors import InvalidArguments, RpcError
from solacc.clients.filters import parse_data_slice
from solacc.orchestration.orchestrator import fetch_accounts
from solacc.storage.report import write_report

console = Console(stderr=True, soft_wrap=True)


@click.group()
@click.version_option(package_name="sol-acc")
def cli() -> None:
    """sol-acc — Solana account fetching tool."""


@cli.command("accs")
@click.argument("program")
@click.option(
    "-u",
    "--url",
    envvar=RPC_URL_ENV,
    default=DEFAULT_RPC_URL,
    show_default=True,
    help=f"RPC node URL (env: {RPC_URL_ENV})",
)
@click.option("-t", "--parser", default=None, help="Account type parser (alt); conflicts with --data")
@click.option("-d", "--data", default=None, metavar="OFFSET:LENGTH", help="Server-side data slice; conflicts with --parser")
@click.option(
    "-f",
    "--filter",
    "filters",
    multiple=True,
    metavar="OFFSET:VALUE",
    help="Match bytes at offset (0x-hex or base58 pubkey); repeat to AND",
)
@click.option("-s", "--size", type=click.IntRange(min=0), default=None, help="Exact account data size")
@click.option("-o", "--output", default=None, help="Output JSON file (omit for stdout)")
@click.option(
    "--timeout",
    "timeout_s",
    type=click.IntRange(min=1),
    default=DEFAULT_TIMEOUT_S,
    show_default=True,
    help="RPC client timeout in seconds",
)
def accs_cmd(
    program: str,
    url: str,
    parser: str | None,
    data: str | None,
    filters: tuple[str, ...],
    size: int | None,
    output: str | None,
    timeout_s: int,
) -> None:
    """Fetch all accounts owned by PROGRAM and print them as JSON."""
    try:
        query = AccountsQuery(
            program=program,
            rpc_url=url,
            parser=parser,
            data_slice=parse_data_slice(data) if data is not None else None,
            filters=filters,
            size=size,
            output=output,
            timeout_s=timeout_s,
        )
        result = fetch_accounts(query, console=console)
    except InvalidArguments as e:
        raise click.UsageError(str(e)) from e
    except RpcError as e:
        raise click.ClickException(str(e)) from e

    try:
        write_report(result.report, query.output, console=console)
    except OSError as e:
        raise click.ClickException(f"Cannot write {query.output}: {e}") from e

    if result.stats.skipped:
        console.print(f"[yellow]skipped[/]={result.stats.skipped} (no usable payload)", style="dim")
    if result.stats.failed:
        console.print(f"[red]failed[/]={result.stats.failed} (decoder errors)", style="dim")
