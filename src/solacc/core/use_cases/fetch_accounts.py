from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape

from solacc.core.errors import DecoderError
from solacc.core.interfaces import IAccountDecoder
from solacc.core.models import AccountRecord, DecodedEntry, Report
from solacc.decoding.utils import decode_account_data, raw_view


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------


@dataclass(kw_only=True)
class ProcessStats:
    """
    Counters for one pass of the result pipeline.

    - fetched: accounts returned by the node
    - processed: accounts emitted in the report
    - skipped: accounts whose payload could not be turned into bytes
    - failed: accounts rejected by the decoder
    """

    fetched: int = 0
    processed: int = 0
    skipped: int = 0
    failed: int = 0


@dataclass(kw_only=True)
class ProcessOutput:
    report: Report
    stats: ProcessStats


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


def process_accounts(
    *,
    program: str,
    accounts: Sequence[AccountRecord],
    decoder: IAccountDecoder | None,
    console: Console,
) -> ProcessOutput:
    """Turn fetched accounts into a report, isolating per-account failures.

    Accounts keep node order. An undecodable payload is skipped silently; a
    decoder failure is reported on `console` and skipped. Nothing here raises
    for a single bad account.
    """
    stats = ProcessStats(fetched=len(accounts))
    report = Report(program=program)
    console.print(f"Fetched {stats.fetched} accounts")

    for acc in accounts:
        data = decode_account_data(acc.data)
        if data is None:
            stats.skipped += 1
            continue

        if decoder is not None:
            try:
                view = decoder.decode(data)
            except DecoderError as e:
                console.print(f"[red]Failed to decode[/] {escape(acc.pubkey)}: {escape(str(e))}")
                stats.failed += 1
                continue
        else:
            view = raw_view(data)

        report.accounts.append(
            DecodedEntry(pubkey=acc.pubkey, lamports=acc.lamports, owner=acc.owner, data=view)
        )
        stats.processed += 1

    console.print(f"Processed: {stats.processed}")
    return ProcessOutput(report=report, stats=stats)
