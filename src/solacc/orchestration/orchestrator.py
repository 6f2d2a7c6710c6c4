"""Fetch orchestrator: query → request → RPC → pipeline.

This module provides two layers:

1) `run_fetch_accounts(...)`:
   - Pure application-layer use case.
   - Depends ONLY on `IProgramAccountsProvider` and an optional decoder.
   - Does NOT instantiate or close the RPC client.

2) `fetch_accounts(...)`:
   - Validates the query (program address, parser name, filters) before any
     network I/O, wires the concrete `RPC` client, and closes it on every
     exit path.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from solacc.clients.filters import parse_pubkey
from solacc.clients.rpc import RPC, ProgramAccountsRequest, build_program_accounts_request
from solacc.core.config import AccountsQuery
from solacc.core.interfaces import IAccountDecoder, IProgramAccountsProvider
from solacc.core.use_cases.fetch_accounts import ProcessOutput, process_accounts
from solacc.decoding.registry import DecoderRegistry, get_decoder


@dataclass(frozen=True)
class PreparedFetch:
    """Everything resolved from a query before the network is touched."""

    request: ProgramAccountsRequest
    decoder: IAccountDecoder | None


def prepare_fetch(query: AccountsQuery, registry: DecoderRegistry | None = None) -> PreparedFetch:
    """Validate `query` and build its request; raises `InvalidArguments` subclasses."""
    parse_pubkey(query.program)
    decoder = get_decoder(query.parser, registry)
    request = build_program_accounts_request(query)
    return PreparedFetch(request=request, decoder=decoder)


def run_fetch_accounts(
    *,
    prepared: PreparedFetch,
    provider: IProgramAccountsProvider,
    console: Console,
) -> ProcessOutput:
    """Issue the single RPC call and run the result pipeline on its response."""
    request = prepared.request
    accounts = provider.get_program_accounts(request.program, request.config())
    return process_accounts(
        program=request.program,
        accounts=accounts,
        decoder=prepared.decoder,
        console=console,
    )


def fetch_accounts(
    query: AccountsQuery,
    *,
    console: Console,
    registry: DecoderRegistry | None = None,
) -> ProcessOutput:
    """Convenience wrapper wiring a concrete `RPC` client for CLI usage."""
    prepared = prepare_fetch(query, registry)
    with RPC(query.rpc_url, timeout_s=query.timeout_s) as rpc:
        return run_fetch_accounts(prepared=prepared, provider=rpc, console=console)
