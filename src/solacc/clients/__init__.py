"""RPC client, request builder and filter compiler."""

from solacc.clients.filters import compile_filters, parse_data_slice, parse_filter, parse_pubkey
from solacc.clients.rpc import RPC, ProgramAccountsRequest, build_program_accounts_request

__all__ = [
    "RPC",
    "ProgramAccountsRequest",
    "build_program_accounts_request",
    "compile_filters",
    "parse_data_slice",
    "parse_filter",
    "parse_pubkey",
]
