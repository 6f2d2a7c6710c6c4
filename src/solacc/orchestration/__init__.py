"""Orchestration of one program-accounts fetch.

This package provides:
- prepare_fetch: pre-network validation and request building
- run_fetch_accounts: pure use case over an injected provider
- fetch_accounts: wrapper that wires the concrete RPC client
"""

from solacc.orchestration.orchestrator import (
    PreparedFetch,
    fetch_accounts,
    prepare_fetch,
    run_fetch_accounts,
)

__all__ = [
    "PreparedFetch",
    "fetch_accounts",
    "prepare_fetch",
    "run_fetch_accounts",
]
