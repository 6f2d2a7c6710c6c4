from __future__ import annotations

from .core.config import AccountsQuery, DataSlice
from .core.models import AccountRecord, DecodedEntry, Report
from .decoding.registry import add_decoder, get_decoder, make_registry
from .orchestration.orchestrator import fetch_accounts

__all__ = [
    "AccountsQuery",
    "DataSlice",
    "AccountRecord",
    "DecodedEntry",
    "Report",
    "add_decoder",
    "get_decoder",
    "make_registry",
    "fetch_accounts",
]
