"""Core data models, configuration and errors.

This package provides:
- Data models (AccountRecord, DecodedEntry, Report, filters)
- Configuration classes (AccountsQuery, DataSlice)
- The error hierarchy shared by every layer
"""

from solacc.core.config import AccountsQuery, DataSlice
from solacc.core.errors import (
    BadAddress,
    BadFilterSyntax,
    BadHex,
    DecoderError,
    InvalidArguments,
    RpcError,
    SolAccError,
    UnknownDecoder,
)
from solacc.core.models import AccountRecord, DataSizeFilter, DecodedEntry, MemcmpFilter, Report

__all__ = [
    "AccountsQuery",
    "DataSlice",
    "AccountRecord",
    "DataSizeFilter",
    "DecodedEntry",
    "MemcmpFilter",
    "Report",
    "SolAccError",
    "InvalidArguments",
    "UnknownDecoder",
    "BadFilterSyntax",
    "BadHex",
    "BadAddress",
    "RpcError",
    "DecoderError",
]
