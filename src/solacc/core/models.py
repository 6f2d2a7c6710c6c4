"""Core data models for program account fetching.

This module defines:
- `MemcmpFilter` / `DataSizeFilter`: compiled server-side filters.
- `AccountRecord`: one keyed account as returned by `getProgramAccounts`.
- `DecodedEntry`: one account in the output report.
- `Report`: the final JSON document.

Design notes
------------
- `AccountRecord.data` keeps the RPC `data` field untouched; turning it into
  bytes is the job of `solacc.decoding.utils.decode_account_data`.
- `Report.count` is derived from `accounts`, so the two can never disagree.
- `to_dict` methods emit keys in output order.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any, Union

# Shape of a `data` view in the report: {"type": "raw", ...} or decoder-defined.
DataView = dict[str, Any]


# === Filters ===


@dataclass(frozen=True)
class MemcmpFilter:
    """Keep accounts whose payload equals `pattern` at `offset`."""

    offset: int
    pattern: bytes

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("memcmp offset must be non-negative")
        if not self.pattern:
            raise ValueError("memcmp pattern must not be empty")

    def to_rpc(self) -> dict[str, Any]:
        return {
            "memcmp": {
                "offset": self.offset,
                "bytes": base64.b64encode(self.pattern).decode("ascii"),
                "encoding": "base64",
            }
        }


@dataclass(frozen=True)
class DataSizeFilter:
    """Keep accounts whose payload is exactly `size` bytes."""

    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("dataSize must be non-negative")

    def to_rpc(self) -> dict[str, Any]:
        return {"dataSize": self.size}


RpcFilter = Union[MemcmpFilter, DataSizeFilter]


# === RPC record ===


@dataclass(slots=True, frozen=True)
class AccountRecord:
    """Keyed account as fetched from RPC, payload still encoded."""

    pubkey: str  # base58
    lamports: int
    owner: str  # base58
    data: Any  # [blob, encoding] | legacy base58 str | jsonParsed object


# === Report ===


@dataclass(slots=True)
class DecodedEntry:
    pubkey: str
    lamports: int
    owner: str
    data: DataView

    def to_dict(self) -> dict[str, Any]:
        return {
            "pubkey": self.pubkey,
            "lamports": self.lamports,
            "owner": self.owner,
            "data": self.data,
        }


@dataclass(slots=True)
class Report:
    program: str
    accounts: list[DecodedEntry] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.accounts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "program": self.program,
            "count": self.count,
            "accounts": [a.to_dict() for a in self.accounts],
        }
