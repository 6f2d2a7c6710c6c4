"""Compile command-line filter texts into RPC filters.

- `parse_filter("10:0xdead")` → memcmp on two raw bytes at offset 10
- `parse_filter("0:<base58>")` → memcmp on the 32-byte address at offset 0
- `parse_data_slice("0:8")` → `DataSlice(offset=0, length=8)`
- `compile_filters(texts, size)` → user-ordered memcmp list, size filter last
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from solders.pubkey import Pubkey

from solacc.core.config import DataSlice
from solacc.core.errors import BadAddress, BadFilterSyntax, BadHex, InvalidArguments
from solacc.core.models import DataSizeFilter, MemcmpFilter, RpcFilter

_DIGITS = re.compile(r"[0-9]+")
_HEX = re.compile(r"[0-9a-fA-F]*")


def _split_pair(text: str) -> tuple[str, str] | None:
    parts = text.split(":")
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def _parse_uint(text: str) -> int | None:
    if not _DIGITS.fullmatch(text):
        return None
    return int(text)


def parse_pubkey(text: str) -> Pubkey:
    """Parse a base58 address; raise `BadAddress` if it is not 32 bytes of base58."""
    try:
        return Pubkey.from_string(text)
    except ValueError as e:
        raise BadAddress(f"Invalid address {text!r}: {e}") from e


def parse_pattern(value: str) -> bytes:
    """Decode a memcmp pattern: `0x`-prefixed hex, otherwise a base58 address."""
    if value.startswith("0x"):
        digits = value[2:]
        if not digits:
            raise BadHex("Hex pattern must contain at least one byte")
        if not _HEX.fullmatch(digits) or len(digits) % 2:
            raise BadHex(f"Invalid hex pattern {value!r}")
        return bytes.fromhex(digits)
    return bytes(parse_pubkey(value))


def parse_filter(text: str) -> MemcmpFilter:
    """Compile one `offset:value` text into a memcmp filter."""
    pair = _split_pair(text)
    if pair is None:
        raise BadFilterSyntax(f"Filter must be offset:data, got {text!r}")
    offset = _parse_uint(pair[0])
    if offset is None:
        raise BadFilterSyntax(f"Filter offset must be a non-negative integer, got {pair[0]!r}")
    return MemcmpFilter(offset=offset, pattern=parse_pattern(pair[1]))


def parse_data_slice(text: str) -> DataSlice:
    """Parse an `offset:length` data range."""
    pair = _split_pair(text)
    if pair is None:
        raise InvalidArguments(f"Data range must be offset:size, got {text!r}")
    offset, length = _parse_uint(pair[0]), _parse_uint(pair[1])
    if offset is None or length is None:
        raise InvalidArguments(f"Data range offset and size must be non-negative integers, got {text!r}")
    return DataSlice(offset=offset, length=length)


def compile_filters(texts: Iterable[str], size: int | None = None) -> list[RpcFilter]:
    """Compile every filter text in order and append the size filter, if any."""
    out: list[RpcFilter] = [parse_filter(t) for t in texts]
    if size is not None:
        out.append(DataSizeFilter(size))
    return out
