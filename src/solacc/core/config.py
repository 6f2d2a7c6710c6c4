from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass, field

import httpx

from solacc.constants import DEFAULT_RPC_URL, DEFAULT_TIMEOUT_S
from solacc.core.errors import InvalidArguments


_HOSTNAME = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9._-]*[A-Za-z0-9])?")


def _valid_host(host: str) -> bool:
    if _HOSTNAME.fullmatch(host):
        return True
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def check_rpc_url(url: str) -> httpx.URL:
    """Parse an RPC endpoint; only absolute http(s) URLs with a host are accepted."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidArguments(f"Invalid RPC URL {url!r}: {e}") from e
    if parsed.scheme not in ("http", "https") or not _valid_host(parsed.raw_host.decode("ascii", "replace")):
        raise InvalidArguments(f"Invalid RPC URL {url!r}: expected http(s)://host")
    return parsed


@dataclass(frozen=True)
class DataSlice:
    """Server-side `(offset, length)` window applied to every account payload."""

    offset: int
    length: int

    def __post_init__(self) -> None:
        if self.offset < 0 or self.length < 0:
            raise InvalidArguments("Data range offset and size must be non-negative")

    def to_rpc(self) -> dict[str, int]:
        return {"offset": self.offset, "length": self.length}


@dataclass(frozen=True)
class AccountsQuery:
    """Validated description of one `accs` invocation."""

    program: str
    rpc_url: str = DEFAULT_RPC_URL
    parser: str | None = None
    data_slice: DataSlice | None = None
    filters: tuple[str, ...] = field(default_factory=tuple)  # raw "offset:value" texts, user order
    size: int | None = None
    output: str | None = None
    timeout_s: int = DEFAULT_TIMEOUT_S

    def __post_init__(self) -> None:
        if self.parser is not None and self.data_slice is not None:
            raise InvalidArguments("--parser cannot be used with --data")
        if self.size is not None and self.size < 0:
            raise InvalidArguments("--size must be non-negative")
        if self.timeout_s <= 0:
            raise InvalidArguments("--timeout must be positive")
        check_rpc_url(self.rpc_url)
