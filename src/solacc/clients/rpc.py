"""Lightweight JSON-RPC client for Solana-compatible nodes.

This module provides:
- `ProgramAccountsRequest` / `build_program_accounts_request`: the
  `getProgramAccounts` config assembled from an `AccountsQuery`
- `RPC`: a synchronous client with one generous timeout and no retries

It returns `AccountRecord` records ready for the result pipeline.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx

from solacc.clients.filters import compile_filters, parse_pubkey
from solacc.constants import COMMITMENT, DEFAULT_TIMEOUT_S, ENCODING
from solacc.core.config import AccountsQuery, DataSlice
from solacc.core.errors import RpcError
from solacc.core.models import AccountRecord, RpcFilter


@dataclass(frozen=True)
class ProgramAccountsRequest:
    """One `getProgramAccounts` call, ready to be serialized."""

    program: str
    filters: tuple[RpcFilter, ...] = field(default_factory=tuple)
    data_slice: DataSlice | None = None
    encoding: str = ENCODING
    commitment: str = COMMITMENT

    def config(self) -> dict[str, Any]:
        """Return the config object (second positional param) of the RPC call."""
        cfg: dict[str, Any] = {"encoding": self.encoding, "commitment": self.commitment}
        if self.data_slice is not None:
            cfg["dataSlice"] = self.data_slice.to_rpc()
        if self.filters:
            cfg["filters"] = [f.to_rpc() for f in self.filters]
        return cfg


def build_program_accounts_request(query: AccountsQuery) -> ProgramAccountsRequest:
    """Assemble the request for `query`; filter texts are compiled here."""
    return ProgramAccountsRequest(
        program=query.program,
        filters=tuple(compile_filters(query.filters, query.size)),
        data_slice=query.data_slice,
    )


def _to_account_record(item: dict[str, Any]) -> AccountRecord:
    acc = item["account"]
    return AccountRecord(
        pubkey=str(parse_pubkey(item["pubkey"])),
        lamports=int(acc["lamports"]),
        owner=str(parse_pubkey(acc["owner"])),
        data=acc.get("data"),
    )


class RPC:
    """Minimal synchronous RPC client.

    Parameters
    ----------
    url : str
        RPC endpoint URL.
    timeout_s : int
        Per-operation timeout in seconds (connect/read/write/pool). The read
        limit restarts with every chunk received; it is not a cap on the
        whole request.
    transport : httpx.BaseTransport | None
        Optional transport override (tests use `httpx.MockTransport`).
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_s: int = DEFAULT_TIMEOUT_S,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.url = url
        self.client = httpx.Client(
            timeout=httpx.Timeout(timeout_s),
            transport=transport,
        )
        self._id = 0

    def __enter__(self) -> RPC:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def call(self, method: str, params: Sequence[Any]) -> Any:
        """Issue one JSON-RPC call and return its `result`."""
        self._id += 1
        payload = {"jsonrpc": "2.0", "id": self._id, "method": method, "params": list(params)}
        try:
            r = self.client.post(self.url, json=payload)
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPStatusError as e:
            raise RpcError(f"RPC HTTP {e.response.status_code} from {self.url}") from e
        except httpx.HTTPError as e:
            raise RpcError(f"RPC transport error: {type(e).__name__}: {e}") from e
        except ValueError as e:
            raise RpcError(f"RPC returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise RpcError("RPC returned a non-object response")
        if "error" in data:
            err = data["error"]
            if isinstance(err, dict):
                raise RpcError(f"RPC error: {err.get('code')} {err.get('message')}")
            raise RpcError(f"RPC error: {err}")
        if "result" not in data:
            raise RpcError("RPC response has no result")
        return data["result"]

    def get_program_accounts(self, program: str, config: dict[str, Any]) -> list[AccountRecord]:
        """Fetch every account owned by `program`, in node order."""
        result = self.call("getProgramAccounts", [program, config])
        if isinstance(result, dict) and "value" in result:
            result = result["value"]  # withContext response
        if not isinstance(result, list):
            raise RpcError("getProgramAccounts result is not a list")
        try:
            return [_to_account_record(item) for item in result]
        except (KeyError, TypeError, ValueError) as e:
            raise RpcError(f"Malformed account in getProgramAccounts result: {e}") from e

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.client.close()
