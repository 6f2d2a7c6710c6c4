from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from solacc.core.models import AccountRecord


# ---------------------------------------------------------------------------
# IProgramAccountsProvider
# ---------------------------------------------------------------------------

@runtime_checkable
class IProgramAccountsProvider(Protocol):
    """
    Abstract provider of program accounts.

    Domain expectations:
    - It returns AccountRecord objects in the order the node produced them.
    - Payloads are left encoded; the pipeline decodes them.
    - It performs exactly one upstream call and never retries.
    """

    def get_program_accounts(self, program: str, config: dict[str, Any]) -> list[AccountRecord]:
        """
        Return every account owned by `program` matching `config`.

        Implementations:
        - JSON-RPC over HTTP (current `RPC` class)
        - In-memory provider for testing
        """
        ...


# ---------------------------------------------------------------------------
# IAccountDecoder
# ---------------------------------------------------------------------------

@runtime_checkable
class IAccountDecoder(Protocol):
    """
    Decoder for one known account layout.

    Domain expectations:
    - `decode` is pure: raw payload bytes in, JSON-ready dict out.
    - Any layout violation raises `DecoderError`; the pipeline skips that
      account and keeps going.
    """

    name: str

    def decode(self, data: bytes) -> dict[str, Any]:
        ...
