import io
import struct
from collections.abc import Callable
from unittest.mock import MagicMock

import pytest
from rich.console import Console
from solders.pubkey import Pubkey

PROGRAM = "AddressLookupTab1e1111111111111111111111111"


@pytest.fixture
def program() -> str:
    return PROGRAM


@pytest.fixture
def pubkeys() -> list[Pubkey]:
    return [Pubkey.from_bytes(bytes([i]) * 32) for i in range(1, 6)]


@pytest.fixture
def alt_bytes() -> Callable[..., bytes]:
    """Serialize an Address Lookup Table account like the on-chain program."""

    def _build(addresses: list[Pubkey], authority: Pubkey | None = None, state: int = 1) -> bytes:
        head = struct.pack("<IQQBB", state, 2**64 - 1, 42, 0, 0 if authority is None else 1)
        head += bytes(authority) if authority is not None else b"\x00" * 32
        head += b"\x00\x00"
        return head + b"".join(bytes(a) for a in addresses)

    return _build


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), soft_wrap=True)


@pytest.fixture
def mock_rpc():
    rpc = MagicMock()
    rpc.get_program_accounts = MagicMock(return_value=[])
    rpc.__enter__ = MagicMock(return_value=rpc)
    rpc.__exit__ = MagicMock(return_value=None)
    return rpc
