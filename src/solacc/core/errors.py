"""Error kinds raised by the fetcher.

Argument errors (`InvalidArguments` and its subclasses) are raised before any
network I/O. `DecoderError` is scoped to one account and is absorbed by the
result pipeline; everything else aborts the run.
"""

from __future__ import annotations


class SolAccError(Exception):
    """Base class for all fetcher errors."""


class InvalidArguments(SolAccError, ValueError):
    """Command-line input that cannot describe a valid request."""


class UnknownDecoder(InvalidArguments):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown parser: {name}")
        self.name = name


class BadFilterSyntax(InvalidArguments):
    pass


class BadHex(InvalidArguments):
    pass


class BadAddress(InvalidArguments):
    pass


class RpcError(SolAccError, RuntimeError):
    """Transport, HTTP or JSON-RPC level failure of the upstream node."""


class DecoderError(SolAccError, ValueError):
    """One account payload could not be decoded by the selected decoder."""
