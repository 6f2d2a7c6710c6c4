"""Payload codecs: RPC `data` field → bytes, and bytes → raw data view."""

from __future__ import annotations

import base64
import binascii
from typing import Any

import base58
import zstandard

from solacc.core.models import DataView


def _b64(blob: str) -> bytes:
    return base64.b64decode(blob, validate=True)


def _zstd(blob: str) -> bytes:
    # frames written by the node carry no content size, so stream-decompress
    dobj = zstandard.ZstdDecompressor().decompressobj()
    out = dobj.decompress(_b64(blob))
    if not dobj.eof:
        raise ValueError("truncated zstd frame")
    return out


def _b58(blob: str) -> bytes:
    return base58.b58decode(blob)


_CODECS = {
    "base58": _b58,
    "base64": _b64,
    "base64+zstd": _zstd,
}


def decode_account_data(data: Any) -> bytes | None:
    """Return the raw payload bytes of an RPC `data` field, or None if unusable.

    Accepted shapes: `[blob, encoding]` for base64 / base64+zstd / base58, and a
    bare string (legacy base58). jsonParsed objects and corrupt blobs give None.
    """
    if isinstance(data, str):
        blob, encoding = data, "base58"
    elif isinstance(data, (list, tuple)) and len(data) == 2:
        blob, encoding = data
    else:
        return None

    if not isinstance(blob, str) or not isinstance(encoding, str):
        return None
    codec = _CODECS.get(encoding)
    if codec is None:
        return None
    try:
        return codec(blob)
    except (binascii.Error, ValueError, zstandard.ZstdError):
        return None


def raw_view(data: bytes) -> DataView:
    """Raw data view: lowercase hex, standard base64 and byte length."""
    return {
        "type": "raw",
        "hex": data.hex(),
        "base64": base64.b64encode(data).decode("ascii"),
        "size": len(data),
    }
