"""Address Lookup Table account decoder.

Layout parsing is delegated to the `solders` binding of the on-chain
`AddressLookupTable`; any layout violation (short header, uninitialized
state, trailing partial address) surfaces as `DecoderError`.
"""

from __future__ import annotations

from typing import Any

from solders.address_lookup_table_account import AddressLookupTable

from solacc.core.errors import DecoderError


def parse_lookup_table(data: bytes) -> AddressLookupTable:
    """Deserialize an Address Lookup Table account; raise `DecoderError` on bad layout."""
    try:
        return AddressLookupTable.deserialize(data)
    except ValueError as e:
        raise DecoderError(f"invalid lookup table account: {e}") from e


class AltDecoder:
    """Render an Address Lookup Table as its ordered list of base58 addresses."""

    name = "alt"

    def decode(self, data: bytes) -> dict[str, Any]:
        table = parse_lookup_table(data)
        addresses = [str(pk) for pk in table.addresses]
        return {
            "type": "address_lookup_table",
            "addresses": addresses,
            "num_addresses": len(addresses),
        }
