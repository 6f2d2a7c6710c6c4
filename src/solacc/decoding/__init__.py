"""Account decoding.

This package provides:
- Payload codecs (RPC `data` field → bytes, bytes → raw view)
- The decoder registry resolved from `--parser`
- Built-in decoders (Address Lookup Table)
"""

from solacc.decoding.alt import AltDecoder, parse_lookup_table
from solacc.decoding.registry import DecoderRegistry, add_decoder, get_decoder, make_registry
from solacc.decoding.utils import decode_account_data, raw_view

__all__ = [
    "AltDecoder",
    "parse_lookup_table",
    "DecoderRegistry",
    "add_decoder",
    "get_decoder",
    "make_registry",
    "decode_account_data",
    "raw_view",
]
