"""Decoder registry keyed by the `--parser` name.

This module exposes:
- `make_registry()` → DecoderRegistry prefilled with the built-in decoders
- `add_decoder(registry, decoder)` → register one decoder under its name
- `get_decoder(name, registry)` → resolve a `--parser` value

Adding a layout only requires a new decoder class and one `add_decoder` call
in `make_registry`.
"""

from __future__ import annotations

from solacc.core.errors import UnknownDecoder
from solacc.core.interfaces import IAccountDecoder
from solacc.decoding.alt import AltDecoder

DecoderRegistry = dict[str, IAccountDecoder]


def make_registry() -> DecoderRegistry:
    """Build the default registry (`alt` only)."""
    reg: DecoderRegistry = {}
    add_decoder(reg, AltDecoder())
    return reg


def add_decoder(registry: DecoderRegistry, decoder: IAccountDecoder) -> None:
    registry[decoder.name] = decoder


def get_decoder(name: str | None, registry: DecoderRegistry | None = None) -> IAccountDecoder | None:
    """Return the decoder for `name`, None when no parser was asked for.

    Raises `UnknownDecoder` for any name not in the registry, including "".
    """
    if name is None:
        return None
    reg = make_registry() if registry is None else registry
    try:
        return reg[name]
    except KeyError:
        raise UnknownDecoder(name) from None
