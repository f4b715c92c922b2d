"""Preparing contract bytecode for deployment."""

from __future__ import annotations

import binascii
from typing import Mapping, Union

from icweb3.contract.errors import DeployAbiError
from icweb3.contract.tokens import Address

__all__ = ["link_bytecode"]

_PLACEHOLDER_WIDTH = 38

AddressLike = Union[Address, bytes, bytearray, memoryview]


def _address_hex(address: AddressLike) -> str:
    data = bytes(address)
    if len(data) != 20:
        raise ValueError(f"library address must be 20 bytes, got {len(data)}")
    return data.hex()


def link_bytecode(code: str, linker: Mapping[str, AddressLike]) -> bytes:
    """Link library addresses into hex bytecode and decode it.

    Each library ``name`` in ``linker`` replaces the first placeholder
    ``__<name>`` padded with ``_`` to 40 characters by the library's address.
    Quotes and ``0x`` markers left by build tools are stripped before the hex
    is decoded. Raises DeployAbiError for an over-long library name or for
    bytecode that is not valid hex.
    """
    code_hex = str(code)
    for name, address in linker.items():
        if len(name) > _PLACEHOLDER_WIDTH:
            raise DeployAbiError("The library name should be under 39 characters.")
        placeholder = "__" + name.ljust(_PLACEHOLDER_WIDTH, "_")
        code_hex = code_hex.replace(placeholder, _address_hex(address), 1)

    code_hex = code_hex.replace('"', "").replace("0x", "")
    try:
        return binascii.unhexlify(code_hex)
    except (binascii.Error, ValueError) as exc:
        raise DeployAbiError(f"hex decode error: {exc}") from exc