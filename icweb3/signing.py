"""Signing utilities: Keccak-256 hashing and signature components."""

from __future__ import annotations

from dataclasses import dataclass

from Crypto.Hash import keccak

__all__ = ["SigningError", "Signature", "keccak256", "hash_message"]


class SigningError(Exception):
    """The message to sign is invalid."""

    MESSAGE = "Message has to be a non-zero 32-bytes slice."

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SigningError)

    def __hash__(self) -> int:
        return hash(SigningError)


@dataclass(frozen=True)
class Signature:
    """Components of a secp256k1 signature."""

    v: int
    r: bytes
    s: bytes

    def __post_init__(self) -> None:
        if len(self.r) != 32 or len(self.s) != 32:
            raise ValueError("r and s must be 32 bytes each")
        if self.v < 0:
            raise ValueError("v must not be negative")


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def keccak256(data: bytes | bytearray | memoryview | str) -> bytes:
    """Return the Keccak-256 digest of ``data``."""
    hasher = keccak.new(digest_bits=256)
    hasher.update(_as_bytes(data))
    return hasher.digest()


def hash_message(message: bytes | bytearray | memoryview | str) -> bytes:
    """Hash a message according to EIP-191 (personal message envelope)."""
    payload = _as_bytes(message)
    prefix = f"\x19Ethereum Signed Message:\n{len(payload)}".encode("utf-8")
    return keccak256(prefix + payload)