"""Threshold-ECDSA key settings and secp256k1 address helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from icweb3.signing import keccak256

__all__ = [
    "ECDSA_SIGN_CYCLES",
    "KeyInfo",
    "pubkey_to_address",
    "recover_address",
]

ECDSA_SIGN_CYCLES = 10_000_000_000

_P = 2**256 - 2**32 - 977
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_G = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)

_Point = Optional[Tuple[int, int]]


@dataclass
class KeyInfo:
    """Which threshold key to sign with, and how many cycles to pay."""

    derivation_path: list[bytes] = field(default_factory=list)
    key_name: str = ""
    ecdsa_sign_cycles: int | None = None

    def sign_cycles(self) -> int:
        """Cycles to attach to a signing call."""
        if self.ecdsa_sign_cycles is None:
            return ECDSA_SIGN_CYCLES
        return self.ecdsa_sign_cycles


def _add(a: _Point, b: _Point) -> _Point:
    if a is None:
        return b
    if b is None:
        return a
    x1, y1 = a
    x2, y2 = b
    if x1 == x2:
        if (y1 + y2) % _P == 0:
            return None
        slope = 3 * x1 * x1 * pow(2 * y1, -1, _P) % _P
    else:
        slope = (y2 - y1) * pow(x2 - x1, -1, _P) % _P
    x3 = (slope * slope - x1 - x2) % _P
    y3 = (slope * (x1 - x3) - y1) % _P
    return (x3, y3)


def _mul(scalar: int, point: _Point) -> _Point:
    result: _Point = None
    addend = point
    while scalar:
        if scalar & 1:
            result = _add(result, addend)
        addend = _add(addend, addend)
        scalar >>= 1
    return result


def _lift_x(x: int, odd: int) -> _Point:
    """Return the curve point with abscissa ``x`` and the given y parity."""
    if x >= _P:
        return None
    rhs = (pow(x, 3, _P) + 7) % _P
    y = pow(rhs, (_P + 1) // 4, _P)
    if y * y % _P != rhs:
        return None
    if (y & 1) != odd:
        y = _P - y
    return (x, y)


def _address_of(point: Tuple[int, int]) -> bytes:
    x, y = point
    return keccak256(x.to_bytes(32, "big") + y.to_bytes(32, "big"))[12:]


def pubkey_to_address(pubkey: bytes) -> bytes:
    """Return the 20-byte Ethereum address of a compressed secp256k1 public key."""
    data = bytes(pubkey)
    point: _Point = None
    if len(data) == 33 and data[0] in (2, 3):
        point = _lift_x(int.from_bytes(data[1:], "big"), data[0] & 1)
    if point is None:
        raise ValueError("uncompress public key failed: ")
    return _address_of(point)


def recover_address(message: bytes, signature: bytes, rec_id: int) -> str:
    """Recover the signer's address as lowercase hex, or ``""`` if recovery fails.

    ``message`` is a 32-byte hash, ``signature`` the 64 bytes r || s, and
    ``rec_id`` a recovery id below 4.
    """
    message = bytes(message)
    signature = bytes(signature)
    if len(message) != 32:
        raise ValueError("message must be 32 bytes")
    if len(signature) != 64:
        raise ValueError("signature must be 64 bytes")
    if isinstance(rec_id, bool) or not isinstance(rec_id, int) or not 0 <= rec_id < 4:
        raise ValueError("recovery id must be 0, 1, 2 or 3")

    e = int.from_bytes(message, "big") % _N
    r = int.from_bytes(signature[:32], "big") % _N
    s = int.from_bytes(signature[32:], "big") % _N
    if r == 0 or s == 0:
        return ""

    rx = r + _N if rec_id & 2 else r
    big_r = _lift_x(rx, rec_id & 1)
    if big_r is None:
        return ""

    r_inv = pow(r, -1, _N)
    u1 = (-e * r_inv) % _N
    u2 = (s * r_inv) % _N
    public = _add(_mul(u1, _G), _mul(u2, big_r))
    if public is None:
        return ""
    return _address_of(public).hex()