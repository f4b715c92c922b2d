"""ABI tokens and conversions between Python values and tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Sequence, Union

from icweb3.contract.errors import InvalidOutputTypeError

__all__ = [
    "TokenKind",
    "Token",
    "Address",
    "H256",
    "Bytes",
    "BytesArray",
    "IntSpec",
    "FixedBytesSpec",
    "ArraySpec",
    "FixedArraySpec",
    "into_token",
    "signed_token",
    "into_tokens",
    "from_token",
    "from_tokens",
]

_WORD = 1 << 256
_LOW128 = (1 << 128) - 1


class TokenKind(Enum):
    """The kind of an ABI token."""

    ADDRESS = "Address"
    FIXED_BYTES = "FixedBytes"
    BYTES = "Bytes"
    INT = "Int"
    UINT = "Uint"
    BOOL = "Bool"
    STRING = "String"
    FIXED_ARRAY = "FixedArray"
    ARRAY = "Array"
    TUPLE = "Tuple"


def _fixed(data: Any, size: int, name: str) -> bytes:
    data = bytes(data)
    if len(data) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(data)}")
    return data


@dataclass(frozen=True)
class Address:
    """A 20-byte account address."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _fixed(self.data, 20, "address"))

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return f"0x{self.data.hex()}"


@dataclass(frozen=True)
class H256:
    """A 32-byte hash."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _fixed(self.data, 32, "hash"))

    def __bytes__(self) -> bytes:
        return self.data

    def __repr__(self) -> str:
        return f"0x{self.data.hex()}"


@dataclass(frozen=True)
class Bytes:
    """Dynamic ABI ``bytes`` data."""

    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def __bytes__(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class BytesArray:
    """An array of single bytes, encoded as an array of unsigned integers."""

    values: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        values = tuple(self.values)
        for item in values:
            if isinstance(item, bool) or not isinstance(item, int) or not 0 <= item <= 0xFF:
                raise ValueError(f"byte value out of range: {item!r}")
        object.__setattr__(self, "values", values)


@dataclass(frozen=True)
class Token:
    """A single ABI token."""

    kind: TokenKind
    value: Any

    def __post_init__(self) -> None:
        kind, value = self.kind, self.value
        if kind is TokenKind.ADDRESS:
            if not isinstance(value, Address):
                value = Address(value)
        elif kind in (TokenKind.FIXED_BYTES, TokenKind.BYTES):
            value = bytes(value)
        elif kind in (TokenKind.INT, TokenKind.UINT):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < _WORD:
                raise ValueError(f"{kind.value} token needs an integer in [0, 2**256): {value!r}")
        elif kind is TokenKind.BOOL:
            if not isinstance(value, bool):
                raise ValueError(f"Bool token needs a bool: {value!r}")
        elif kind is TokenKind.STRING:
            if not isinstance(value, str):
                raise ValueError(f"String token needs a str: {value!r}")
        else:
            value = tuple(value)
            if not all(isinstance(item, Token) for item in value):
                raise ValueError(f"{kind.value} token needs a sequence of tokens")
        object.__setattr__(self, "value", value)

    def __repr__(self) -> str:
        if self.kind in (TokenKind.FIXED_ARRAY, TokenKind.ARRAY, TokenKind.TUPLE):
            return f"{self.kind.value}({list(self.value)!r})"
        return f"{self.kind.value}({self.value!r})"


@dataclass(frozen=True)
class IntSpec:
    """A machine integer type such as ``u8`` or ``i64`` to decode into."""

    bits: int
    signed: bool = False

    def __post_init__(self) -> None:
        if self.bits not in (8, 16, 32, 64, 128):
            raise ValueError(f"unsupported integer width: {self.bits}")

    @property
    def name(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.bits}"


@dataclass(frozen=True)
class FixedBytesSpec:
    """Fixed-size ``bytesN`` data of the given size."""

    size: int

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("fixed bytes size must be positive")


@dataclass(frozen=True)
class ArraySpec:
    """A dynamic or fixed array whose items decode into ``item``."""

    item: Any


@dataclass(frozen=True)
class FixedArraySpec:
    """A fixed array of exactly ``size`` items decoding into ``item``."""

    item: Any
    size: int

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("fixed array size must be positive")


Target = Union[type, IntSpec, FixedBytesSpec, ArraySpec, FixedArraySpec]


def signed_token(value: int) -> Token:
    """Return an ``Int`` token holding ``value`` in 256-bit two's complement."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {value!r}")
    if not -(1 << 255) <= value < (1 << 255):
        raise ValueError(f"signed value out of range: {value}")
    return Token(TokenKind.INT, value % _WORD)


def into_token(value: Any) -> Token:
    """Convert a Python value into a single token."""
    if isinstance(value, Token):
        return value
    if isinstance(value, str):
        return Token(TokenKind.STRING, value)
    if isinstance(value, Bytes):
        return Token(TokenKind.BYTES, value.data)
    if isinstance(value, H256):
        return Token(TokenKind.FIXED_BYTES, value.data)
    if isinstance(value, Address):
        return Token(TokenKind.ADDRESS, value)
    if isinstance(value, bool):
        return Token(TokenKind.BOOL, value)
    if isinstance(value, int):
        if value < 0:
            return signed_token(value)
        return Token(TokenKind.UINT, value)
    if isinstance(value, BytesArray):
        return Token(TokenKind.ARRAY, [Token(TokenKind.UINT, b) for b in value.values])
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Token(TokenKind.BYTES, bytes(value))
    if isinstance(value, list):
        return Token(TokenKind.ARRAY, [into_token(item) for item in value])
    if isinstance(value, tuple):
        return Token(TokenKind.FIXED_ARRAY, [into_token(item) for item in value])
    raise TypeError(f"cannot convert {type(value).__name__} into a token")


def into_tokens(params: Any) -> list[Token]:
    """Convert call parameters into a token list.

    ``None`` and the empty tuple give no tokens, a tuple gives one token per
    element, and any other value gives a single token.
    """
    if params is None:
        return []
    if isinstance(params, tuple):
        return [into_token(item) for item in params]
    return [into_token(params)]


def _mismatch(expected: str, token: Token) -> InvalidOutputTypeError:
    return InvalidOutputTypeError(f"Expected `{expected}`, got {token!r}")


def _array_items(token: Token, expected: str) -> Sequence[Token]:
    if token.kind in (TokenKind.FIXED_ARRAY, TokenKind.ARRAY):
        return token.value
    raise _mismatch(expected, token)


def _as_int(token: Token, spec: IntSpec) -> int:
    value = (token.value & _LOW128) & ((1 << spec.bits) - 1)
    if spec.signed and value >> (spec.bits - 1):
        value -= 1 << spec.bits
    return value


def from_token(token: Token, target: Target) -> Any:
    """Convert a token into the Python value described by ``target``."""
    if not isinstance(token, Token):
        raise TypeError(f"expected a Token, got {token!r}")
    kind = token.kind
    if target is Token:
        return token
    if target is str:
        if kind is TokenKind.STRING:
            return token.value
        raise _mismatch("String", token)
    if target is Bytes:
        if kind is TokenKind.BYTES:
            return Bytes(token.value)
        raise _mismatch("Bytes", token)
    if target is H256:
        if kind is TokenKind.FIXED_BYTES:
            if len(token.value) != 32:
                raise InvalidOutputTypeError(
                    f"Expected `H256`, got {list(token.value)!r}"
                )
            return H256(token.value)
        raise _mismatch("H256", token)
    if target is Address:
        if kind is TokenKind.ADDRESS:
            return token.value
        raise _mismatch("Address", token)
    if target is int:
        if kind in (TokenKind.INT, TokenKind.UINT):
            return token.value
        raise _mismatch("U256", token)
    if target is bool:
        if kind is TokenKind.BOOL:
            return token.value
        raise _mismatch("bool", token)
    if target is bytes:
        if kind in (TokenKind.BYTES, TokenKind.FIXED_BYTES):
            return token.value
        raise _mismatch("bytes", token)
    if target is BytesArray:
        items = _array_items(token, "Array")
        return BytesArray(tuple(from_token(item, IntSpec(8)) for item in items))
    if isinstance(target, IntSpec):
        if kind in (TokenKind.INT, TokenKind.UINT):
            return _as_int(token, target)
        raise _mismatch(target.name, token)
    if isinstance(target, FixedBytesSpec):
        if kind is TokenKind.FIXED_BYTES:
            if len(token.value) != target.size:
                raise InvalidOutputTypeError(
                    f"Expected `FixedBytes({target.size})`, got FixedBytes({len(token.value)})"
                )
            return token.value
        raise _mismatch(f"FixedBytes({target.size})", token)
    if isinstance(target, ArraySpec):
        items = _array_items(token, "Array")
        return [from_token(item, target.item) for item in items]
    if isinstance(target, FixedArraySpec):
        if kind is not TokenKind.FIXED_ARRAY:
            raise _mismatch(f"FixedArray({target.size})", token)
        if len(token.value) != target.size:
            raise InvalidOutputTypeError(
                f"Expected `FixedArray({target.size})`, got FixedArray({len(token.value)})"
            )
        return tuple(from_token(item, target.item) for item in token.value)
    raise TypeError(f"unsupported output type: {target!r}")


def from_tokens(tokens: Iterable[Token], target: Target | tuple) -> Any:
    """Convert a list of output tokens into ``target``.

    A tuple of targets decodes one token per element; any other target
    expects exactly one token.
    """
    tokens = list(tokens)
    if isinstance(target, tuple):
        if len(tokens) != len(target):
            raise InvalidOutputTypeError(
                f"Expected {len(target)} elements, got a list of {len(tokens)}: {tokens!r}"
            )
        return tuple(from_token(tok, spec) for tok, spec in zip(tokens, target))
    if len(tokens) != 1:
        raise InvalidOutputTypeError(f"Expected single element, got a list: {tokens!r}")
    return from_token(tokens[0], target)