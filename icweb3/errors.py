"""Errors raised by the client."""

from __future__ import annotations

from typing import Any

__all__ = [
    "Web3Error",
    "UnreachableError",
    "DecoderError",
    "InvalidResponseError",
    "TransportError",
    "RpcError",
    "IoError",
    "RecoveryError",
    "InternalError",
]


class Web3Error(Exception):
    """Base class of every client error.

    Two errors compare equal when they are of the same class and carry the
    same details.
    """

    def _identity(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._identity() == other._identity()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._identity()))


class UnreachableError(Web3Error):
    """The server could not be reached."""

    def __init__(self) -> None:
        super().__init__("Server is unreachable")


class DecoderError(Web3Error):
    """A value could not be decoded."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Decoder error: {message}")

    def _identity(self) -> tuple:
        return (self.message,)


class InvalidResponseError(Web3Error):
    """The server sent a response that is not valid JSON-RPC."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Got invalid response: {message}")

    def _identity(self) -> tuple:
        return (self.message,)


class TransportError(Web3Error):
    """A transport failed, with either a numeric code or a description."""

    def __init__(self, detail: int | str) -> None:
        if isinstance(detail, bool) or not isinstance(detail, (int, str)):
            raise TypeError("transport error detail must be an int code or a str")
        if isinstance(detail, int) and not 0 <= detail <= 0xFFFF:
            raise ValueError("transport error code must fit in 16 bits")
        self.detail = detail
        text = f"code {detail}" if isinstance(detail, int) else detail
        super().__init__(f"Transport error: {text}")

    @property
    def code(self) -> int | None:
        return self.detail if isinstance(self.detail, int) else None

    def _identity(self) -> tuple:
        return (self.detail,)


class RpcError(Web3Error):
    """The server answered a call with a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        self.code = code
        self.message = message
        self.data = data
        super().__init__(
            f"RPC error: code {code}, message {message!r}, data {data!r}"
        )

    def _identity(self) -> tuple:
        return (self.code, self.message, repr(self.data))


class IoError(Web3Error):
    """An operating-system level I/O failure."""

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        self.__cause__ = cause
        super().__init__(f"IO error: {cause}")

    def _identity(self) -> tuple:
        return (type(self.cause), self.cause.errno)


class RecoveryError(Web3Error):
    """The signer of a message could not be recovered."""

    INVALID_MESSAGE = "Message has to be a non-zero 32-bytes slice."
    INVALID_SIGNATURE = "Signature is invalid (check recovery id)."

    def __init__(self, reason: str) -> None:
        if reason not in (self.INVALID_MESSAGE, self.INVALID_SIGNATURE):
            raise ValueError(f"unknown recovery failure: {reason!r}")
        self.reason = reason
        super().__init__(f"Recovery error: {reason}")

    def _identity(self) -> tuple:
        return (self.reason,)


class InternalError(Web3Error):
    """An unexpected internal failure."""

    def __init__(self) -> None:
        super().__init__("Internal Web3 error")