"""JSON-RPC request building and response parsing."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar, Union

from icweb3.errors import DecoderError, InvalidResponseError, RpcError

__all__ = [
    "MethodCall",
    "Success",
    "Failure",
    "Notification",
    "decode",
    "serialize",
    "to_string",
    "build_request",
    "to_response_from_slice",
    "to_notification_from_slice",
    "to_results_from_outputs",
    "to_result_from_output",
]

VERSION = "2.0"

T = TypeVar("T")
RequestId = Union[int, str, None]


@dataclass(frozen=True)
class MethodCall:
    """A JSON-RPC method call."""

    method: str
    params: list[Any]
    id: RequestId
    jsonrpc: str | None = VERSION

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.jsonrpc is not None:
            out["jsonrpc"] = self.jsonrpc
        out["method"] = self.method
        out["params"] = list(self.params)
        out["id"] = self.id
        return out


@dataclass(frozen=True)
class Success:
    """A successful JSON-RPC output."""

    result: Any
    id: RequestId
    jsonrpc: str | None = VERSION


@dataclass(frozen=True)
class Failure:
    """A failed JSON-RPC output carrying an error object."""

    code: int
    message: str
    id: RequestId
    data: Any = None
    jsonrpc: str | None = VERSION


@dataclass(frozen=True)
class Notification:
    """A JSON-RPC notification (a call without an id)."""

    method: str
    params: list[Any] | dict[str, Any] | None = field(default=None)
    jsonrpc: str | None = VERSION


Output = Union[Success, Failure]


def _json_default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"object of type {type(obj).__name__} is not JSON serializable")


def decode(value: Any, converter: Callable[[Any], T]) -> T:
    """Convert a JSON value with ``converter``, raising DecoderError on failure."""
    try:
        return converter(value)
    except (TypeError, ValueError, KeyError) as exc:
        raise DecoderError(repr(exc)) from exc


def serialize(value: Any) -> Any:
    """Turn ``value`` into plain JSON data (dicts, lists, strings, numbers)."""
    return json.loads(json.dumps(value, default=_json_default))


def to_string(request: Any) -> str:
    """Serialize a request to compact JSON text."""
    return json.dumps(request, default=_json_default, separators=(",", ":"))


def build_request(id: int, method: str, params: list[Any]) -> MethodCall:
    """Build a JSON-RPC 2.0 method call."""
    if isinstance(id, bool) or not isinstance(id, int) or id < 0:
        raise ValueError("request id must be a non-negative integer")
    return MethodCall(method=method, params=list(params), id=id, jsonrpc=VERSION)


def _check_version(obj: dict[str, Any]) -> str | None:
    version = obj.get("jsonrpc")
    if version is not None and version != VERSION:
        raise InvalidResponseError(f"unsupported jsonrpc version {version!r}")
    return version


def _check_id(obj: dict[str, Any]) -> RequestId:
    if "id" not in obj:
        raise InvalidResponseError("missing field `id`")
    value = obj["id"]
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    raise InvalidResponseError(f"invalid id {value!r}")


def _parse_output(obj: Any) -> Output:
    if not isinstance(obj, dict):
        raise InvalidResponseError(f"expected an object, got {obj!r}")
    if "result" in obj:
        allowed = {"jsonrpc", "result", "id"}
    elif "error" in obj:
        allowed = {"jsonrpc", "error", "id"}
    else:
        raise InvalidResponseError("output has neither `result` nor `error`")
    unknown = set(obj) - allowed
    if unknown:
        raise InvalidResponseError(f"unknown fields {sorted(unknown)}")
    version = _check_version(obj)
    ident = _check_id(obj)
    if "result" in obj:
        return Success(result=obj["result"], id=ident, jsonrpc=version)
    error = obj["error"]
    if not isinstance(error, dict):
        raise InvalidResponseError(f"invalid error object {error!r}")
    code = error.get("code")
    message = error.get("message")
    if isinstance(code, bool) or not isinstance(code, int) or not isinstance(message, str):
        raise InvalidResponseError(f"invalid error object {error!r}")
    return Failure(
        code=code, message=message, id=ident, data=error.get("data"), jsonrpc=version
    )


def _load(data: bytes | str) -> Any:
    try:
        return json.loads(data)
    except (ValueError, UnicodeDecodeError) as exc:
        raise InvalidResponseError(repr(exc)) from exc


def to_response_from_slice(data: bytes | str) -> Output | list[Output]:
    """Parse raw bytes into a single output or a batch of outputs."""
    parsed = _load(data)
    if isinstance(parsed, list):
        return [_parse_output(item) for item in parsed]
    return _parse_output(parsed)


def to_notification_from_slice(data: bytes | str) -> Notification:
    """Parse raw bytes into a JSON-RPC notification."""
    parsed = _load(data)
    if not isinstance(parsed, dict):
        raise InvalidResponseError(f"expected an object, got {parsed!r}")
    unknown = set(parsed) - {"jsonrpc", "method", "params"}
    if unknown:
        raise InvalidResponseError(f"unknown fields {sorted(unknown)}")
    method = parsed.get("method")
    if not isinstance(method, str):
        raise InvalidResponseError("missing or invalid field `method`")
    params = parsed.get("params")
    if params is not None and not isinstance(params, (list, dict)):
        raise InvalidResponseError(f"invalid params {params!r}")
    return Notification(method=method, params=params, jsonrpc=_check_version(parsed))


def to_result_from_output(output: Output) -> Any:
    """Return the result of a successful output, or raise RpcError for a failure."""
    if isinstance(output, Success):
        return output.result
    if isinstance(output, Failure):
        raise RpcError(output.code, output.message, output.data)
    raise TypeError(f"not a JSON-RPC output: {output!r}")


def to_results_from_outputs(outputs: list[Output]) -> list[Any]:
    """Map a batch of outputs to results; failures become RpcError instances."""
    results: list[Any] = []
    for output in outputs:
        try:
            results.append(to_result_from_output(output))
        except RpcError as exc:
            results.append(exc)
    return results