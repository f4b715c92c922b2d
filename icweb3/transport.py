"""Transport interfaces used to carry JSON-RPC calls."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Awaitable, Iterable

from icweb3.rpc import MethodCall

__all__ = ["RequestId", "Transport", "BatchTransport", "DuplexTransport"]

RequestId = int


class Transport(ABC):
    """Carries JSON-RPC calls to a node."""

    @abstractmethod
    def prepare(self, method: str, params: list[Any]) -> tuple[RequestId, MethodCall]:
        """Assign an id to a call of ``method`` with ``params`` and build it."""

    @abstractmethod
    def send(self, id: RequestId, request: MethodCall) -> Awaitable[Any]:
        """Send a prepared call; the awaitable yields the call's result."""

    def execute(self, method: str, params: Iterable[Any]) -> Awaitable[Any]:
        """Prepare and send a call.

        The request is prepared immediately; only sending is left to the
        returned awaitable.
        """
        request_id, request = self.prepare(method, list(params))
        return self.send(request_id, request)

    def set_max_response_bytes(self, limit: int) -> None:
        """Limit the size of responses; transports without such a limit ignore it."""
        return None


class BatchTransport(Transport):
    """A transport that can send several prepared calls at once."""

    @abstractmethod
    def send_batch(
        self, requests: Iterable[tuple[RequestId, MethodCall]]
    ) -> Awaitable[list[Any]]:
        """Send a batch; the awaitable yields one result or RpcError per call."""


class DuplexTransport(Transport):
    """A transport that supports publish/subscribe notifications."""

    @abstractmethod
    def subscribe(self, id: str) -> AsyncIterator[Any]:
        """Start delivering notifications for subscription ``id``."""

    @abstractmethod
    def unsubscribe(self, id: str) -> None:
        """Stop delivering notifications for subscription ``id``."""