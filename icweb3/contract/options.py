"""Options for contract calls, queries and deployment transactions."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable

__all__ = ["Options"]

_U256_LIMIT = 1 << 256
_U64_LIMIT = 1 << 64

# Field name -> (JSON key, exclusive upper bound for quantities or None).
_QUANTITIES: dict[str, tuple[str, int]] = {
    "gas": ("gas", _U256_LIMIT),
    "gas_price": ("gasPrice", _U256_LIMIT),
    "value": ("value", _U256_LIMIT),
    "nonce": ("nonce", _U256_LIMIT),
    "transaction_type": ("type", _U64_LIMIT),
    "max_fee_per_gas": ("maxFeePerGas", _U256_LIMIT),
    "max_priority_fee_per_gas": ("maxPriorityFeePerGas", _U256_LIMIT),
}

_STRUCTURED: dict[str, str] = {
    "condition": "condition",
    "access_list": "accessList",
}


def _quantity(name: str, value: Any, limit: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {value!r}")
    if not 0 <= value < limit:
        raise ValueError(f"{name} out of range: {value}")
    return hex(value)


def _plain(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


@dataclass
class Options:
    """Transaction options for a contract call; ``None`` leaves a field unset."""

    gas: int | None = None
    gas_price: int | None = None
    value: int | None = None
    nonce: int | None = None
    condition: Any = None
    transaction_type: int | None = None
    access_list: Any = None
    max_fee_per_gas: int | None = None
    max_priority_fee_per_gas: int | None = None

    @classmethod
    def configured(cls, func: Callable[[Options], Any]) -> Options:
        """Create default options and let ``func`` modify them in place."""
        options = cls()
        func(options)
        return options

    def to_transaction_fields(self) -> dict[str, Any]:
        """Return the set fields as JSON-RPC transaction fields.

        Quantities are encoded as ``0x``-prefixed hex; unset fields are left out.
        """
        out: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            if item.name in _QUANTITIES:
                key, limit = _QUANTITIES[item.name]
                out[key] = _quantity(item.name, value, limit)
            else:
                out[_STRUCTURED[item.name]] = _plain(value)
        return out