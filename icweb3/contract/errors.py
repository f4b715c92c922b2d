"""Errors raised by contract calls, queries and deployment."""

from __future__ import annotations

from icweb3.errors import Web3Error

__all__ = [
    "ContractError",
    "InvalidOutputTypeError",
    "AbiError",
    "ApiError",
    "DeploymentError",
    "InterfaceUnsupportedError",
    "DeployError",
    "DeployAbiError",
    "DeployApiError",
    "ContractDeploymentFailure",
]


def _abi_detail(detail: str | Exception) -> str:
    if not isinstance(detail, (str, Exception)):
        raise TypeError("ABI error detail must be a str or an exception")
    return str(detail)


def _require_api(error: Web3Error) -> Web3Error:
    if not isinstance(error, Web3Error):
        raise TypeError("API error must wrap a Web3Error")
    return error


class DeployError(Exception):
    """Base class of contract deployment errors."""


class DeployAbiError(DeployError):
    """The ABI or bytecode given for deployment is invalid."""

    def __init__(self, detail: str | Exception) -> None:
        self.detail = detail
        super().__init__(f"Abi error: {_abi_detail(detail)}")
        if isinstance(detail, Exception):
            self.__cause__ = detail


class DeployApiError(DeployError):
    """A node call failed during deployment."""

    def __init__(self, error: Web3Error) -> None:
        self.error = _require_api(error)
        super().__init__(f"Api error: {error}")
        self.__cause__ = error


class ContractDeploymentFailure(DeployError):
    """The deployment transaction was mined but created no contract."""

    def __init__(self, transaction_hash: bytes) -> None:
        transaction_hash = bytes(transaction_hash)
        if len(transaction_hash) != 32:
            raise ValueError("transaction hash must be 32 bytes")
        self.transaction_hash = transaction_hash
        super().__init__(
            f"Failure during deployment.Tx hash: 0x{transaction_hash.hex()}"
        )


class ContractError(Exception):
    """Base class of contract call and query errors."""


class InvalidOutputTypeError(ContractError):
    """The caller asked for an output type the returned tokens do not fit."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid output type: {message}")


class AbiError(ContractError):
    """Encoding or decoding with the contract ABI failed."""

    def __init__(self, detail: str | Exception) -> None:
        self.detail = detail
        super().__init__(f"Abi error: {_abi_detail(detail)}")
        if isinstance(detail, Exception):
            self.__cause__ = detail


class ApiError(ContractError):
    """The underlying node call failed."""

    def __init__(self, error: Web3Error) -> None:
        self.error = _require_api(error)
        super().__init__(f"Api error: {error}")
        self.__cause__ = error


class DeploymentError(ContractError):
    """Contract deployment failed."""

    def __init__(self, error: DeployError) -> None:
        if not isinstance(error, DeployError):
            raise TypeError("deployment error must wrap a DeployError")
        self.error = error
        super().__init__(f"Deployment error: {error}")
        self.__cause__ = error


class InterfaceUnsupportedError(ContractError):
    """The contract does not support the requested interface."""

    def __init__(self) -> None:
        super().__init__("InterfaceUnsupported")