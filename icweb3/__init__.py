"""Ethereum JSON-RPC building blocks: errors, signing helpers, RPC messages and transports."""

__version__ = "0.1.0"