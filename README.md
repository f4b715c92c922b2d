# icweb3

Building blocks for an Ethereum JSON-RPC client: JSON-RPC request and
response handling, ABI token conversion, transaction options, library
linking for contract bytecode, Keccak-256 hashing, and secp256k1 address
derivation and recovery.

## Installation

```
pip install icweb3
```

To run the test suite:

```
pip install "icweb3[test]"
pytest
```

## Modules

- `icweb3.errors` – `Web3Error` and its subclasses `UnreachableError`,
  `DecoderError`, `InvalidResponseError`, `TransportError`, `RpcError`,
  `IoError`, `RecoveryError` and `InternalError`. Errors of the same class
  with the same details compare equal.
- `icweb3.signing` – `keccak256(data)`, `hash_message(message)` (EIP-191
  personal message hash), the `Signature` dataclass (`v`, `r`, `s`) and
  `SigningError`.
- `icweb3.rpc` – `build_request(id, method, params)` returning a `MethodCall`,
  `serialize` and `to_string` for JSON output, `to_response_from_slice` and
  `to_notification_from_slice` for parsing raw responses into `Success`,
  `Failure` and `Notification` objects, `to_result_from_output` (raises
  `RpcError` for a failure), `to_results_from_outputs` (puts the `RpcError` in
  the list instead), and `decode(value, converter)`.
- `icweb3.transport` – the abstract `Transport`, `BatchTransport` and
  `DuplexTransport` interfaces. `Transport.execute` prepares a call at once and
  hands it to `send`.
- `icweb3.ic` – `KeyInfo` (derivation path, key name, signing cycles;
  `sign_cycles()` falls back to 10,000,000,000), `pubkey_to_address` for a
  33-byte compressed public key, and `recover_address(message, signature,
  rec_id)`, which returns the signer's address as lowercase hex, or `""` when
  recovery fails.
- `icweb3.contract.tokens` – `Token` and `TokenKind`, the value types
  `Address`, `H256`, `Bytes` and `BytesArray`, the decoding targets `IntSpec`,
  `FixedBytesSpec`, `ArraySpec` and `FixedArraySpec`, and the conversions
  `into_token`, `signed_token`, `into_tokens`, `from_token` and `from_tokens`.
- `icweb3.contract.options` – the `Options` dataclass with
  `Options.configured(func)` and `to_transaction_fields()`.
- `icweb3.contract.deploy` – `link_bytecode(code, linker)`.
- `icweb3.contract.errors` – `ContractError` and its subclasses, and
  `DeployError` with `DeployAbiError`, `DeployApiError` and
  `ContractDeploymentFailure`.

## Examples

Hashing and building a request:

```python
from icweb3.signing import keccak256
from icweb3.rpc import build_request, to_string

keccak256(b"").hex()
# 'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'

to_string(build_request(1, "eth_blockNumber", []))
# '{"jsonrpc":"2.0","method":"eth_blockNumber","params":[],"id":1}'
```

Converting values to and from ABI tokens:

```python
from icweb3.contract.tokens import Address, IntSpec, from_token, from_tokens, into_token, into_tokens

owner = Address(bytes(19) + b"\x05")
tokens = into_tokens((owner, True))
from_tokens(tokens, (Address, bool))   # (owner, True)

from_token(into_token(-1), IntSpec(8, signed=True))   # -1
```

A plain Python `int` decodes with the target `int`; lists become `Array`
tokens and tuples `FixedArray` tokens.

Transaction options:

```python
from icweb3.contract.options import Options

options = Options.configured(lambda o: setattr(o, "value", 5))
options.to_transaction_fields()   # {'value': '0x5'}
```

Linking a library address into bytecode:

```python
from icweb3.contract.deploy import link_bytecode

link_bytecode('"0x6001"', {})   # b'`\x01'
```

Each library name in the linker replaces the first `__<name>` placeholder
padded with `_` to 40 characters; names longer than 38 characters and
invalid hex raise `DeployAbiError`.

## What this package does not do

- It has no concrete transport: there is no HTTP or WebSocket client, only
  the abstract `Transport` interfaces to implement.
- It has no client object or node namespaces, so it does not itself send
  transactions, query contracts, deploy contracts or wait for confirmations.
- It does not load contract ABI JSON or encode function calls; it converts
  between Python values and ABI tokens only.
- It does not talk to a threshold-ECDSA signing service; `KeyInfo` only holds
  the settings for one, and signing private keys are not handled.