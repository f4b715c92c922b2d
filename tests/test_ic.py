import pytest

from icweb3.ic import KeyInfo, pubkey_to_address, recover_address

GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GENERATOR_COMPRESSED = bytes.fromhex(
    "0279BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
)
KEY_ONE_ADDRESS = "7e5f4552091a69125d5dfcd7b8c2659029395bdf"


def _generator_signature() -> tuple[bytes, bytes]:
    # With r = x(G) and s = e + r the recovered key is G itself.
    message = (1).to_bytes(32, "big")
    signature = GX.to_bytes(32, "big") + (GX + 1).to_bytes(32, "big")
    return message, signature


def test_key_info_default_cycles():
    info = KeyInfo(derivation_path=[b"\x00\x00\x00\x01"], key_name="test_key")
    assert info.sign_cycles() == 10_000_000_000


def test_key_info_explicit_cycles():
    info = KeyInfo(derivation_path=[], key_name="test_key", ecdsa_sign_cycles=25)
    assert info.sign_cycles() == 25


def test_pubkey_to_address_of_generator():
    assert pubkey_to_address(GENERATOR_COMPRESSED).hex() == KEY_ONE_ADDRESS


def test_pubkey_parity_changes_address():
    negated = b"\x03" + GENERATOR_COMPRESSED[1:]
    address = pubkey_to_address(negated)
    assert len(address) == 20
    assert address != pubkey_to_address(GENERATOR_COMPRESSED)


@pytest.mark.parametrize(
    "pubkey",
    [
        b"\x04" + GENERATOR_COMPRESSED[1:],
        GENERATOR_COMPRESSED[:-1],
        b"\x02" + b"\xff" * 32,
        b"",
    ],
)
def test_pubkey_to_address_rejects_invalid(pubkey):
    with pytest.raises(ValueError, match="uncompress public key failed"):
        pubkey_to_address(pubkey)


def test_recover_address_of_generator():
    message, signature = _generator_signature()
    assert recover_address(message, signature, 0) == KEY_ONE_ADDRESS


def test_recover_matches_pubkey_to_address():
    message, signature = _generator_signature()
    recovered = recover_address(message, signature, 0)
    assert bytes.fromhex(recovered) == pubkey_to_address(GENERATOR_COMPRESSED)


def test_recover_with_other_parity_gives_other_address():
    message, signature = _generator_signature()
    other = recover_address(message, signature, 1)
    assert len(other) == 40
    assert other != KEY_ONE_ADDRESS


def test_recover_with_overflowing_x_fails():
    message, signature = _generator_signature()
    assert recover_address(message, signature, 2) == ""


def test_recover_zero_signature_fails():
    assert recover_address(b"\x01" * 32, bytes(64), 0) == ""


@pytest.mark.parametrize(
    "message, signature, rec_id",
    [
        (b"\x01" * 31, b"\x01" * 64, 0),
        (b"\x01" * 32, b"\x01" * 63, 0),
        (b"\x01" * 32, b"\x01" * 64, 4),
        (b"\x01" * 32, b"\x01" * 64, -1),
    ],
)
def test_recover_rejects_malformed_input(message, signature, rec_id):
    with pytest.raises(ValueError):
        recover_address(message, signature, rec_id)