import errno

import pytest

from icweb3.errors import (
    DecoderError,
    InternalError,
    InvalidResponseError,
    IoError,
    RecoveryError,
    RpcError,
    TransportError,
    UnreachableError,
    Web3Error,
)


def test_unreachable_message():
    assert str(UnreachableError()) == "Server is unreachable"


def test_internal_message():
    assert str(InternalError()) == "Internal Web3 error"


def test_decoder_message():
    err = DecoderError("bad value")
    assert str(err) == "Decoder error: bad value"
    assert err.message == "bad value"


def test_invalid_response_message():
    assert str(InvalidResponseError("oops")) == "Got invalid response: oops"


def test_transport_code_and_message():
    assert str(TransportError(404)) == "Transport error: code 404"
    assert TransportError(404).code == 404
    assert str(TransportError("closed")) == "Transport error: closed"
    assert TransportError("closed").code is None


def test_transport_code_out_of_range():
    with pytest.raises(ValueError):
        TransportError(70000)


def test_rpc_error_fields():
    err = RpcError(-32000, "execution reverted", {"x": 1})
    assert err.code == -32000
    assert err.message == "execution reverted"
    assert err.data == {"x": 1}
    assert str(err).startswith("RPC error: ")


def test_io_error_wraps_cause():
    cause = OSError(errno.ECONNREFUSED, "refused")
    err = IoError(cause)
    assert err.__cause__ is cause
    assert str(err).startswith("IO error: ")


def test_io_error_equality_by_kind():
    a = IoError(OSError(errno.ECONNREFUSED, "one"))
    b = IoError(OSError(errno.ECONNREFUSED, "two"))
    c = IoError(OSError(errno.ENOENT, "two"))
    assert a == b
    assert a != c


def test_recovery_error_reasons():
    err = RecoveryError(RecoveryError.INVALID_SIGNATURE)
    assert str(err) == "Recovery error: Signature is invalid (check recovery id)."
    with pytest.raises(ValueError):
        RecoveryError("something else")


def test_equality_rules():
    assert UnreachableError() == UnreachableError()
    assert InternalError() == InternalError()
    assert DecoderError("a") == DecoderError("a")
    assert DecoderError("a") != DecoderError("b")
    assert DecoderError("a") != InvalidResponseError("a")
    assert TransportError(1) == TransportError(1)
    assert UnreachableError() != InternalError()


@pytest.mark.parametrize(
    ("make", "prefix"),
    [
        (lambda: UnreachableError(), "Server is unreachable"),
        (lambda: DecoderError("x"), "Decoder error: x"),
        (lambda: InvalidResponseError("x"), "Got invalid response: x"),
        (lambda: TransportError(1), "Transport error: code 1"),
        (lambda: RpcError(1, "m"), "RPC error: "),
        (lambda: IoError(OSError(errno.EIO, "io")), "IO error: "),
        (
            lambda: RecoveryError(RecoveryError.INVALID_MESSAGE),
            "Recovery error: Message has to be a non-zero 32-bytes slice.",
        ),
        (lambda: InternalError(), "Internal Web3 error"),
    ],
)
def test_all_are_web3_errors(make, prefix):
    err = make()
    assert isinstance(err, Web3Error)
    assert str(err).startswith(prefix)


def test_errors_are_hashable():
    assert len({DecoderError("a"), DecoderError("a"), DecoderError("b")}) == 2