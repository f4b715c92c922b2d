import json

import pytest

from icweb3.errors import DecoderError, InvalidResponseError, RpcError
from icweb3.rpc import (
    Failure,
    MethodCall,
    Notification,
    Success,
    build_request,
    decode,
    serialize,
    to_notification_from_slice,
    to_response_from_slice,
    to_result_from_output,
    to_results_from_outputs,
    to_string,
)


def test_build_request_fields():
    call = build_request(3, "eth_call", ["0x1", {"to": "0x2"}])
    assert call.method == "eth_call"
    assert call.id == 3
    assert call.params == ["0x1", {"to": "0x2"}]
    assert call.to_dict()["jsonrpc"] == "2.0"


def test_build_request_rejects_negative_id():
    with pytest.raises(ValueError):
        build_request(-1, "eth_call", [])


def test_to_string_wire_format():
    call = build_request(1, "eth_blockNumber", [])
    assert to_string(call) == (
        '{"jsonrpc":"2.0","method":"eth_blockNumber","params":[],"id":1}'
    )


def test_to_string_round_trip():
    call = build_request(7, "eth_getBalance", ["0xab", "latest"])
    assert json.loads(to_string(call)) == call.to_dict()


def test_serialize_uses_to_dict():
    call = MethodCall(method="m", params=[1], id=2)
    assert serialize([call]) == [call.to_dict()]


def test_serialize_rejects_unknown_objects():
    with pytest.raises(TypeError):
        serialize(object())


def test_parse_success():
    out = to_response_from_slice(b'{"jsonrpc":"2.0","result":"0x10","id":1}')
    assert out == Success(result="0x10", id=1, jsonrpc="2.0")
    assert to_result_from_output(out) == "0x10"


def test_parse_failure_raises_rpc_error():
    out = to_response_from_slice(
        b'{"jsonrpc":"2.0","error":{"code":-32000,"message":"boom"},"id":"a"}'
    )
    assert isinstance(out, Failure)
    with pytest.raises(RpcError) as info:
        to_result_from_output(out)
    assert info.value.code == -32000
    assert info.value.message == "boom"


def test_parse_batch():
    outs = to_response_from_slice(
        '[{"jsonrpc":"2.0","result":1,"id":1},'
        '{"jsonrpc":"2.0","error":{"code":-1,"message":"no"},"id":2}]'
    )
    results = to_results_from_outputs(outs)
    assert results[0] == 1
    assert results[1] == RpcError(-1, "no")


def test_parse_null_result():
    out = to_response_from_slice(b'{"jsonrpc":"2.0","result":null,"id":null}')
    assert to_result_from_output(out) is None


@pytest.mark.parametrize(
    "raw",
    [
        b"not json",
        b'{"jsonrpc":"2.0","id":1}',
        b'{"jsonrpc":"2.0","result":1}',
        b'{"jsonrpc":"2.0","result":1,"id":1,"extra":true}',
        b'{"jsonrpc":"1.0","result":1,"id":1}',
        b'{"jsonrpc":"2.0","error":{"message":"x"},"id":1}',
        b"42",
    ],
)
def test_invalid_responses(raw):
    with pytest.raises(InvalidResponseError):
        to_response_from_slice(raw)


def test_parse_notification():
    note = to_notification_from_slice(
        b'{"jsonrpc":"2.0","method":"eth_subscription","params":{"subscription":"0x1","result":5}}'
    )
    assert note.method == "eth_subscription"
    assert note.params == {"subscription": "0x1", "result": 5}


def test_notification_without_params():
    note = to_notification_from_slice(b'{"jsonrpc":"2.0","method":"ping"}')
    assert note == Notification(method="ping", params=None, jsonrpc="2.0")


def test_notification_with_id_is_invalid():
    with pytest.raises(InvalidResponseError):
        to_notification_from_slice(b'{"jsonrpc":"2.0","method":"m","id":1}')


def test_decode_converts():
    assert decode("0x1f", lambda v: int(v, 16)) == 31


def test_decode_wraps_failures():
    with pytest.raises(DecoderError):
        decode("zz", lambda v: int(v, 16))
    with pytest.raises(DecoderError):
        decode({}, lambda v: v["missing"])