from zil_sleuth.rpc.methods import ZilMethods, build_payload


def test_envelope_shape():
    payload = build_payload(["7793a8e8c09d189d4d421ce5bc5b3674656c5ac1"], ZilMethods.GetBalance)

    assert payload == {
        "id": 1,
        "jsonrpc": "2.0",
        "method": "GetBalance",
        "params": ["7793a8e8c09d189d4d421ce5bc5b3674656c5ac1"],
    }


def test_build_payload_is_pure():
    params = {"nested": [1, 2, {"a": "b"}]}

    first = build_payload(params, ZilMethods.GetSmartContractState)
    second = build_payload(params, ZilMethods.GetSmartContractState)

    assert first == second
    assert first is not second


def test_method_wire_names():
    assert str(ZilMethods.CreateTransaction) == "CreateTransaction"
    assert str(ZilMethods.GetSmartContractSubState) == "GetSmartContractSubState"
    assert all(str(m) == m.name for m in ZilMethods)
