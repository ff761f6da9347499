"""dlt resources built on the client."""

from zil_sleuth.datasource.zilliqa import ZilliqaSource
from zil_sleuth.rpc.client import ZilliqaClient


def test_available_sources(network, config):
    source = ZilliqaSource(ZilliqaClient(["http://seed"], config, network.transport))

    assert source.get_available_sources() == ["ssn_nodes", "balances"]


def test_ssn_nodes_rows(network, config):
    network.json(
        "seed",
        {
            "result": {
                "ssnlist": {
                    "0xb": {"arguments": [0, 0, 0, 0, 0, "http://b"]},
                    "0xa": {"arguments": [0, 0, 0, 0, 0, "http://a"]},
                    "0xbroken": {"arguments": []},
                }
            }
        },
    )
    source = ZilliqaSource(ZilliqaClient(["http://seed"], config, network.transport))

    rows = list(source.ssn_nodes())

    assert rows == [
        {"validator": "0xa", "node_url": "http://a"},
        {"validator": "0xb", "node_url": "http://b"},
    ]


def test_balance_rows_use_one_batch(network, config):
    network.json(
        "node",
        [
            {"id": 1, "jsonrpc": "2.0", "result": {"balance": "5", "nonce": 1}},
            {"id": 1, "jsonrpc": "2.0", "error": {"code": -5, "message": "Account is not created"}},
            {"id": 1, "jsonrpc": "2.0", "result": {"balance": "7", "nonce": 4}},
        ],
    )
    source = ZilliqaSource(ZilliqaClient(["http://node"], config, network.transport))
    addresses = ["a" * 40, "b" * 40, "c" * 40]

    rows = list(source.balances(addresses))

    assert rows == [
        {"address": "a" * 40, "balance": "5", "nonce": 1},
        {"address": "c" * 40, "balance": "7", "nonce": 4},
    ]
    assert network.calls == ["node"]
    assert [body["params"] for body in network.bodies[0]] == [[a] for a in addresses]
    assert {body["method"] for body in network.bodies[0]} == {"GetBalance"}


def test_balance_rows_empty(network, config):
    source = ZilliqaSource(ZilliqaClient(["http://node"], config, network.transport))

    assert list(source.balances([])) == []
    assert network.calls == []
