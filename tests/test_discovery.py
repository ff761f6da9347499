"""Bootstrap discovery through a seed node."""

import pytest

from zil_sleuth.config.settings import settings
from zil_sleuth.core.exceptions import DiscoveryError, DiscoveryFailure
from zil_sleuth.rpc.discovery import discover, extract_ssn_entries
from zil_sleuth.rpc.registry import NodeRegistry


def ssn(url):
    return {"arguments": ["a", "b", "c", "d", "e", url, "g"]}


@pytest.mark.asyncio
async def test_single_entry_then_seed(network, config):
    network.json(
        "seed",
        {"result": {"ssnlist": {"addr1": {"arguments": ["a", "b", "c", "d", "e", "http://nodeA"]}}}},
    )

    registry = await discover("http://seed", config, network.transport)

    assert registry == NodeRegistry.from_list(["http://nodeA", "http://seed"])
    assert network.calls == ["seed"]


@pytest.mark.asyncio
async def test_request_targets_staking_contract(network, config):
    network.json("seed", {"result": {"ssnlist": {}}})

    await discover("http://seed", config, network.transport)

    body = network.bodies[0]
    assert body["method"] == "GetSmartContractSubState"
    assert body["params"] == [settings.rpc.staking_contract, "ssnlist", []]
    assert body["jsonrpc"] == "2.0"


@pytest.mark.asyncio
async def test_entries_in_key_order_with_bad_entries_skipped(network, config):
    network.json(
        "seed",
        {
            "result": {
                "ssnlist": {
                    "0xccc": ssn("http://c"),
                    "0xaaa": ssn("http://a"),
                    "0xshort": {"arguments": ["a", "b", "c"]},
                    "0xnotstr": {"arguments": [1, 2, 3, 4, 5, 6]},
                    "0xnoargs": {"name": "x"},
                    "0xargsobj": {"arguments": {"5": "http://x"}},
                    "0xscalar": "oops",
                    "0xbbb": ssn("http://b"),
                }
            }
        },
    )

    registry = await discover("http://seed", config, network.transport)

    assert list(registry) == ["http://a", "http://b", "http://c", "http://seed"]


@pytest.mark.asyncio
async def test_empty_ssnlist_still_yields_seed(network, config):
    network.json("seed", {"result": {"ssnlist": {}}})

    registry = await discover("http://seed", config, network.transport)

    assert list(registry) == ["http://seed"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body, reason",
    [
        ({"id": "1"}, DiscoveryFailure.MISSING_RESULT),
        ([1, 2, 3], DiscoveryFailure.MISSING_RESULT),
        ({"result": "nope"}, DiscoveryFailure.RESULT_NOT_OBJECT),
        ({"result": None}, DiscoveryFailure.RESULT_NOT_OBJECT),
        ({"result": {"other": {}}}, DiscoveryFailure.MISSING_SSNLIST),
        ({"result": {"ssnlist": ["a"]}}, DiscoveryFailure.SSNLIST_NOT_OBJECT),
    ],
)
async def test_shape_failures_are_atomic(network, config, body, reason):
    network.json("seed", body)

    with pytest.raises(DiscoveryError) as exc_info:
        await discover("http://seed", config, network.transport)

    assert exc_info.value.reason is reason
    assert exc_info.value.seed == "http://seed"


@pytest.mark.asyncio
async def test_invalid_json(network, config):
    network.raw("seed", b"\x00\x01")

    with pytest.raises(DiscoveryError) as exc_info:
        await discover("http://seed", config, network.transport)

    assert exc_info.value.reason is DiscoveryFailure.INVALID_JSON


@pytest.mark.asyncio
async def test_unreachable_seed(network, config):
    network.refuse("seed")

    with pytest.raises(DiscoveryError) as exc_info:
        await discover("http://seed", config, network.transport)

    assert exc_info.value.reason is DiscoveryFailure.SEED_UNREACHABLE


def test_extract_ssn_entries_pairs():
    entries = extract_ssn_entries({"0xb": ssn("http://b"), "0xa": ssn("http://a")})

    assert entries == [("0xa", "http://a"), ("0xb", "http://b")]


@pytest.mark.asyncio
async def test_malformed_seed_url(network, config):
    with pytest.raises(DiscoveryError) as exc_info:
        await discover("http://seed:abc", config, network.transport)

    assert exc_info.value.reason is DiscoveryFailure.SEED_UNREACHABLE
    assert network.calls == []
