import pytest

from zil_sleuth.config.settings import settings
from zil_sleuth.core.exceptions import ConfigurationError
from zil_sleuth.rpc.registry import NodeRegistry


def test_default_registry_has_main_url():
    registry = NodeRegistry.default()

    assert list(registry) == [settings.rpc.main_url]


def test_explicit_order_and_duplicates_kept():
    nodes = ["http://b", "http://a", "http://b", "not even a url"]
    registry = NodeRegistry.from_list(nodes)

    assert list(registry) == nodes
    assert list(registry) == list(registry)
    assert len(registry) == 4
    assert registry[1] == "http://a"


def test_registry_copies_input():
    nodes = ["http://a"]
    registry = NodeRegistry.from_list(nodes)
    nodes.append("http://b")

    assert list(registry) == ["http://a"]


def test_empty_registry_rejected():
    with pytest.raises(ConfigurationError):
        NodeRegistry.from_list([])
