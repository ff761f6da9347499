"""Ordered set of candidate Zilliqa endpoints."""

from typing import Iterable, Iterator, Optional, Tuple

from zil_sleuth.config.settings import settings
from zil_sleuth.core.exceptions import ConfigurationError


class NodeRegistry:
    """Endpoints tried in construction order; never mutated once built."""

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Iterable[str]):
        nodes = tuple(nodes)
        if not nodes:
            raise ConfigurationError("Node registry needs at least one endpoint")
        self._nodes: Tuple[str, ...] = nodes

    @classmethod
    def default(cls, url: Optional[str] = None) -> "NodeRegistry":
        """Registry holding only the configured production endpoint."""
        return cls([url or settings.rpc.main_url])

    @classmethod
    def from_list(cls, nodes: Iterable[str]) -> "NodeRegistry":
        """Registry with an explicit order. Addresses are not validated here."""
        return cls(nodes)

    @property
    def nodes(self) -> Tuple[str, ...]:
        return self._nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> str:
        return self._nodes[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, NodeRegistry):
            return self._nodes == other._nodes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._nodes)

    def __repr__(self) -> str:
        return f"NodeRegistry({list(self._nodes)!r})"
