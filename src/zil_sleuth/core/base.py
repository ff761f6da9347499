"""Abstract base classes for zil_sleuth package."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from zil_sleuth.config.settings import settings


@dataclass
class RpcConfig:
    """Configuration for RPC clients."""

    timeout: Optional[float] = field(default_factory=lambda: settings.rpc.timeout)
    max_error: int = field(default_factory=lambda: settings.rpc.max_error)
    headers: Dict[str, str] = field(
        default_factory=lambda: {"content-type": "application/json"}
    )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.max_error < 1:
            raise ValueError("max_error must be at least 1")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive or None")


class BaseSource(ABC):
    """Abstract base class for DLT source factories."""

    def __init__(self, client: Any):
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def get_available_sources(self) -> List[str]:
        """Return list of available source names."""
        pass
