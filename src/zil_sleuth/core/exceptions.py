"""Custom exceptions for zil_sleuth package."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Failure categories observed while talking to a node."""

    CONNECTION = "connection"
    TIMEOUT = "timeout"
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    INVALID_URL = "invalid_url"
    INVALID_JSON = "invalid_json"
    UNEXPECTED_SHAPE = "unexpected_shape"


class DiscoveryFailure(str, Enum):
    """Which expectation about the seed response was not met."""

    SEED_UNREACHABLE = "seed_unreachable"
    INVALID_JSON = "invalid_json"
    MISSING_RESULT = "missing_result"
    RESULT_NOT_OBJECT = "result_not_object"
    MISSING_SSNLIST = "missing_ssnlist"
    SSNLIST_NOT_OBJECT = "ssnlist_not_object"


class ZilSleuthError(Exception):
    """Base exception for zil_sleuth package."""

    pass


class ConfigurationError(ZilSleuthError):
    """Exception raised for configuration-related errors."""

    pass


class DispatchError(ZilSleuthError):
    """Base class for failures of a dispatch call."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind, node: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.node = node


class TransportError(DispatchError):
    """No response body could be obtained from a node."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.NETWORK,
        node: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, kind, node)
        self.status_code = status_code


class ProtocolError(DispatchError):
    """A response body was received but did not decode into the requested shape."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.UNEXPECTED_SHAPE,
        node: Optional[str] = None,
    ):
        super().__init__(message, kind, node)


class ExhaustionError(DispatchError):
    """Every node in the registry was tried without success.

    Raised through :meth:`from_last_error`, which returns an instance that is
    also a ProtocolError or TransportError matching the last failure, so
    callers catching either family still see it.
    """

    def __init__(self, last_error: DispatchError, attempts: int):
        super().__init__(
            f"All {attempts} node(s) failed, last error: {last_error}",
            last_error.kind,
            last_error.node,
        )
        self.last_error = last_error
        self.attempts = attempts

    @classmethod
    def from_last_error(cls, last_error: DispatchError, attempts: int) -> "ExhaustionError":
        if isinstance(last_error, ProtocolError):
            return ProtocolExhaustionError(last_error, attempts)
        if isinstance(last_error, TransportError):
            error = TransportExhaustionError(last_error, attempts)
            error.status_code = last_error.status_code
            return error
        return cls(last_error, attempts)


class ProtocolExhaustionError(ExhaustionError, ProtocolError):
    """Registry exhausted; the last node returned an undecodable body."""


class TransportExhaustionError(ExhaustionError, TransportError):
    """Registry exhausted; the last node could not be reached."""


class DiscoveryError(ZilSleuthError):
    """Bootstrap discovery could not produce a node registry."""

    def __init__(self, reason: DiscoveryFailure, seed: str, detail: str = ""):
        message = f"Discovery through {seed} failed: {reason.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.reason = reason
        self.seed = seed


class RPCResponseError(ZilSleuthError):
    """A node answered with a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data=None):
        super().__init__(f"RPC error {code}: {message}")
        self.code = code
        self.message = message
        self.data = data


class PipelineError(ZilSleuthError):
    """Exception raised for pipeline-related errors."""

    pass
