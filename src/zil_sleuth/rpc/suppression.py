"""Repeat-failure budget for a single failover pass."""

from dataclasses import dataclass
from typing import Optional

from zil_sleuth.core.exceptions import ErrorKind

MAX_ERROR = 5


@dataclass
class ErrorSuppressionPolicy:
    """Tracks the last failure kind and how many times in a row it was seen.

    A new kind resets the budget. The same kind is tolerated ``max_error``
    times in a row; the next occurrence is refused and the caller should stop
    failing over.

    Instances are local to one dispatch call and must not be shared.
    """

    max_error: int = MAX_ERROR
    last_kind: Optional[ErrorKind] = None
    repeat_count: int = 0

    def admit(self, kind: ErrorKind) -> bool:
        """Record a failure of ``kind``; return False once the budget is spent."""
        if kind != self.last_kind:
            self.last_kind = kind
            self.repeat_count = 1
            return True
        if self.repeat_count < self.max_error:
            self.repeat_count += 1
            return True
        return False
