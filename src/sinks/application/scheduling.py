"""Last-write-wins gating of compilation results.

Callers that recompile on every edit (a form preview, a debounced API call)
may receive results out of order. Each request takes a ticket from the gate
before compiling; when the result arrives it is only published if no newer
ticket was issued in the meantime.

Example:
    gate = LatestResultGate()
    ticket = gate.issue()
    result = command.execute(config)
    if gate.publish(ticket, result):
        render(gate.latest)
"""

from __future__ import annotations

import logging
import threading
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LatestResultGate(Generic[T]):
    """Discards results belonging to superseded requests."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._issued = 0
        self._latest: T | None = None
        self._latest_ticket = 0

    def issue(self) -> int:
        """Return a new ticket, superseding every earlier one."""
        with self._lock:
            self._issued += 1
            return self._issued

    def is_current(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._issued

    def publish(self, ticket: int, result: T) -> bool:
        """Store ``result`` if ``ticket`` is still the newest one.

        Returns:
            True when the result was accepted, False when it was discarded.
        """
        with self._lock:
            if ticket != self._issued:
                logger.debug(f"Discarding result for ticket {ticket}, latest is {self._issued}")
                return False
            self._latest = result
            self._latest_ticket = ticket
            return True

    @property
    def latest(self) -> T | None:
        with self._lock:
            return self._latest

    @property
    def latest_ticket(self) -> int:
        with self._lock:
            return self._latest_ticket
