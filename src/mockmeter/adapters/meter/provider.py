"""Registry of named in-memory meters."""

import logging
import threading

from mockmeter.adapters.meter.in_memory import InMemoryMeter

logger = logging.getLogger(__name__)


class InMemoryMeterProvider:
    """In-memory implementation of the MeterProvider port.

    Hands out one ``InMemoryMeter`` per name, creating it on first use.
    ``meter()`` is safe to call from multiple threads; nothing else in
    this package is.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._registered: dict[str, InMemoryMeter] = {}

    def meter(self, name: str) -> InMemoryMeter:
        """Return the meter registered under name, creating it if needed."""
        with self._lock:
            existing = self._registered.get(name)
            if existing is not None:
                return existing
            meter = InMemoryMeter()
            self._registered[name] = meter
            logger.debug("Created meter %r", name)
            return meter
