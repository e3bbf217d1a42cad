"""Observers: instruments polled through a callback.

A registered callback is typed for int64 or float64 values. The meter
stores it wrapped as an ``ObserverCallback`` that takes the kind-erased
``_ObserverResult`` and hands the callback the matching typed result.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mockmeter.adapters.meter.models import Instrument
from mockmeter.core import ports
from mockmeter.core.models import BACKGROUND_CONTEXT, Number

if TYPE_CHECKING:
    from mockmeter.adapters.meter.in_memory import InMemoryMeter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _ObserverResult:
    """Result bound to the instrument of the observer being polled."""

    instrument: Instrument

    def observe(self, number: Number, labels: ports.LabelSet) -> None:
        self.instrument.record_one(BACKGROUND_CONTEXT, number, labels)


@dataclass(frozen=True)
class Int64ObserverResult:
    result: _ObserverResult

    def observe(self, value: int, labels: ports.LabelSet) -> None:
        self.result.observe(Number.int64(value), labels)


@dataclass(frozen=True)
class Float64ObserverResult:
    result: _ObserverResult

    def observe(self, value: float, labels: ports.LabelSet) -> None:
        self.result.observe(Number.float64(value), labels)


ObserverResult = Int64ObserverResult | Float64ObserverResult
ObserverCallback = Callable[[_ObserverResult], None]


def _noop(result: _ObserverResult) -> None:
    pass


def wrap_observer_callback(
    callback: Callable[..., None] | None,
    result_type: type[ObserverResult],
) -> ObserverCallback:
    """Adapt a typed observer callback to the kind-erased signature.

    A ``None`` callback becomes a no-op.

    Raises:
        TypeError: If callback is neither None nor callable.
    """
    if callback is None:
        return _noop
    if not callable(callback):
        raise TypeError("observer callback must be callable")

    def wrapped(result: _ObserverResult) -> None:
        callback(result_type(result))

    return wrapped


class Observer:
    """A registered observer.

    Attributes:
        instrument: The observer's instrument (kind ``OBSERVER``).
        meter: The meter it was registered with.
        dead: True once ``unregister()`` has been called.
    """

    def __init__(
        self,
        instrument: Instrument,
        meter: "InMemoryMeter",
        callback: ObserverCallback,
    ) -> None:
        self.instrument = instrument
        self.meter = meter
        self.dead = False
        self._callback = callback

    def unregister(self) -> None:
        """Mark the observer dead. Calling it again has no further effect."""
        if not self.dead:
            logger.debug("Unregistered observer %s", self.instrument.name)
        self.dead = True

    def _run(self) -> None:
        self._callback(_ObserverResult(instrument=self.instrument))

    def __repr__(self) -> str:
        state = "dead" if self.dead else "live"
        return f"Observer({self.instrument.name!r}, {state})"
