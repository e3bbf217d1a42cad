"""Port interfaces for the instrumentation API.

These protocols define the capability sets a metrics implementation must
provide. Typed instruments and calling code depend only on these
interfaces, so a recording double can stand in for a real SDK.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from mockmeter.core.models import KeyValue, Number
from mockmeter.core.options import OptionApplier

if TYPE_CHECKING:
    from mockmeter.core.instruments import (
        Float64Counter,
        Float64Gauge,
        Float64Measure,
        Int64Counter,
        Int64Gauge,
        Int64Measure,
        Measurement,
    )


@runtime_checkable
class LabelSet(Protocol):
    """Port for an immutable set of labels created by a meter."""

    def meter(self) -> "Meter":
        """Return the meter that created this label set."""
        ...


@runtime_checkable
class LabelSetDelegate(Protocol):
    """Port for label sets that forward to another label set.

    Implementations resolve the indirection one level via ``delegate()``.
    """

    def delegate(self) -> LabelSet:
        """Return the label set this wrapper forwards to."""
        ...


@runtime_checkable
class BoundInstrumentImpl(Protocol):
    """Port for an instrument bound to a label set."""

    def record_one(self, ctx: Any, number: Number) -> None:
        """Record a single value with the bound labels."""
        ...

    def unbind(self) -> None:
        """Release the binding."""
        ...


@runtime_checkable
class InstrumentImpl(Protocol):
    """Port for the generic instrument behind every typed instrument."""

    def bind(self, labels: LabelSet) -> BoundInstrumentImpl:
        """Bind the instrument to a label set."""
        ...

    def record_one(self, ctx: Any, number: Number, labels: LabelSet) -> None:
        """Record a single value with the given labels."""
        ...


@runtime_checkable
class Int64ObserverResult(Protocol):
    """Port handed to int64 observer callbacks."""

    def observe(self, value: int, labels: LabelSet) -> None:
        """Report one observed value."""
        ...


@runtime_checkable
class Float64ObserverResult(Protocol):
    """Port handed to float64 observer callbacks."""

    def observe(self, value: float, labels: LabelSet) -> None:
        """Report one observed value."""
        ...


Int64ObserverCallback = Callable[[Int64ObserverResult], None]
Float64ObserverCallback = Callable[[Float64ObserverResult], None]


@runtime_checkable
class Observer(Protocol):
    """Port for a registered observer."""

    def unregister(self) -> None:
        """Stop the observer's callback from being polled."""
        ...


@runtime_checkable
class Meter(Protocol):
    """Port for a named metrics domain.

    Examples: InMemoryMeter.
    """

    def labels(self, *key_values: KeyValue) -> LabelSet: ...

    def new_int64_counter(
        self, name: str, *options: OptionApplier
    ) -> "Int64Counter": ...

    def new_float64_counter(
        self, name: str, *options: OptionApplier
    ) -> "Float64Counter": ...

    def new_int64_gauge(self, name: str, *options: OptionApplier) -> "Int64Gauge": ...

    def new_float64_gauge(
        self, name: str, *options: OptionApplier
    ) -> "Float64Gauge": ...

    def new_int64_measure(
        self, name: str, *options: OptionApplier
    ) -> "Int64Measure": ...

    def new_float64_measure(
        self, name: str, *options: OptionApplier
    ) -> "Float64Measure": ...

    def register_int64_observer(
        self,
        name: str,
        callback: Int64ObserverCallback | None,
        *options: OptionApplier,
    ) -> Observer: ...

    def register_float64_observer(
        self,
        name: str,
        callback: Float64ObserverCallback | None,
        *options: OptionApplier,
    ) -> Observer: ...

    def record_batch(
        self, ctx: Any, labels: LabelSet, *measurements: "Measurement"
    ) -> None:
        """Record several measurements sharing one label set."""
        ...


@runtime_checkable
class MeterProvider(Protocol):
    """Port for a registry of named meters."""

    def meter(self, name: str) -> Meter:
        """Return the meter registered under name, creating it if needed."""
        ...
