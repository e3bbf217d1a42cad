"""Typed instruments over the generic instrument port.

Each wrapper converts native ``int``/``float`` values into a ``Number`` of
its own kind and forwards to the ``InstrumentImpl`` it wraps. Meters build
a generic instrument and hand it to one of the ``wrap_*`` functions.
"""

from typing import Any

from mockmeter.core.models import Number, NumberKind
from mockmeter.core.ports import BoundInstrumentImpl, InstrumentImpl, LabelSet


class Measurement:
    """A value paired with the instrument it belongs to.

    Created by the ``measurement()`` method of typed instruments and passed
    to ``Meter.record_batch``.
    """

    __slots__ = ("_instrument", "_number")

    def __init__(self, instrument: InstrumentImpl, number: Number) -> None:
        self._instrument = instrument
        self._number = number

    def instrument_impl(self) -> InstrumentImpl:
        return self._instrument

    @property
    def number(self) -> Number:
        return self._number

    def __repr__(self) -> str:
        return f"Measurement({self._instrument!r}, {self._number!r})"


class _TypedInstrument:
    _number_kind = NumberKind.INT64

    def __init__(self, instrument: InstrumentImpl) -> None:
        self._instrument = instrument

    def impl(self) -> InstrumentImpl:
        """Return the wrapped generic instrument."""
        return self._instrument

    def _number(self, value: int | float) -> Number:
        if self._number_kind is NumberKind.INT64:
            return Number.int64(value)  # type: ignore[arg-type]
        return Number.float64(value)

    def _record(self, ctx: Any, value: int | float, labels: LabelSet) -> None:
        self._instrument.record_one(ctx, self._number(value), labels)

    def _bind(self, labels: LabelSet) -> BoundInstrumentImpl:
        return self._instrument.bind(labels)

    def measurement(self, value: int | float) -> Measurement:
        """Create a measurement for use with ``Meter.record_batch``."""
        return Measurement(self._instrument, self._number(value))


class _TypedBoundInstrument:
    _number_kind = NumberKind.INT64

    def __init__(self, bound: BoundInstrumentImpl) -> None:
        self._bound = bound

    def impl(self) -> BoundInstrumentImpl:
        """Return the wrapped generic bound instrument."""
        return self._bound

    def _record(self, ctx: Any, value: int | float) -> None:
        if self._number_kind is NumberKind.INT64:
            number = Number.int64(value)  # type: ignore[arg-type]
        else:
            number = Number.float64(value)
        self._bound.record_one(ctx, number)

    def unbind(self) -> None:
        """Release the binding."""
        self._bound.unbind()


# Counters


class BoundInt64Counter(_TypedBoundInstrument):
    def add(self, ctx: Any, value: int) -> None:
        self._record(ctx, value)


class BoundFloat64Counter(_TypedBoundInstrument):
    _number_kind = NumberKind.FLOAT64

    def add(self, ctx: Any, value: float) -> None:
        self._record(ctx, value)


class Int64Counter(_TypedInstrument):
    """Counter of int64 values."""

    def add(self, ctx: Any, value: int, labels: LabelSet) -> None:
        """Add value to the counter for the given labels."""
        self._record(ctx, value, labels)

    def bind(self, labels: LabelSet) -> BoundInt64Counter:
        return BoundInt64Counter(self._bind(labels))


class Float64Counter(_TypedInstrument):
    """Counter of float64 values."""

    _number_kind = NumberKind.FLOAT64

    def add(self, ctx: Any, value: float, labels: LabelSet) -> None:
        """Add value to the counter for the given labels."""
        self._record(ctx, value, labels)

    def bind(self, labels: LabelSet) -> BoundFloat64Counter:
        return BoundFloat64Counter(self._bind(labels))


# Gauges


class BoundInt64Gauge(_TypedBoundInstrument):
    def set(self, ctx: Any, value: int) -> None:
        self._record(ctx, value)


class BoundFloat64Gauge(_TypedBoundInstrument):
    _number_kind = NumberKind.FLOAT64

    def set(self, ctx: Any, value: float) -> None:
        self._record(ctx, value)


class Int64Gauge(_TypedInstrument):
    """Gauge of int64 values."""

    def set(self, ctx: Any, value: int, labels: LabelSet) -> None:
        """Set the gauge to value for the given labels."""
        self._record(ctx, value, labels)

    def bind(self, labels: LabelSet) -> BoundInt64Gauge:
        return BoundInt64Gauge(self._bind(labels))


class Float64Gauge(_TypedInstrument):
    """Gauge of float64 values."""

    _number_kind = NumberKind.FLOAT64

    def set(self, ctx: Any, value: float, labels: LabelSet) -> None:
        """Set the gauge to value for the given labels."""
        self._record(ctx, value, labels)

    def bind(self, labels: LabelSet) -> BoundFloat64Gauge:
        return BoundFloat64Gauge(self._bind(labels))


# Measures


class BoundInt64Measure(_TypedBoundInstrument):
    def record(self, ctx: Any, value: int) -> None:
        self._record(ctx, value)


class BoundFloat64Measure(_TypedBoundInstrument):
    _number_kind = NumberKind.FLOAT64

    def record(self, ctx: Any, value: float) -> None:
        self._record(ctx, value)


class Int64Measure(_TypedInstrument):
    """Measure of int64 values."""

    def record(self, ctx: Any, value: int, labels: LabelSet) -> None:
        """Record value for the given labels."""
        self._record(ctx, value, labels)

    def bind(self, labels: LabelSet) -> BoundInt64Measure:
        return BoundInt64Measure(self._bind(labels))


class Float64Measure(_TypedInstrument):
    """Measure of float64 values."""

    _number_kind = NumberKind.FLOAT64

    def record(self, ctx: Any, value: float, labels: LabelSet) -> None:
        """Record value for the given labels."""
        self._record(ctx, value, labels)

    def bind(self, labels: LabelSet) -> BoundFloat64Measure:
        return BoundFloat64Measure(self._bind(labels))


def wrap_int64_counter_instrument(instrument: InstrumentImpl) -> Int64Counter:
    return Int64Counter(instrument)


def wrap_float64_counter_instrument(instrument: InstrumentImpl) -> Float64Counter:
    return Float64Counter(instrument)


def wrap_int64_gauge_instrument(instrument: InstrumentImpl) -> Int64Gauge:
    return Int64Gauge(instrument)


def wrap_float64_gauge_instrument(instrument: InstrumentImpl) -> Float64Gauge:
    return Float64Gauge(instrument)


def wrap_int64_measure_instrument(instrument: InstrumentImpl) -> Int64Measure:
    return Int64Measure(instrument)


def wrap_float64_measure_instrument(instrument: InstrumentImpl) -> Float64Measure:
    return Float64Measure(instrument)
