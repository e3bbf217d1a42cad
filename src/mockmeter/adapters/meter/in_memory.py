"""In-memory recording meter."""

import logging
from types import MappingProxyType
from typing import Any

from mockmeter.adapters.meter.models import (
    Batch,
    Instrument,
    Kind,
    LabelSet,
    Measurement,
    resolve_label_set,
)
from mockmeter.adapters.meter.observer import (
    Float64ObserverResult,
    Int64ObserverResult,
    Observer,
    ObserverCallback,
    wrap_observer_callback,
)
from mockmeter.core import instruments, ports
from mockmeter.core.models import Key, KeyValue, LabelValue, NumberKind, Options
from mockmeter.core.options import (
    OptionApplier,
    apply_counter_options,
    apply_gauge_options,
    apply_measure_options,
    apply_observer_options,
)

logger = logging.getLogger(__name__)


class InMemoryMeter:
    """In-memory implementation of the Meter port.

    Records every measurement as a ``Batch`` in a list instead of
    aggregating or exporting it. Suitable for asserting on instrumentation
    in tests.

    Attributes:
        measurement_batches: Every batch recorded so far, in call order.
        observers: Every observer ever registered, including unregistered
            ones (check ``Observer.dead``).

    Example:
        ```python
        meter = InMemoryMeter()
        requests = meter.new_int64_counter("requests")
        requests.add(ctx, 5, meter.labels(Key("route").string("/x")))
        assert meter.measurement_batches[0].measurements[0].number.as_int64() == 5
        ```
    """

    def __init__(self) -> None:
        self.measurement_batches: list[Batch] = []
        self.observers: list[Observer] = []

    def labels(self, *key_values: KeyValue) -> LabelSet:
        """Create a label set. Later values win for duplicate keys."""
        labels: dict[Key, LabelValue] = {}
        for kv in key_values:
            labels[kv.key] = kv.value
        return LabelSet(owner=self, labels=MappingProxyType(labels))

    def _new_instrument(
        self, name: str, kind: Kind, number_kind: NumberKind, opts: Options
    ) -> Instrument:
        instrument = Instrument(
            name=name, kind=kind, number_kind=number_kind, opts=opts
        )
        logger.debug("Created %r", instrument)
        return instrument

    def _new_counter_instrument(
        self, name: str, number_kind: NumberKind, options: tuple[OptionApplier, ...]
    ) -> Instrument:
        opts = Options()
        apply_counter_options(opts, *options)
        return self._new_instrument(name, Kind.COUNTER, number_kind, opts)

    def _new_gauge_instrument(
        self, name: str, number_kind: NumberKind, options: tuple[OptionApplier, ...]
    ) -> Instrument:
        opts = Options()
        apply_gauge_options(opts, *options)
        return self._new_instrument(name, Kind.GAUGE, number_kind, opts)

    def _new_measure_instrument(
        self, name: str, number_kind: NumberKind, options: tuple[OptionApplier, ...]
    ) -> Instrument:
        opts = Options()
        apply_measure_options(opts, *options)
        return self._new_instrument(name, Kind.MEASURE, number_kind, opts)

    def new_int64_counter(
        self, name: str, *options: OptionApplier
    ) -> instruments.Int64Counter:
        instrument = self._new_counter_instrument(name, NumberKind.INT64, options)
        return instruments.wrap_int64_counter_instrument(instrument)

    def new_float64_counter(
        self, name: str, *options: OptionApplier
    ) -> instruments.Float64Counter:
        instrument = self._new_counter_instrument(name, NumberKind.FLOAT64, options)
        return instruments.wrap_float64_counter_instrument(instrument)

    def new_int64_gauge(
        self, name: str, *options: OptionApplier
    ) -> instruments.Int64Gauge:
        instrument = self._new_gauge_instrument(name, NumberKind.INT64, options)
        return instruments.wrap_int64_gauge_instrument(instrument)

    def new_float64_gauge(
        self, name: str, *options: OptionApplier
    ) -> instruments.Float64Gauge:
        instrument = self._new_gauge_instrument(name, NumberKind.FLOAT64, options)
        return instruments.wrap_float64_gauge_instrument(instrument)

    def new_int64_measure(
        self, name: str, *options: OptionApplier
    ) -> instruments.Int64Measure:
        instrument = self._new_measure_instrument(name, NumberKind.INT64, options)
        return instruments.wrap_int64_measure_instrument(instrument)

    def new_float64_measure(
        self, name: str, *options: OptionApplier
    ) -> instruments.Float64Measure:
        instrument = self._new_measure_instrument(name, NumberKind.FLOAT64, options)
        return instruments.wrap_float64_measure_instrument(instrument)

    def register_int64_observer(
        self,
        name: str,
        callback: ports.Int64ObserverCallback | None,
        *options: OptionApplier,
    ) -> Observer:
        """Register an observer polled by ``run_observers``.

        Args:
            name: Instrument name.
            callback: Called with an ``Int64ObserverResult`` on each poll.
                ``None`` registers an observer that reports nothing.
            *options: Observer options.
        """
        wrapped = wrap_observer_callback(callback, Int64ObserverResult)
        return self._new_observer(name, wrapped, NumberKind.INT64, options)

    def register_float64_observer(
        self,
        name: str,
        callback: ports.Float64ObserverCallback | None,
        *options: OptionApplier,
    ) -> Observer:
        """Register an observer polled by ``run_observers``.

        Args:
            name: Instrument name.
            callback: Called with a ``Float64ObserverResult`` on each poll.
                ``None`` registers an observer that reports nothing.
            *options: Observer options.
        """
        wrapped = wrap_observer_callback(callback, Float64ObserverResult)
        return self._new_observer(name, wrapped, NumberKind.FLOAT64, options)

    def _new_observer(
        self,
        name: str,
        callback: ObserverCallback,
        number_kind: NumberKind,
        options: tuple[OptionApplier, ...],
    ) -> Observer:
        opts = Options()
        apply_observer_options(opts, *options)
        instrument = self._new_instrument(name, Kind.OBSERVER, number_kind, opts)
        observer = Observer(instrument=instrument, meter=self, callback=callback)
        self.observers.append(observer)
        return observer

    def record_batch(
        self,
        ctx: Any,
        labels: ports.LabelSet,
        *measurements: instruments.Measurement,
    ) -> None:
        """Record measurements as a single batch sharing one label set.

        Raises:
            TypeError: If labels or a measurement's instrument did not come
                from an in-memory meter.
        """
        label_set = resolve_label_set(labels)
        recorded = []
        for measurement in measurements:
            instrument = measurement.instrument_impl()
            if not isinstance(instrument, Instrument):
                raise TypeError(
                    "expected a measurement of an InMemoryMeter instrument, "
                    f"got {type(instrument).__name__}"
                )
            recorded.append(
                Measurement(number=measurement.number, instrument=instrument)
            )
        self._record_batch(ctx, label_set, *recorded)

    def _record_batch(
        self, ctx: Any, label_set: LabelSet, *measurements: Measurement
    ) -> None:
        self.measurement_batches.append(
            Batch(measurements=tuple(measurements), ctx=ctx, label_set=label_set)
        )

    def run_observers(self) -> None:
        """Invoke the callback of every live observer in registration order."""
        logger.debug("Running observers of %r", self)
        # Observers registered during the run are polled next time.
        for observer in list(self.observers):
            if observer.dead:
                continue
            observer._run()
