"""Data types of the recording meter.

Instruments, label sets and handles are what the meter hands out;
measurements and batches are what it records.
"""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from mockmeter.core import ports
from mockmeter.core.models import Key, LabelValue, Number, NumberKind, Options

if TYPE_CHECKING:
    from mockmeter.adapters.meter.in_memory import InMemoryMeter

logger = logging.getLogger(__name__)


class Kind(IntEnum):
    """Instrument kind."""

    COUNTER = 0
    GAUGE = 1
    MEASURE = 2
    OBSERVER = 3


@dataclass(frozen=True, eq=False)
class LabelSet:
    """Labels created by ``InMemoryMeter.labels``.

    Attributes:
        owner: The meter that created this label set. Recordings made
            with it are appended to this meter's batches.
        labels: Read-only mapping of label key to value.
    """

    owner: "InMemoryMeter"
    labels: MappingProxyType[Key, LabelValue] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def meter(self) -> "InMemoryMeter":
        return self.owner


@dataclass(frozen=True)
class Measurement:
    """One recorded value and the instrument it was recorded against."""

    number: Number
    instrument: "Instrument"


@dataclass(frozen=True)
class Batch:
    """One recording event.

    Attributes:
        measurements: Measurements in the order they were given.
        ctx: The context passed to the recording call, stored as-is.
        label_set: Labels shared by every measurement in the batch.
    """

    measurements: tuple[Measurement, ...]
    ctx: Any
    label_set: LabelSet


def resolve_label_set(labels: Any) -> LabelSet:
    """Resolve labels to a concrete ``LabelSet``.

    Follows at most one ``delegate()`` step.

    Raises:
        TypeError: If the result is not a label set created by an
            in-memory meter.
    """
    if not isinstance(labels, LabelSet) and isinstance(labels, ports.LabelSetDelegate):
        labels = labels.delegate()
    if not isinstance(labels, LabelSet):
        raise TypeError(
            f"expected a LabelSet created by InMemoryMeter, got {type(labels).__name__}"
        )
    return labels


def _record(
    ctx: Any, label_set: LabelSet, instrument: "Instrument", number: Number
) -> None:
    label_set.owner._record_batch(
        ctx, label_set, Measurement(number=number, instrument=instrument)
    )


@dataclass(frozen=True, eq=False)
class Instrument:
    """Identity and configuration of one declared metric.

    Holds no recorded values. Two instruments with the same name are
    still distinct objects.
    """

    name: str
    kind: Kind
    number_kind: NumberKind
    opts: Options = field(default_factory=Options)

    def bind(self, labels: ports.LabelSet) -> "Handle":
        """Bind this instrument to a label set."""
        return Handle(instrument=self, label_set=resolve_label_set(labels))

    def record_one(self, ctx: Any, number: Number, labels: ports.LabelSet) -> None:
        """Record a single value as a batch of one."""
        _record(ctx, resolve_label_set(labels), self, number)

    def __repr__(self) -> str:
        return (
            f"Instrument(name={self.name!r}, kind={self.kind.name}, "
            f"number_kind={self.number_kind.value})"
        )


@dataclass(frozen=True, eq=False)
class Handle:
    """An instrument bound to a label set."""

    instrument: Instrument
    label_set: LabelSet

    def record_one(self, ctx: Any, number: Number) -> None:
        _record(ctx, self.label_set, self.instrument, number)

    def unbind(self) -> None:
        # Nothing is held per binding.
        logger.debug("Unbind %s", self.instrument.name)
