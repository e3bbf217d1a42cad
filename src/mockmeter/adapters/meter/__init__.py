"""Recording meter implementing the core ports."""

from mockmeter.adapters.meter.in_memory import InMemoryMeter
from mockmeter.adapters.meter.models import (
    Batch,
    Handle,
    Instrument,
    Kind,
    LabelSet,
    Measurement,
)
from mockmeter.adapters.meter.observer import (
    Float64ObserverResult,
    Int64ObserverResult,
    Observer,
)
from mockmeter.adapters.meter.provider import InMemoryMeterProvider

__all__ = [
    "Batch",
    "Float64ObserverResult",
    "Handle",
    "InMemoryMeter",
    "InMemoryMeterProvider",
    "Instrument",
    "Int64ObserverResult",
    "Kind",
    "LabelSet",
    "Measurement",
    "Observer",
]
