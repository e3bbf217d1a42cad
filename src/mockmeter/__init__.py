"""mockmeter: an in-memory recording double for metrics instrumentation.

Example:
    ```python
    from mockmeter import InMemoryMeterProvider, Key

    provider = InMemoryMeterProvider()
    meter = provider.meter("svc")
    requests = meter.new_int64_counter("requests")
    requests.add(ctx, 5, meter.labels(Key("route").string("/x")))
    assert len(meter.measurement_batches) == 1
    ```
"""

from mockmeter.adapters.meter import (
    Batch,
    Handle,
    InMemoryMeter,
    InMemoryMeterProvider,
    Instrument,
    Kind,
    LabelSet,
    Measurement,
    Observer,
)
from mockmeter.core.labels import DelegatingLabelSet
from mockmeter.core.models import (
    BACKGROUND_CONTEXT,
    Key,
    KeyValue,
    Number,
    NumberKind,
    Options,
)
from mockmeter.core.options import (
    with_absolute,
    with_description,
    with_keys,
    with_monotonic,
    with_unit,
)

__all__ = [
    "BACKGROUND_CONTEXT",
    "Batch",
    "DelegatingLabelSet",
    "Handle",
    "InMemoryMeter",
    "InMemoryMeterProvider",
    "Instrument",
    "Key",
    "KeyValue",
    "Kind",
    "LabelSet",
    "Measurement",
    "Number",
    "NumberKind",
    "Observer",
    "Options",
    "with_absolute",
    "with_description",
    "with_keys",
    "with_monotonic",
    "with_unit",
]
