"""BDD step definitions for recording features."""

import contextvars
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from mockmeter.adapters.meter import (
    InMemoryMeter,
    InMemoryMeterProvider,
    LabelSet,
    Observer,
)
from mockmeter.core.instruments import Int64Counter
from mockmeter.core.models import Key


@dataclass
class RecordingScenarioContext:
    """Shared state between steps in a recording scenario."""

    provider: InMemoryMeterProvider | None = None
    meter: InMemoryMeter | None = None
    looked_up: InMemoryMeter | None = None
    counter: Int64Counter | None = None
    labels: LabelSet | None = None
    observers: dict[str, Observer] = field(default_factory=dict)
    polled: list[str] = field(default_factory=list)
    ctx: contextvars.Context = field(default_factory=contextvars.copy_context)


@pytest.fixture
def scenario_ctx() -> RecordingScenarioContext:
    """Fresh scenario context for each test."""
    return RecordingScenarioContext()


# === Background Steps ===
@given("a meter provider")
def given_provider(scenario_ctx: RecordingScenarioContext) -> None:
    scenario_ctx.provider = InMemoryMeterProvider()


@given(parsers.parse('a meter named "{name}"'))
def given_meter(scenario_ctx: RecordingScenarioContext, name: str) -> None:
    assert scenario_ctx.provider is not None
    scenario_ctx.meter = scenario_ctx.provider.meter(name)


@given(parsers.parse('labels with route "{route}"'))
def given_labels(scenario_ctx: RecordingScenarioContext, route: str) -> None:
    assert scenario_ctx.meter is not None
    scenario_ctx.labels = scenario_ctx.meter.labels(Key("route").string(route))


# === Instrument Steps ===
@given(parsers.parse('an int64 counter named "{name}"'))
def given_counter(scenario_ctx: RecordingScenarioContext, name: str) -> None:
    assert scenario_ctx.meter is not None
    scenario_ctx.counter = scenario_ctx.meter.new_int64_counter(name)


@given(parsers.parse('an observer named "{name}" reporting {value:d}'))
def given_observer(
    scenario_ctx: RecordingScenarioContext, name: str, value: int
) -> None:
    assert scenario_ctx.meter is not None

    def report(result) -> None:
        scenario_ctx.polled.append(name)
        result.observe(value, scenario_ctx.labels)

    scenario_ctx.observers[name] = scenario_ctx.meter.register_int64_observer(
        name, report
    )


# === Recording Steps ===
@when(parsers.parse("the counter adds {value:d}"))
def when_counter_adds(scenario_ctx: RecordingScenarioContext, value: int) -> None:
    assert scenario_ctx.counter is not None
    scenario_ctx.counter.add(scenario_ctx.ctx, value, scenario_ctx.labels)


@when(parsers.parse("the bound counter adds {value:d}"))
def when_bound_counter_adds(
    scenario_ctx: RecordingScenarioContext, value: int
) -> None:
    assert scenario_ctx.counter is not None
    bound = scenario_ctx.counter.bind(scenario_ctx.labels)
    bound.add(scenario_ctx.ctx, value)
    bound.unbind()


@when(parsers.parse("a batch records the counter with {first:d} and {second:d}"))
def when_batch_records(
    scenario_ctx: RecordingScenarioContext, first: int, second: int
) -> None:
    assert scenario_ctx.meter is not None and scenario_ctx.counter is not None
    scenario_ctx.meter.record_batch(
        scenario_ctx.ctx,
        scenario_ctx.labels,
        scenario_ctx.counter.measurement(first),
        scenario_ctx.counter.measurement(second),
    )


@when(parsers.parse('the meter named "{name}" is looked up again'))
def when_meter_looked_up(scenario_ctx: RecordingScenarioContext, name: str) -> None:
    assert scenario_ctx.provider is not None
    scenario_ctx.looked_up = scenario_ctx.provider.meter(name)


# === Observer Steps ===
@when(parsers.parse('the observer "{name}" is unregistered'))
def when_observer_unregistered(
    scenario_ctx: RecordingScenarioContext, name: str
) -> None:
    scenario_ctx.observers[name].unregister()


@when("the observers run")
def when_observers_run(scenario_ctx: RecordingScenarioContext) -> None:
    assert scenario_ctx.meter is not None
    scenario_ctx.meter.run_observers()


# === Assertions ===
@then(parsers.re(r"the meter has (?P<count>\d+) batch(es)?"))
def then_batch_count(scenario_ctx: RecordingScenarioContext, count: str) -> None:
    assert scenario_ctx.meter is not None
    assert len(scenario_ctx.meter.measurement_batches) == int(count)


@then(
    parsers.parse('batch {index:d} has a measurement of "{name}" with value {value:d}')
)
def then_batch_measurement(
    scenario_ctx: RecordingScenarioContext, index: int, name: str, value: int
) -> None:
    assert scenario_ctx.meter is not None
    batch = scenario_ctx.meter.measurement_batches[index - 1]
    assert any(
        m.instrument.name == name and m.number.as_int64() == value
        for m in batch.measurements
    )


@then(parsers.parse("batch {index:d} has {count:d} measurements"))
def then_batch_size(
    scenario_ctx: RecordingScenarioContext, index: int, count: int
) -> None:
    assert scenario_ctx.meter is not None
    batch = scenario_ctx.meter.measurement_batches[index - 1]
    assert len(batch.measurements) == count


@then(parsers.parse('batch {index:d} has route "{route}"'))
def then_batch_route(
    scenario_ctx: RecordingScenarioContext, index: int, route: str
) -> None:
    assert scenario_ctx.meter is not None
    batch = scenario_ctx.meter.measurement_batches[index - 1]
    assert batch.label_set.labels[Key("route")] == route


@then("the same meter is returned")
def then_same_meter(scenario_ctx: RecordingScenarioContext) -> None:
    assert scenario_ctx.looked_up is scenario_ctx.meter


@then(parsers.parse('the polled observers are "{names}"'))
def then_polled(scenario_ctx: RecordingScenarioContext, names: str) -> None:
    assert scenario_ctx.polled == names.split(",")


@then(parsers.parse("the meter still lists {count:d} observers"))
def then_observer_count(scenario_ctx: RecordingScenarioContext, count: int) -> None:
    assert scenario_ctx.meter is not None
    assert len(scenario_ctx.meter.observers) == count
