"""Shared test fixtures for all test modules."""

import contextvars

import pytest

from mockmeter.adapters.meter.in_memory import InMemoryMeter
from mockmeter.adapters.meter.models import LabelSet
from mockmeter.adapters.meter.provider import InMemoryMeterProvider
from mockmeter.core.models import Key


@pytest.fixture
def provider() -> InMemoryMeterProvider:
    """Provide an empty meter provider."""
    return InMemoryMeterProvider()


@pytest.fixture
def meter(provider: InMemoryMeterProvider) -> InMemoryMeter:
    """Provide a fresh meter named "svc"."""
    return provider.meter("svc")


@pytest.fixture
def ctx() -> contextvars.Context:
    """Provide a context to pass to recording calls."""
    return contextvars.copy_context()


@pytest.fixture
def route_labels(meter: InMemoryMeter) -> LabelSet:
    """Label set with a single route label."""
    return meter.labels(Key("route").string("/x"))
