"""Forwarding label set."""

from collections.abc import Callable

from mockmeter.core.ports import LabelSet, Meter


class DelegatingLabelSet:
    """Label set that forwards to a label set resolved on demand.

    Useful when labels are created before the implementing meter is known.
    Implementations unwrap it through ``delegate()``.

    Args:
        resolve: Zero-argument callable returning the concrete label set.
    """

    def __init__(self, resolve: Callable[[], LabelSet]) -> None:
        self._resolve = resolve

    def delegate(self) -> LabelSet:
        return self._resolve()

    def meter(self) -> Meter:
        return self._resolve().meter()
