"""Option appliers for instrument configuration.

Each option knows which instrument families it applies to. Passing an
option to a family it does not support raises ``TypeError``.
"""

from dataclasses import dataclass

from mockmeter.core.models import Key, Options


class OptionApplier:
    """Base class for instrument options.

    Subclasses override the ``apply_*`` methods for the instrument
    families they configure.
    """

    def _unsupported(self, family: str) -> None:
        raise TypeError(f"{type(self).__name__} does not apply to {family} instruments")

    def apply_counter(self, opts: Options) -> None:
        self._unsupported("counter")

    def apply_gauge(self, opts: Options) -> None:
        self._unsupported("gauge")

    def apply_measure(self, opts: Options) -> None:
        self._unsupported("measure")

    def apply_observer(self, opts: Options) -> None:
        self._unsupported("observer")


class _CommonOption(OptionApplier):
    """Option that applies identically to every instrument family."""

    def apply(self, opts: Options) -> None:
        raise NotImplementedError

    def apply_counter(self, opts: Options) -> None:
        self.apply(opts)

    def apply_gauge(self, opts: Options) -> None:
        self.apply(opts)

    def apply_measure(self, opts: Options) -> None:
        self.apply(opts)

    def apply_observer(self, opts: Options) -> None:
        self.apply(opts)


@dataclass(frozen=True)
class _Description(_CommonOption):
    description: str

    def apply(self, opts: Options) -> None:
        opts.description = self.description


@dataclass(frozen=True)
class _Unit(_CommonOption):
    unit: str

    def apply(self, opts: Options) -> None:
        opts.unit = self.unit


@dataclass(frozen=True)
class _Keys(_CommonOption):
    keys: tuple[Key, ...]

    def apply(self, opts: Options) -> None:
        opts.keys = opts.keys + self.keys


@dataclass(frozen=True)
class _Monotonic(OptionApplier):
    monotonic: bool

    def apply_counter(self, opts: Options) -> None:
        # Counters are monotonic unless told otherwise.
        opts.alternate = not self.monotonic

    def apply_gauge(self, opts: Options) -> None:
        opts.alternate = self.monotonic

    def apply_observer(self, opts: Options) -> None:
        opts.alternate = self.monotonic


@dataclass(frozen=True)
class _Absolute(OptionApplier):
    absolute: bool

    def apply_measure(self, opts: Options) -> None:
        opts.alternate = not self.absolute


def with_description(description: str) -> OptionApplier:
    """Set the instrument description."""
    return _Description(description)


def with_unit(unit: str) -> OptionApplier:
    """Set the unit of the recorded values."""
    return _Unit(unit)


def with_keys(*keys: Key) -> OptionApplier:
    """Append recommended label keys. Repeated use accumulates keys."""
    return _Keys(tuple(keys))


def with_monotonic(monotonic: bool) -> OptionApplier:
    """Set monotonicity of a counter, gauge or observer."""
    return _Monotonic(monotonic)


def with_absolute(absolute: bool) -> OptionApplier:
    """Set whether a measure only accepts non-negative values."""
    return _Absolute(absolute)


def apply_counter_options(opts: Options, *options: OptionApplier) -> None:
    for option in options:
        option.apply_counter(opts)


def apply_gauge_options(opts: Options, *options: OptionApplier) -> None:
    for option in options:
        option.apply_gauge(opts)


def apply_measure_options(opts: Options, *options: OptionApplier) -> None:
    for option in options:
        option.apply_measure(opts)


def apply_observer_options(opts: Options, *options: OptionApplier) -> None:
    for option in options:
        option.apply_observer(opts)
