"""Core value types for the instrumentation API."""

import contextvars
from dataclasses import dataclass, field
from enum import Enum

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

LabelValue = str | int | float | bool

# Recording calls accept any context object; observers record with this one.
BACKGROUND_CONTEXT = contextvars.Context()


class NumberKind(Enum):
    """Numeric representation of an instrument's values."""

    INT64 = "int64"
    FLOAT64 = "float64"


@dataclass(frozen=True)
class Number:
    """A numeric value tagged with its kind.

    Use the ``int64`` and ``float64`` constructors rather than building
    instances directly.

    Attributes:
        kind: Which representation ``value`` holds.
        value: The raw Python value (``int`` or ``float``).
    """

    kind: NumberKind
    value: int | float

    @classmethod
    def int64(cls, value: int) -> "Number":
        """Create an int64 number.

        Raises:
            TypeError: If value is not an integer.
            OverflowError: If value does not fit in a signed 64-bit integer.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"int64 number requires an int, got {type(value).__name__}")
        if not INT64_MIN <= value <= INT64_MAX:
            raise OverflowError(f"{value} is out of int64 range")
        return cls(NumberKind.INT64, value)

    @classmethod
    def float64(cls, value: float) -> "Number":
        """Create a float64 number.

        Raises:
            TypeError: If value is not an int or float.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(
                f"float64 number requires a float, got {type(value).__name__}"
            )
        return cls(NumberKind.FLOAT64, float(value))

    def as_int64(self) -> int:
        """Return the value of an int64 number."""
        if self.kind is not NumberKind.INT64:
            raise TypeError(f"cannot read {self.kind.value} number as int64")
        return int(self.value)

    def as_float64(self) -> float:
        """Return the value of a float64 number."""
        if self.kind is not NumberKind.FLOAT64:
            raise TypeError(f"cannot read {self.kind.value} number as float64")
        return float(self.value)

    def coerce_to_float64(self) -> float:
        """Return the value as a float regardless of kind."""
        return float(self.value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class KeyValue:
    """A single label: a key paired with its value."""

    key: "Key"
    value: LabelValue


@dataclass(frozen=True)
class Key:
    """A label key.

    Example:
        ```python
        route = Key("route")
        labels = meter.labels(route.string("/x"), Key("retries").int64(2))
        ```
    """

    name: str

    def string(self, value: str) -> KeyValue:
        return KeyValue(self, value)

    def int64(self, value: int) -> KeyValue:
        return KeyValue(self, value)

    def float64(self, value: float) -> KeyValue:
        return KeyValue(self, value)

    def boolean(self, value: bool) -> KeyValue:
        return KeyValue(self, value)


@dataclass
class Options:
    """Configuration shared by all instrument kinds.

    Attributes:
        description: Human-readable description of the instrument.
        unit: Unit of the recorded values (e.g., "ms", "By").
        keys: Recommended label keys.
        alternate: Whether the instrument's default behavior is flipped
            (non-monotonic counter, monotonic gauge or observer,
            non-absolute measure).
    """

    description: str = ""
    unit: str = ""
    keys: tuple[Key, ...] = field(default_factory=tuple)
    alternate: bool = False
