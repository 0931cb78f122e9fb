"""Tagged values accepted by the encoder."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union


class ValueKind(str, Enum):
    """Variant tag of an EncodableValue."""

    INTEGER = "integer"
    TEXT = "text"
    LONG = "long"
    INTEGER_SEQUENCE = "integer_sequence"


Payload = Union[int, str, Tuple[int, ...]]


def _is_int(value: object) -> bool:
    # bool is an int subclass but is not an integer value here
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class EncodableValue:
    """
    Immutable tagged value.

    The kind alone decides the encoding rule. Use the classmethod
    constructors rather than building instances directly.

    Raises:
        TypeError: If the payload does not match the kind
    """

    kind: ValueKind
    payload: Payload

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ValueKind):
            raise TypeError(f"kind must be a ValueKind, got {self.kind!r}")

        if self.kind in (ValueKind.INTEGER, ValueKind.LONG):
            if not _is_int(self.payload):
                raise TypeError(
                    f"{self.kind.value} payload must be int, got {type(self.payload).__name__}"
                )
        elif self.kind is ValueKind.TEXT:
            if not isinstance(self.payload, str):
                raise TypeError(
                    f"text payload must be str, got {type(self.payload).__name__}"
                )
        elif self.kind is ValueKind.INTEGER_SEQUENCE:
            if not isinstance(self.payload, tuple):
                raise TypeError(
                    f"integer_sequence payload must be tuple, got {type(self.payload).__name__}"
                )
            for index, item in enumerate(self.payload):
                if not _is_int(item):
                    raise TypeError(
                        f"integer_sequence element {index} must be int, "
                        f"got {type(item).__name__}"
                    )

    @classmethod
    def integer(cls, value: int) -> "EncodableValue":
        return cls(ValueKind.INTEGER, value)

    @classmethod
    def text(cls, value: str) -> "EncodableValue":
        return cls(ValueKind.TEXT, value)

    @classmethod
    def long(cls, value: int) -> "EncodableValue":
        return cls(ValueKind.LONG, value)

    @classmethod
    def integer_sequence(cls, values: Iterable[int]) -> "EncodableValue":
        """Build a sequence value, snapshotting the input in order."""
        return cls(ValueKind.INTEGER_SEQUENCE, tuple(values))
