"""JSON encoder for tagged values.

Each ValueKind maps to exactly one encoding rule. There are no options and
no reflection: values are encoded by their tag, never by inspecting the
payload's runtime type.
"""

import json
from typing import Any, Callable, Dict

from loguru import logger

from ..values import EncodableValue, ValueKind


class UnsupportedValueKind(TypeError):
    """Raised when a value has no encoding rule."""

    def __init__(self, value: Any):
        self.value = value
        kind = value.kind if isinstance(value, EncodableValue) else type(value).__name__
        self.kind = kind
        super().__init__(f"Unsupported value kind: {kind!r}")


def _encode_integer(payload: int) -> str:
    return str(payload)


def _encode_text(payload: str) -> str:
    # Escapes quotes, backslashes and control characters; keeps non-ASCII as-is
    return json.dumps(payload, ensure_ascii=False)


def _encode_integer_sequence(payload: tuple) -> str:
    return "[" + ",".join(_encode_integer(item) for item in payload) + "]"


_RULES: Dict[ValueKind, Callable[[Any], str]] = {
    ValueKind.INTEGER: _encode_integer,
    ValueKind.TEXT: _encode_text,
    ValueKind.LONG: _encode_integer,
    ValueKind.INTEGER_SEQUENCE: _encode_integer_sequence,
}


def encode(value: EncodableValue) -> str:
    """
    Encode a tagged value as JSON text.

    Args:
        value: Value to encode

    Returns:
        JSON text for the value

    Raises:
        UnsupportedValueKind: If value is not an EncodableValue of a known kind

    Examples:
        >>> encode(EncodableValue.integer(1))
        '1'
        >>> encode(EncodableValue.text("abcd"))
        '"abcd"'
        >>> encode(EncodableValue.integer_sequence([1]))
        '[1]'
    """
    if not isinstance(value, EncodableValue):
        raise UnsupportedValueKind(value)

    rule = _RULES.get(value.kind)
    if rule is None:
        raise UnsupportedValueKind(value)

    text = rule(value.payload)
    logger.debug(f"Encoded {value.kind.value} value ({len(text)} chars)")
    return text


def encode_native(obj: Any) -> str:
    """
    Encode a plain Python value by inferring its kind.

    int maps to INTEGER, str to TEXT, and a list or tuple of ints to
    INTEGER_SEQUENCE. LONG is never inferred.

    Raises:
        UnsupportedValueKind: For any other value, including bool, float and None
    """
    if isinstance(obj, bool):
        raise UnsupportedValueKind(obj)

    if isinstance(obj, int):
        return encode(EncodableValue.integer(obj))

    if isinstance(obj, str):
        return encode(EncodableValue.text(obj))

    if isinstance(obj, (list, tuple)):
        if all(isinstance(item, int) and not isinstance(item, bool) for item in obj):
            return encode(EncodableValue.integer_sequence(obj))

    raise UnsupportedValueKind(obj)
