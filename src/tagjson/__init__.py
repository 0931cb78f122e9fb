"""tagjson - canonical JSON text for tagged primitive values."""

__version__ = "0.1.0"

from loguru import logger

from .encoding import UnsupportedValueKind, encode, encode_native
from .values import EncodableValue, ValueKind

logger.disable(__name__)

__all__ = [
    "EncodableValue",
    "UnsupportedValueKind",
    "ValueKind",
    "encode",
    "encode_native",
    "__version__",
]
