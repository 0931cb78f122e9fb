"""JSON encoding of tagged values.

This package turns an EncodableValue into its canonical JSON text.
"""

from .encoder import UnsupportedValueKind, encode, encode_native

__all__ = ["UnsupportedValueKind", "encode", "encode_native"]
