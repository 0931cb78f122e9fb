"""Demonstration program: encode four literal values and print them."""

import sys
from typing import TextIO, Tuple

from loguru import logger

from .config import Config
from .encoding import UnsupportedValueKind, encode
from .values import EncodableValue


DEMO_VALUES: Tuple[EncodableValue, ...] = (
    EncodableValue.integer(1),
    EncodableValue.text("abcd"),
    EncodableValue.long(10),
    EncodableValue.integer_sequence([1]),
)


def configure_logging() -> None:
    """Route tagjson logs to stderr (and optionally a rotating file)."""
    Config.validate()

    logger.remove()  # Remove default handler
    logger.enable("tagjson")

    logger.add(sys.stderr, format=Config.LOG_FORMAT, level=Config.LOG_LEVEL)

    if Config.LOG_FILE:
        logger.add(
            Config.LOG_FILE,
            rotation=Config.LOG_ROTATION,
            retention=Config.LOG_RETENTION,
            compression="zip",
            level="DEBUG",
        )


def run(stream: TextIO) -> None:
    """
    Encode every demo value and write one line per value.

    Raises:
        UnsupportedValueKind: If a value cannot be encoded
    """
    for value in DEMO_VALUES:
        print(encode(value), file=stream)


def main() -> None:
    """Entry point: print the demo encodings to stdout and exit."""
    configure_logging()

    logger.info(f"Encoding {len(DEMO_VALUES)} demo values")
    try:
        run(sys.stdout)
    except UnsupportedValueKind as e:
        logger.error(f"Encoding failed: {e}")
        sys.exit(1)

    logger.info("Done")


if __name__ == "__main__":
    main()
