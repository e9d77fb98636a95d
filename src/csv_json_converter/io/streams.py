"""Text views over caller-owned byte streams."""

import io
from contextlib import contextmanager
from typing import BinaryIO, Iterator, TextIO

INPUT_ENCODING = "utf-8-sig"
OUTPUT_ENCODING = "utf-8"


@contextmanager
def text_reader(stream: BinaryIO, encoding: str = INPUT_ENCODING) -> Iterator[TextIO]:
    """
    Wrap a readable byte stream for text decoding.

    The wrapper is detached on exit so the byte stream stays open for
    its owner. ``newline=""`` leaves line endings to the csv module.
    """
    text = io.TextIOWrapper(stream, encoding=encoding, newline="")
    try:
        yield text
    finally:
        text.detach()


@contextmanager
def text_writer(stream: BinaryIO, encoding: str = OUTPUT_ENCODING) -> Iterator[TextIO]:
    """Wrap a writable byte stream for text encoding, detaching on exit."""
    text = io.TextIOWrapper(stream, encoding=encoding, newline="")
    try:
        yield text
    finally:
        text.detach()
