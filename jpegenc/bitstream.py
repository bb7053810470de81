"""Bit-level writer for the entropy-coded part of a JPEG file."""

from __future__ import annotations

import os
from typing import BinaryIO

DEFAULT_BUFFER_SIZE = 2048
_MAX_BITS = 32


class BitStream:
    """Accumulates bits into bytes and appends them to a file.

    Bytes are held in memory until :meth:`flush` is called or the buffer
    reaches :data:`DEFAULT_BUFFER_SIZE`. Every ``0xFF`` byte produced from
    data bits is followed by a stuffing ``0x00`` byte.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._file: BinaryIO = open(path, "ab")
        self._bytes = bytearray()
        self._bits = 0
        self._bit_count = 0

    @property
    def closed(self) -> bool:
        return self._file.closed

    @property
    def pending_bytes(self) -> bytes:
        """Bytes completed but not yet written to the file."""
        return bytes(self._bytes)

    def _push_byte(self) -> None:
        if len(self._bytes) >= DEFAULT_BUFFER_SIZE:
            self.flush()
        self._bytes.append(self._bits)
        self._bit_count = 0

    def _push_bit(self, bit: int) -> None:
        self._bits = ((self._bits << 1) | bit) & 0xFF
        self._bit_count += 1

    def write_bits(self, value: int, nb_bits: int, is_marker: bool = False) -> None:
        """Write the ``nb_bits`` low bits of ``value``, most significant first.

        A marker is always byte aligned: pending bits are padded with zeros
        and emitted as a full byte before the marker bits are written.
        """
        if not 0 <= nb_bits < _MAX_BITS:
            raise ValueError(f"nb_bits must be between 0 and {_MAX_BITS - 1}, got {nb_bits}")
        if self.closed:
            raise ValueError("write to a closed bitstream")
        value &= 0xFFFFFFFF

        if is_marker:
            self.flush()
            padding = 8 - self._bit_count
            self._bits = (self._bits << padding) & 0xFF
            self._push_byte()

        for shift in range(nb_bits - 1, -1, -1):
            self._push_bit((value >> shift) & 1)
            if self._bit_count == 8:
                self._push_byte()
                if self._bits == 0xFF and not is_marker:
                    self._bits = 0
                    self._push_byte()

    def flush(self) -> None:
        """Write the completed bytes held in memory to the file."""
        if self._bytes:
            self._file.write(self._bytes)
            self._bytes.clear()
        self._file.flush()

    def close(self) -> None:
        """Flush completed bytes and close the file."""
        if not self.closed:
            self.flush()
            self._file.close()

    def __enter__(self) -> "BitStream":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()