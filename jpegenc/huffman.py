"""Canonical Huffman tables built from JPEG DHT descriptions."""

from __future__ import annotations

from collections.abc import Sequence

_NB_LENGTHS = 16


class HuffmanTable:
    """A canonical Huffman code.

    ``nb_symb_per_lengths`` gives the number of symbols for each code length
    from 1 to 16 and ``symbols`` lists the symbols in code order.
    """

    def __init__(self, nb_symb_per_lengths: Sequence[int], symbols: Sequence[int]) -> None:
        counts = tuple(nb_symb_per_lengths)
        if len(counts) != _NB_LENGTHS:
            raise ValueError(f"expected {_NB_LENGTHS} length counts, got {len(counts)}")
        self.nb_symb_per_lengths: tuple[int, ...] = counts
        self.symbols: tuple[int, ...] = tuple(symbols)
        if sum(counts) != len(self.symbols):
            raise ValueError("length counts do not match the number of symbols")

        lengths = [
            length
            for length, count in enumerate(counts, start=1)
            for _ in range(count)
        ]
        codes = []
        code = 0
        for current, following in zip(lengths, lengths[1:] + lengths[-1:]):
            codes.append(code)
            code = (code + 1) << (following - current)

        self._paths: dict[int, tuple[int, int]] = {}
        for symbol, symbol_code, length in zip(self.symbols, codes, lengths):
            self._paths.setdefault(symbol, (symbol_code, length))
        self._codes = list(zip(self.symbols, codes, lengths))

    def get_path(self, value: int) -> tuple[int, int]:
        """Return ``(code, nb_bits)`` for ``value``; raise KeyError if absent."""
        try:
            return self._paths[value]
        except KeyError:
            raise KeyError(f"symbol {value:#04x} is not in the Huffman table") from None

    def codes(self) -> list[tuple[int, int, int]]:
        """Return ``(symbol, code, length)`` for every symbol in table order."""
        return list(self._codes)

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, value: object) -> bool:
        return value in self._paths