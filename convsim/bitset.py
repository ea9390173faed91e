"""Fixed-width bit sets used for encoder inputs, outputs and states."""

from __future__ import annotations

import enum
from collections.abc import Iterator


class Base(enum.Enum):
    """Notation of the text a bit set is parsed from."""

    HEX = "hex"
    BIN = "bin"


def _hex_nibble(ch: str) -> int:
    """Value of one upper-case hex digit, its four bits mirrored; other characters give 0."""
    if "0" <= ch <= "9":
        digit = ord(ch) - ord("0")
    elif "A" <= ch <= "F":
        digit = ord(ch) - ord("A") + 10
    else:
        return 0
    return int(f"{digit:04b}"[::-1], 2)


class BitSet:
    """A mutable bit string of fixed width; bit 0 is the least significant.

    Equality, ordering and hashing depend on the numeric value only, so two
    sets of different widths holding the same value compare equal.
    """

    __slots__ = ("_size", "_value")

    def __init__(self, size: int, value: int = 0) -> None:
        if size <= 0:
            raise ValueError("Bitset cannot have size equal to 0")
        self._size = size
        self._value = value & self._mask

    @classmethod
    def from_string(cls, text: str, base: Base = Base.BIN) -> BitSet:
        """Parse text whose first character holds the lowest bits.

        In binary, '1' sets a bit and any other character clears it. In hex,
        each upper-case digit fills four bits, written most significant bit
        first; unknown characters give four clear bits.
        """
        if not text:
            raise ValueError("Bitset cannot have size equal to 0")
        if base is Base.BIN:
            value = sum(1 << pos for pos, ch in enumerate(text) if ch == "1")
            return cls(len(text), value)
        value = 0
        for pos, ch in enumerate(text):
            value |= _hex_nibble(ch) << (4 * pos)
        return cls(4 * len(text), value)

    @property
    def _mask(self) -> int:
        return (1 << self._size) - 1

    def __len__(self) -> int:
        return self._size

    def _index(self, idx: int) -> int:
        if idx < 0:
            idx += self._size
        if not 0 <= idx < self._size:
            raise IndexError("bit index out of range")
        return idx

    def __getitem__(self, idx: int) -> bool:
        return bool((self._value >> self._index(idx)) & 1)

    def __iter__(self) -> Iterator[bool]:
        return (bool((self._value >> pos) & 1) for pos in range(self._size))

    def set(self, idx: int) -> None:
        """Set the bit at idx to one."""
        self._value |= 1 << self._index(idx)

    def reset(self) -> None:
        """Clear every bit."""
        self._value = 0

    def count(self) -> int:
        """Number of bits that are set."""
        return bin(self._value).count("1")

    def resize(self, size: int, value: int = 0) -> None:
        """Change the width and load a new value into it."""
        if size <= 0:
            raise ValueError("Bitset cannot have size equal to 0")
        self._size = size
        self._value = value & self._mask

    def reverse_bits(self, window_size: int) -> None:
        """Reverse the order of consecutive windows of window_size bits.

        Bits above the last whole window are cleared.
        """
        if window_size <= 0:
            raise ValueError("window size must be positive")
        window_mask = (1 << window_size) - 1
        windows = self._size // window_size
        result = 0
        for pos in range(windows):
            chunk = (self._value >> (pos * window_size)) & window_mask
            result = (result << window_size) | chunk
        self._value = result & self._mask

    def to_string(self) -> str:
        """Width, then "'b", then the bits from bit 0 upwards."""
        return f"{self._size}'b" + "".join("1" if bit else "0" for bit in self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BitSet({self._size}, {self._value})"

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def assign(self, other: BitSet | int) -> None:
        """Load the value of another bit set or integer, cut to this width."""
        self._value = int(other) & self._mask

    def increment(self) -> None:
        """Add one, wrapping to zero past the largest value."""
        self._value = (self._value + 1) & self._mask

    def copy(self) -> BitSet:
        return BitSet(self._size, self._value)

    def __xor__(self, other: BitSet) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        result = self.copy()
        result ^= other
        return result

    def __ixor__(self, other: BitSet) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        self._value = (self._value ^ other._value) & self._mask
        return self

    def __iand__(self, other: BitSet) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        self._value &= other._value
        return self

    def __irshift__(self, shift: int) -> BitSet:
        self._value >>= shift
        return self

    def __ilshift__(self, shift: int) -> BitSet:
        self._value = (self._value << shift) & self._mask
        return self

    def __lt__(self, other: BitSet) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._value < other._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)