"""Compact storage of small integers packed into 32-bit words."""

from __future__ import annotations

from dataclasses import dataclass

# width in bits -> (index shift, shift mask, bit shift, unit mask)
_LAYOUTS = {
    4: (3, 7, 2, 0x0000000F),
    8: (2, 3, 3, 0x000000FF),
    16: (1, 1, 4, 0x0000FFFF),
}


def pack16bits(a: int, b: int) -> int:
    """Pack two 16-bit values into one word, ``a`` in the low half."""
    return (b << 16) | a


def pack8bits(a: int, b: int, c: int, d: int) -> int:
    """Pack four 8-bit values into one word, ``a`` in the lowest byte."""
    return pack16bits((b << 8) | a, (d << 8) | c)


def pack4bits(*args: int) -> int:
    """Pack eight 4-bit values into one word, the first in the lowest nibble."""
    if len(args) != 8:
        raise ValueError(f"pack4bits takes exactly 8 values, got {len(args)}")
    a, b, c, d, e, f, g, h = args
    return pack8bits((b << 4) | a, (d << 4) | c, (f << 4) | e, (h << 4) | g)


@dataclass(frozen=True)
class PackedInt:
    """A read-only table of small integers packed into 32-bit words."""

    data: tuple[int, ...]
    width: int = 4

    def __post_init__(self) -> None:
        if self.width not in _LAYOUTS:
            raise ValueError(f"unsupported packing width: {self.width}")
        object.__setattr__(self, "data", tuple(self.data))

    def __getitem__(self, index: int) -> int:
        if index < 0:
            raise IndexError("packed table index out of range")
        idx_shift, shift_mask, bit_shift, unit_mask = _LAYOUTS[self.width]
        try:
            word = self.data[index >> idx_shift]
        except IndexError:
            raise IndexError("packed table index out of range") from None
        return (word >> ((index & shift_mask) << bit_shift)) & unit_mask