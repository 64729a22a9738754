"""State machine models for UTF-8 and the two UCS-2 byte orders."""

from __future__ import annotations

from charprobe.packing import PackedInt, pack4bits
from charprobe.statemachine import MachineState, StateMachineModel

_S = int(MachineState.START)
_E = int(MachineState.ERROR)
_M = int(MachineState.ITS_ME)


def _packed(values: list[int]) -> PackedInt:
    padded = list(values) + [0] * (-len(values) % 8)
    chunks = zip(*[iter(padded)] * 8)
    return PackedInt(tuple(pack4bits(*chunk) for chunk in chunks))


def _classes(default: int, ranges: list[tuple[int, int, int]]) -> PackedInt:
    """Build a 256-entry class table; later ranges override earlier ones."""
    table = [default] * 256
    for low, high, byte_class in ranges:
        table[low:high + 1] = [byte_class] * (high - low + 1)
    return _packed(table)


# Line feed, carriage return, escape and a few punctuation bytes get their own
# classes; 0xfe and 0xff mark the byte order mark.
_UCS2_CLASSES = [
    (0x0A, 0x0A, 1),
    (0x0D, 0x0D, 2),
    (0x1B, 0x1B, 3),
    (0x29, 0x2D, 3),
    (0xFE, 0xFE, 4),
    (0xFF, 0xFF, 5),
]

UCS2BE_MODEL = StateMachineModel(
    class_table=_classes(0, _UCS2_CLASSES),
    class_factor=6,
    state_table=_packed([
        5, 7, 7, _E, 4, 3, _E, _E,
        _E, _E, _E, _E, _M, _M, _M, _M,
        _M, _M, 6, 6, 6, 6, _E, _E,
        6, 6, 6, 6, 6, _M, 6, 6,
        6, 6, 6, 6, 5, 7, 7, _E,
        5, 8, 6, 6, _E, 6, 6, 6,
        6, 6, 6, 6, _E, _E, _S, _S,
    ]),
    char_len_table=(2, 2, 2, 0, 2, 2),
    name="UTF-16BE",
)

UCS2LE_MODEL = StateMachineModel(
    class_table=_classes(0, _UCS2_CLASSES),
    class_factor=6,
    state_table=_packed([
        6, 6, 7, 6, 4, 3, _E, _E,
        _E, _E, _E, _E, _M, _M, _M, _M,
        _M, _M, 5, 5, 5, _E, _M, _E,
        5, 5, 5, _E, 5, _E, 6, 6,
        7, 6, 8, 8, 5, 5, 5, _E,
        5, 5, 5, _E, _E, _E, 5, 5,
        5, 5, 5, _E, 5, _E, _S, _S,
    ]),
    char_len_table=(2, 2, 2, 2, 2, 2),
    name="UTF-16LE",
)

# 0x00 is accepted as a legal byte, since some pages contain it in text.
UTF8_MODEL = StateMachineModel(
    class_table=_classes(
        1,
        [
            (0x0E, 0x0F, 0),
            (0x1B, 0x1B, 0),
            (0x80, 0x83, 2),
            (0x84, 0x87, 3),
            (0x88, 0x9F, 4),
            (0xA0, 0xBF, 5),
            (0xC0, 0xC1, 0),
            (0xC2, 0xDF, 6),
            (0xE0, 0xE0, 7),
            (0xE1, 0xEC, 8),
            (0xED, 0xED, 9),
            (0xEE, 0xEF, 8),
            (0xF0, 0xF0, 10),
            (0xF1, 0xF7, 11),
            (0xF8, 0xF8, 12),
            (0xF9, 0xFB, 13),
            (0xFC, 0xFC, 14),
            (0xFD, 0xFD, 15),
            (0xFE, 0xFF, 0),
        ],
    ),
    class_factor=16,
    state_table=_packed([
        _E, _S, _E, _E, _E, _E, 12, 10,
        9, 11, 8, 7, 6, 5, 4, 3,
        _E, _E, _E, _E, _E, _E, _E, _E,
        _E, _E, _E, _E, _E, _E, _E, _E,
        _M, _M, _M, _M, _M, _M, _M, _M,
        _M, _M, _M, _M, _M, _M, _M, _M,
        _E, _E, 5, 5, 5, 5, _E, _E,
        _E, _E, _E, _E, _E, _E, _E, _E,
        _E, _E, _E, 5, 5, 5, _E, _E,
        _E, _E, _E, _E, _E, _E, _E, _E,
        _E, _E, 7, 7, 7, 7, _E, _E,
        _E, _E, _E, _E, _E, _E, _E, _E,
        _E, _E, _E, _E, 7, 7, _E, _E,
        _E, _E, _E, _E, _E, _E, _E, _E,
        _E, _E, 9, 9, 9, 9, _E, _E,
        _E, _E, _E, _E, _E, _E, _E, _E,
        _E, _E, _E, _E, _E, 9, _E, _E,
        _E, _E, _E, _E, _E, _E, _E, _E,
        _E, _E, 12, 12, 12, 12, _E, _E,
        _E, _E, _E, _E, _E, _E, _E, _E,
        _E, _E, _E, _E, _E, 12, _E, _E,
        _E, _E, _E, _E, _E, _E, _E, _E,
        _E, _E, 12, 12, 12, _E, _E, _E,
        _E, _E, _E, _E, _E, _E, _E, _E,
        _E, _E, _S, _S, _S, _S, _E, _E,
        _E, _E, _E, _E, _E, _E, _E, _E,
    ]),
    char_len_table=(0, 1, 0, 0, 0, 0, 2, 3, 3, 3, 4, 4, 5, 5, 6, 6),
    name="UTF-8",
)

UNICODE_MODELS = (UTF8_MODEL, UCS2BE_MODEL, UCS2LE_MODEL)