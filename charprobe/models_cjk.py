"""State machine models for the CJK multi-byte encodings."""

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


# Bytes 0x0e, 0x0f and 0x1b (shift and escape) are never legal in these encodings.
_CONTROL_ILLEGAL = [(0x0E, 0x0F, 0), (0x1B, 0x1B, 0)]

BIG5_MODEL = StateMachineModel(
    class_table=_classes(
        1,
        _CONTROL_ILLEGAL
        + [(0x40, 0x7E, 2), (0x80, 0xA0, 4), (0xA1, 0xFE, 3), (0xFF, 0xFF, 0)],
    ),
    class_factor=5,
    state_table=_packed([
        _E, _S, _S, 3, _E, _E, _E, _E,
        _E, _E, _M, _M, _M, _M, _M, _E,
        _E, _S, _S, _S, _S, _S, _S, _S,
    ]),
    char_len_table=(0, 1, 1, 2, 0),
    name="Big5",
)

EUCJP_MODEL = StateMachineModel(
    class_table=_classes(
        4,
        [
            (0x0E, 0x0F, 5),
            (0x1B, 0x1B, 5),
            (0x80, 0x8D, 5),
            (0x8E, 0x8E, 1),
            (0x8F, 0x8F, 3),
            (0x90, 0xA0, 5),
            (0xA1, 0xDF, 2),
            (0xE0, 0xFE, 0),
            (0xFF, 0xFF, 5),
        ],
    ),
    class_factor=6,
    state_table=_packed([
        3, 4, 3, 5, _S, _E, _E, _E,
        _E, _E, _E, _E, _M, _M, _M, _M,
        _M, _M, _S, _E, _S, _E, _E, _E,
        _E, _E, _S, _E, _E, _E, 3, _E,
        3, _E, _E, _E, _S, _S, _S, _S,
    ]),
    char_len_table=(2, 2, 2, 3, 1, 0),
    name="EUC-JP",
)

EUCKR_MODEL = StateMachineModel(
    class_table=_classes(
        1,
        _CONTROL_ILLEGAL
        + [
            (0x80, 0xA0, 0),
            (0xA1, 0xFE, 2),
            (0xAD, 0xAF, 3),
            (0xC9, 0xC9, 3),
            (0xFF, 0xFF, 0),
        ],
    ),
    class_factor=4,
    state_table=_packed([
        _E, _S, 3, _E, _E, _E, _E, _E,
        _M, _M, _M, _M, _E, _E, _S, _S,
    ]),
    char_len_table=(0, 1, 2, 0),
    name="EUC-KR",
)

# Class 6 may start either a 2- or a 4-byte character; 2 is enough for
# frequency analysis, which validates the code ranges itself.
GB18030_MODEL = StateMachineModel(
    class_table=_classes(
        1,
        _CONTROL_ILLEGAL
        + [
            (0x30, 0x39, 3),
            (0x40, 0x7E, 2),
            (0x7F, 0x7F, 4),
            (0x80, 0x80, 5),
            (0x81, 0xFE, 6),
            (0xFF, 0xFF, 0),
        ],
    ),
    class_factor=7,
    state_table=_packed([
        _E, _S, _S, _S, _S, _S, 3, _E,
        _E, _E, _E, _E, _E, _E, _M, _M,
        _M, _M, _M, _M, _M, _E, _E, _S,
        4, _E, _S, _S, _E, _E, _E, _E,
        _E, _E, 5, _E, _E, _E, _M, _E,
        _E, _E, _S, _S, _S, _S, _S, _S,
    ]),
    char_len_table=(0, 1, 1, 1, 1, 1, 2),
    name="GB18030",
)

# 0xa0 is not legal Shift_JIS, but it shows up in real pages and is tolerated.
SJIS_MODEL = StateMachineModel(
    class_table=_classes(
        1,
        _CONTROL_ILLEGAL
        + [
            (0x40, 0x7E, 2),
            (0x80, 0x9F, 3),
            (0xA0, 0xDF, 2),
            (0xE0, 0xEC, 3),
            (0xED, 0xFC, 4),
            (0xFD, 0xFF, 0),
        ],
    ),
    class_factor=6,
    state_table=_packed([
        _E, _S, _S, 3, _E, _E, _E, _E,
        _E, _E, _E, _E, _M, _M, _M, _M,
        _M, _M, _E, _E, _S, _S, _S, _S,
    ]),
    char_len_table=(0, 1, 1, 2, 0, 0),
    name="Shift_JIS",
)

CJK_MODELS = (BIG5_MODEL, EUCJP_MODEL, EUCKR_MODEL, GB18030_MODEL, SJIS_MODEL)