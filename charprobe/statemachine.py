"""Byte-driven state machines that validate multi-byte encodings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from charprobe.packing import PackedInt


class MachineState(IntEnum):
    """The three states with a fixed meaning; other values are intermediate."""

    START = 0
    ERROR = 1
    ITS_ME = 2


@dataclass(frozen=True)
class StateMachineModel:
    """Tables describing one encoding's state machine."""

    class_table: PackedInt
    class_factor: int
    state_table: PackedInt
    char_len_table: tuple[int, ...]
    name: str


class CodingStateMachine:
    """Runs a :class:`StateMachineModel` over a stream of bytes."""

    def __init__(self, model: StateMachineModel) -> None:
        self._model = model
        self._state = int(MachineState.START)
        self._char_len = 0
        self._byte_pos = 0

    def next_state(self, byte: int) -> int:
        """Advance by one byte and return the new state."""
        model = self._model
        byte_class = model.class_table[byte & 0xFF]
        if self._state == MachineState.START:
            self._byte_pos = 0
            self._char_len = model.char_len_table[byte_class]
        self._state = model.state_table[self._state * model.class_factor + byte_class]
        self._byte_pos += 1
        return self._state

    def current_char_len(self) -> int:
        """Length of the character whose first byte was seen last."""
        return self._char_len

    def reset(self) -> None:
        self._state = int(MachineState.START)

    def name(self) -> str:
        return self._model.name