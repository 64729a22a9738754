import pytest

from charprobe.packing import PackedInt, pack4bits
from charprobe.statemachine import CodingStateMachine, MachineState, StateMachineModel

S = MachineState.START
E = MachineState.ERROR
M = MachineState.ITS_ME


def _packed(values):
    padded = list(values) + [0] * (-len(values) % 8)
    return PackedInt(tuple(pack4bits(*padded[i:i + 8]) for i in range(0, len(padded), 8)))


def _model():
    classes = [1] * 0x80 + [2] * 0x7F + [0]
    states = [
        E, S, 3,  # START
        E, E, E,  # ERROR
        M, M, M,  # ITS_ME
        E, E, S,  # lead byte seen
    ]
    return StateMachineModel(_packed(classes), 3, _packed(states), (0, 1, 2), "toy")


@pytest.fixture
def machine():
    return CodingStateMachine(_model())


def test_ascii_stays_in_start(machine):
    assert machine.next_state(0x41) == S
    assert machine.current_char_len() == 1


def test_two_byte_sequence(machine):
    assert machine.next_state(0x80) == 3
    assert machine.current_char_len() == 2
    assert machine.next_state(0x90) == S
    assert machine.current_char_len() == 2


def test_illegal_byte_is_error(machine):
    assert machine.next_state(0xFF) == E


def test_bad_trail_byte_is_error(machine):
    machine.next_state(0x80)
    assert machine.next_state(0x41) == E


def test_reset_returns_to_start(machine):
    machine.next_state(0xFF)
    machine.reset()
    assert machine.next_state(0x41) == S


def test_char_len_only_updated_at_start(machine):
    machine.next_state(0x80)
    machine.next_state(0x41)
    assert machine.current_char_len() == 2


def test_negative_byte_treated_as_unsigned():
    first = CodingStateMachine(_model())
    second = CodingStateMachine(_model())
    assert first.next_state(-1) == second.next_state(0xFF)


def test_name(machine):
    assert machine.name() == "toy"