import dataclasses

import pytest

from converter.errors import HeaderError, InvalidDirection
from converter.models import (
    Direction,
    MachineType,
    Transition,
    is_halt_state,
    next_state_or_halt,
)
from converter.renamer import rename_states


def test_direction_tokens():
    assert Direction.from_token("l") is Direction.LEFT
    assert Direction.from_token("r") is Direction.RIGHT
    assert Direction.from_token("*") is Direction.STAY
    assert Direction.RIGHT.token == "r"
    with pytest.raises(InvalidDirection):
        Direction.from_token("R")


def test_machine_type_targets_the_other_model():
    assert MachineType.INFINITE.target is MachineType.SIPSER
    assert MachineType.SIPSER.target is MachineType.INFINITE
    with pytest.raises(HeaderError):
        MachineType.from_header(";i")


def test_transition_is_immutable():
    t = Transition("a", "0", "1", Direction.RIGHT, "b")
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.new_state = "c"
    moved = t.retarget("c")
    assert moved.new_state == "c"
    assert t.new_state == "b"


def test_halt_prefix_detection():
    assert is_halt_state("halt")
    assert is_halt_state("halt-accept")
    assert not is_halt_state("nohalt")
    assert next_state_or_halt("halt-reject", "check_left_halt-reject") == "halt-reject"
    assert next_state_or_halt("b", "check_left_b") == "check_left_b"


def test_rename_states_skips_halt_labels():
    source = [
        Transition("0", "0", "1", Direction.RIGHT, "a"),
        Transition("a", "1", "1", Direction.LEFT, "halt-accept"),
    ]
    renamed = rename_states(source)
    assert renamed == [
        Transition("sim_0", "0", "1", Direction.RIGHT, "sim_a"),
        Transition("sim_a", "1", "1", Direction.LEFT, "halt-accept"),
    ]
    # source records are left alone
    assert source[0].current_state == "0"


def test_rename_states_with_custom_prefix():
    renamed = rename_states([Transition("x", "0", "0", Direction.STAY, "x")], prefix="inner_")
    assert renamed[0].current_state == "inner_x"
    assert renamed[0].new_state == "inner_x"
