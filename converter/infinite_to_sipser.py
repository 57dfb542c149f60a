"""Doubly-infinite tape -> Sipser tape (left wall '#', movable right wall '$').

The embedded machine runs between the two walls. Stepping onto '$' pushes the
right wall one cell further out; stepping onto '#' shifts the whole bounded
region one cell to the right so the machine gets a fresh cell on its left.
"""
from converter.models import (
    BLANK,
    LEFT_WALL,
    RIGHT_WALL,
    SIM_PREFIX,
    START_STATE,
    Direction,
    Transition,
    is_halt_state,
    next_state_or_halt,
)
from converter.primitives import boundary_check, carry_sweep, return_head
from converter.renamer import rename_states

# === SETUP CONTROL STATES ===
Q_CARRY_0 = "q_carry_0"
Q_CARRY_1 = "q_carry_1"
Q_WRITE_END_MARKER = "q_write_end_marker"
Q_WRITE_END_MARKER_EMPTY = "q_write_end_marker_empty"
Q_RETURN_HEAD = "q_return_head"


def check_right_state(state):
    return f"check_right_{state}"


def check_left_state(state):
    return f"check_left_{state}"


def setup_transitions(renamed_start_state):
    """Lay down '#' at the origin, shift any input right by one, close it with '$'."""
    transitions = [
        Transition(START_STATE, "0", LEFT_WALL, Direction.RIGHT, Q_CARRY_0),
        Transition(START_STATE, "1", LEFT_WALL, Direction.RIGHT, Q_CARRY_1),
    ]
    transitions += carry_sweep(Q_CARRY_0, Q_CARRY_1)
    transitions += [
        Transition(Q_CARRY_0, BLANK, "0", Direction.RIGHT, Q_WRITE_END_MARKER),
        Transition(Q_CARRY_1, BLANK, "1", Direction.RIGHT, Q_WRITE_END_MARKER),
        Transition(Q_WRITE_END_MARKER, BLANK, RIGHT_WALL, Direction.LEFT, Q_RETURN_HEAD),
    ]
    transitions += return_head(Q_RETURN_HEAD, renamed_start_state)
    # Empty input: '#' then '$' right next to it.
    transitions += [
        Transition(START_STATE, BLANK, LEFT_WALL, Direction.RIGHT, Q_WRITE_END_MARKER_EMPTY),
        Transition(Q_WRITE_END_MARKER_EMPTY, BLANK, RIGHT_WALL, Direction.LEFT, renamed_start_state),
    ]
    return transitions


def check_right_cluster(state):
    expand_right_state = f"expand_right_{state}"
    transitions = boundary_check(
        check_right_state(state),
        state,
        RIGHT_WALL,
        BLANK,
        Direction.RIGHT,
        expand_right_state,
    )
    transitions.append(Transition(expand_right_state, BLANK, RIGHT_WALL, Direction.LEFT, state))
    return transitions


def shift_cluster(state, shift_start_state):
    """Shift the bounded region one cell right, then resume state on the freed cell."""
    carry_0 = f"shift_carry_0_{state}"
    carry_1 = f"shift_carry_1_{state}"
    write_end = f"shift_write_end_{state}"
    return_state = f"shift_return_{state}"

    transitions = [
        Transition(shift_start_state, "0", BLANK, Direction.RIGHT, carry_0),
        Transition(shift_start_state, "1", BLANK, Direction.RIGHT, carry_1),
        Transition(shift_start_state, BLANK, BLANK, Direction.STAY, state),
    ]
    transitions += carry_sweep(carry_0, carry_1)
    transitions += [
        Transition(carry_0, BLANK, "0", Direction.RIGHT, write_end),
        Transition(carry_1, BLANK, "1", Direction.RIGHT, write_end),
        Transition(carry_0, RIGHT_WALL, "0", Direction.RIGHT, write_end),
        Transition(carry_1, RIGHT_WALL, "1", Direction.RIGHT, write_end),
        Transition(shift_start_state, RIGHT_WALL, BLANK, Direction.RIGHT, write_end),
        Transition(write_end, BLANK, RIGHT_WALL, Direction.LEFT, return_state),
    ]
    transitions += return_head(return_state, state)
    return transitions


def check_left_cluster(state):
    shift_start_state = f"shift_start_{state}"
    transitions = boundary_check(
        check_left_state(state),
        state,
        LEFT_WALL,
        LEFT_WALL,
        Direction.RIGHT,
        shift_start_state,
    )
    transitions += shift_cluster(state, shift_start_state)
    return transitions


def rewrite_transitions(transitions):
    """Route every moving transition through a wall check.

    Returns the rewritten transitions and the distinct non-terminal
    destinations, in first-seen order.
    """
    targets = {}
    rewritten = []
    for t in transitions:
        if not is_halt_state(t.new_state):
            targets.setdefault(t.new_state, None)

        if is_halt_state(t.current_state) or t.direction is Direction.STAY:
            rewritten.append(t)
        elif t.direction is Direction.RIGHT:
            rewritten.append(t.retarget(next_state_or_halt(t.new_state, check_right_state(t.new_state))))
        else:
            rewritten.append(t.retarget(next_state_or_halt(t.new_state, check_left_state(t.new_state))))
    return rewritten, list(targets)


def convert_infinite_to_sipser(transitions, prefix=SIM_PREFIX):
    """Convert a doubly-infinite table into one that runs on a Sipser tape."""
    renamed = rename_states(transitions, prefix)
    rewritten, targets = rewrite_transitions(renamed)

    result = setup_transitions(f"{prefix}{START_STATE}")
    result += rewritten
    for state in targets:
        result += check_right_cluster(state)
        result += check_left_cluster(state)
    return result
