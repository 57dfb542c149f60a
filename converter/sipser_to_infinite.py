"""Sipser tape -> doubly-infinite tape.

The destination tape never runs out of room, so the only thing to simulate is
the left wall: a '#' is written left of the input and any move that lands on
it is read as the source machine falling off its tape, which halts.
"""
from converter.models import (
    ANY,
    BLANK,
    HALT_PREFIX,
    LEFT_WALL,
    SIM_PREFIX,
    START_STATE,
    Direction,
    Transition,
    is_halt_state,
    next_state_or_halt,
)
from converter.primitives import boundary_check
from converter.renamer import rename_states

Q_WRITE_WALL = "q_write_wall"


def check_left_wall_state(state):
    return f"check_left_wall_{state}"


def wall_setup_transitions(renamed_start_state):
    return [
        Transition(START_STATE, ANY, ANY, Direction.LEFT, Q_WRITE_WALL),
        Transition(Q_WRITE_WALL, ANY, ANY, Direction.LEFT, Q_WRITE_WALL),
        Transition(Q_WRITE_WALL, BLANK, LEFT_WALL, Direction.RIGHT, renamed_start_state),
    ]


def check_left_wall_cluster(state):
    return boundary_check(
        check_left_wall_state(state),
        state,
        LEFT_WALL,
        LEFT_WALL,
        Direction.STAY,
        HALT_PREFIX,
    )


def rewrite_transitions(transitions):
    targets = {}
    rewritten = []
    for t in transitions:
        if t.direction is Direction.LEFT:
            if not is_halt_state(t.new_state):
                targets.setdefault(t.new_state, None)
            rewritten.append(t.retarget(next_state_or_halt(t.new_state, check_left_wall_state(t.new_state))))
        else:
            rewritten.append(t)
    return rewritten, list(targets)


def convert_sipser_to_infinite(transitions, prefix=SIM_PREFIX):
    """Convert a Sipser table into one that runs on a doubly-infinite tape."""
    renamed = rename_states(transitions, prefix)
    rewritten, targets = rewrite_transitions(renamed)

    result = wall_setup_transitions(f"{prefix}{START_STATE}")
    result += rewritten
    for state in targets:
        result += check_left_wall_cluster(state)
    return result
