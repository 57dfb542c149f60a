"""Control-state generators shared by both conversion pipelines.

Each generator returns a fresh list of Transition records; callers chain them
together with their own pipeline-specific rules.
"""
from converter.models import ANY, LEFT_WALL, Direction, Transition


def carry_sweep(carry_0_state, carry_1_state):
    """Rightward binary carry over '0'/'1'.

    carry_0_state holds no pending carry, carry_1_state holds one. Every cell
    is overwritten with the bit carried in from its left neighbour, so the
    whole run of bits moves one cell to the right.
    """
    return [
        Transition(carry_0_state, "0", "0", Direction.RIGHT, carry_0_state),
        Transition(carry_0_state, "1", "0", Direction.RIGHT, carry_1_state),
        Transition(carry_1_state, "0", "1", Direction.RIGHT, carry_0_state),
        Transition(carry_1_state, "1", "1", Direction.RIGHT, carry_1_state),
    ]


def return_head(return_state, target_state):
    """Scan left to the left wall, then step onto the first real cell and enter target_state."""
    return [
        Transition(return_state, ANY, ANY, Direction.LEFT, return_state),
        Transition(return_state, LEFT_WALL, LEFT_WALL, Direction.RIGHT, target_state),
    ]


def boundary_check(check_state, on_any_state, on_symbol, on_symbol_new_symbol,
                   on_symbol_direction, on_symbol_new_state):
    """Dispatch on a single distinguished symbol.

    Reading on_symbol writes on_symbol_new_symbol, moves on_symbol_direction
    and enters on_symbol_new_state. Anything else is left untouched and
    control passes to on_any_state without moving.
    """
    return [
        Transition(check_state, ANY, ANY, Direction.STAY, on_any_state),
        Transition(check_state, on_symbol, on_symbol_new_symbol, on_symbol_direction, on_symbol_new_state),
    ]
