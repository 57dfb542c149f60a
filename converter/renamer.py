from dataclasses import replace

from converter.models import SIM_PREFIX, is_halt_state


def rename_state(state, prefix=SIM_PREFIX):
    if is_halt_state(state):
        return state
    return f"{prefix}{state}"


def rename_states(transitions, prefix=SIM_PREFIX):
    """Move every non-terminal label of the table into the simulation namespace."""
    return [
        replace(t, current_state=rename_state(t.current_state, prefix),
                new_state=rename_state(t.new_state, prefix))
        for t in transitions
    ]
