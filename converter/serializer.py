from converter.models import ANY, START_STATE, MachineType


def render_transition(t):
    """Render one rule, writing '*' for an unchanged symbol or state."""
    new_symbol = ANY if t.new_symbol == t.current_symbol else t.new_symbol
    new_state = ANY if t.new_state == t.current_state else t.new_state
    return f"{t.current_state} {t.current_symbol} {new_symbol} {t.direction.token} {new_state}"


def render_header(machine_type):
    if machine_type is MachineType.INFINITE:
        title = "Infinite-to-Sipser Simulation"
    else:
        title = "Sipser-to-Infinite Simulation"
    return f"; --- {title} ---\n; Start state: {START_STATE}\n"


def render_table(machine_type, transitions):
    lines = [render_transition(t) for t in transitions]
    return render_header(machine_type) + "".join(line + "\n" for line in lines)
