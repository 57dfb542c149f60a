# tools/table_inspect.py

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from converter.engine import read_table_text
from converter.errors import ConversionError
from converter.models import SIM_PREFIX, is_halt_state
from converter.parser import expand_wildcards, parse_table, parse_transitions

console = Console()

# Converted tables open with a "; --- ... ---" comment instead of a header
CONVERTED_MARKER = "; ---"

def load_table(path):
    """Load a source table (with header) or a converted table (comment header).

    Returns (machine_type or None, transitions) with wildcards expanded.
    """
    text = read_table_text(path)

    lines = text.splitlines()
    if lines and lines[0].startswith(CONVERTED_MARKER):
        return None, [expand_wildcards(t) for t in parse_transitions(lines)]

    machine_type, transitions = parse_table(text)
    return machine_type, [expand_wildcards(t) for t in transitions]

def classify_state(state, converted):
    if is_halt_state(state):
        return "halt"
    if not converted or state.startswith(SIM_PREFIX):
        return "source"
    return "control"

def summarize(transitions, converted):
    """Count distinct states per kind."""
    counts = {"source": 0, "control": 0, "halt": 0}
    seen = set()
    for t in transitions:
        for state in (t.current_state, t.new_state):
            if state not in seen:
                seen.add(state)
                counts[classify_state(state, converted)] += 1
    return counts

def build_transition_table(transitions, converted=True, title="Transition Table"):
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("State")
    table.add_column("Read", justify="center")
    table.add_column("Write", justify="center")
    table.add_column("Move", justify="center")
    table.add_column("Next")

    colors = {"source": "cyan", "control": "yellow", "halt": "green"}
    previous = None
    for t in sorted(transitions, key=lambda t: t.current_state):
        state_cell = ""
        if t.current_state != previous:
            color = colors[classify_state(t.current_state, converted)]
            state_cell = f"[{color}]{escape(t.current_state)}[/{color}]"
            previous = t.current_state
        next_color = colors[classify_state(t.new_state, converted)]
        table.add_row(
            state_cell,
            escape(t.current_symbol),
            escape(t.new_symbol),
            t.direction.token,
            f"[{next_color}]{escape(t.new_state)}[/{next_color}]"
        )
    return table

def print_transition_table(transitions, converted=True, title="Transition Table", out=None):
    out = out or console
    out.print(build_transition_table(transitions, converted, title))
    counts = summarize(transitions, converted)
    out.print(
        f"{len(transitions):,} transitions, "
        f"{counts['source']:,} source states, "
        f"{counts['control']:,} control states, "
        f"{counts['halt']:,} halt states"
    )

def main(argv=None):
    parser = argparse.ArgumentParser(description="Turing Machine Table Inspector")
    parser.add_argument("path", help="Source (.in) or converted (.out) table")
    args = parser.parse_args(argv)

    path = Path(args.path)
    try:
        machine_type, transitions = load_table(path)
    except (ConversionError, OSError) as e:
        Console(stderr=True).print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        return 1

    if machine_type is None:
        title = f"{escape(path.name)} (converted)"
    else:
        title = f"{escape(path.name)} ({machine_type.label} model)"
    print_transition_table(transitions, converted=machine_type is None, title=title)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
