from dataclasses import replace

from converter.errors import (
    EmptyLine,
    HeaderError,
    InvalidPartCount,
    InvalidSymbol,
    TransitionParseError,
)
from converter.models import ANY, COMMENT, Direction, MachineType, Transition


def resolve_header(line):
    """Map the first line of a table onto the source MachineType."""
    if line is None:
        raise HeaderError("File is empty")
    return MachineType.from_header(line.strip())


def _parse_symbol(token):
    if len(token) != 1:
        raise InvalidSymbol(token)
    return token


def parse_line(line):
    """Parse one '<state> <symbol> <new_symbol> <direction> <new_state>' line.

    Raises EmptyLine when nothing is left once the comment is stripped.
    """
    line = line.split(COMMENT, 1)[0].strip()
    if not line:
        raise EmptyLine()

    parts = line.split()
    if len(parts) != 5:
        raise InvalidPartCount(len(parts))

    return Transition(
        current_state=parts[0],
        current_symbol=_parse_symbol(parts[1]),
        new_symbol=_parse_symbol(parts[2]),
        direction=Direction.from_token(parts[3]),
        new_state=parts[4],
    )


def parse_transitions(lines, first_line_number=1):
    """Parse every non-empty line; the first bad line aborts with its line number."""
    transitions = []
    for line_number, line in enumerate(lines, start=first_line_number):
        try:
            transitions.append(parse_line(line))
        except EmptyLine:
            continue
        except TransitionParseError as e:
            raise e.at_line(line_number)
    return transitions


def parse_table(text):
    """Split a source table into its MachineType and its transitions."""
    lines = text.splitlines()
    machine_type = resolve_header(lines[0] if lines else None)
    return machine_type, parse_transitions(lines[1:], first_line_number=2)


def expand_wildcards(transition):
    """Undo the output rendering convention: '*' as new symbol/state means unchanged."""
    new_symbol = transition.current_symbol if transition.new_symbol == ANY else transition.new_symbol
    new_state = transition.current_state if transition.new_state == ANY else transition.new_state
    return replace(transition, new_symbol=new_symbol, new_state=new_state)
