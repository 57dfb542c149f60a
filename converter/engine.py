from dataclasses import dataclass
from pathlib import Path

from converter.errors import InputDecodeError, InputPathError
from converter.infinite_to_sipser import convert_infinite_to_sipser
from converter.models import MachineType
from converter.parser import parse_table
from converter.serializer import render_table
from converter.sipser_to_infinite import convert_sipser_to_infinite

PIPELINES = {
    MachineType.INFINITE: convert_infinite_to_sipser,
    MachineType.SIPSER: convert_sipser_to_infinite,
}


@dataclass(frozen=True)
class ConversionResult:
    machine_type: MachineType
    source_transitions: tuple
    transitions: tuple
    text: str

    @property
    def target(self):
        return self.machine_type.target


def convert_text(text):
    """Convert the contents of a source table; nothing is written."""
    machine_type, source = parse_table(text)
    transitions = PIPELINES[machine_type](source)
    return ConversionResult(
        machine_type=machine_type,
        source_transitions=tuple(source),
        transitions=tuple(transitions),
        text=render_table(machine_type, transitions),
    )


def output_path_for(input_path, input_suffix=".in", output_suffix=".out"):
    path = Path(input_path)
    if path.suffix != input_suffix:
        raise InputPathError(input_path, input_suffix)
    return path.with_suffix(output_suffix)


def read_table_text(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise InputDecodeError(path, e.reason) from e


def run_converter(input_path, output_path):
    """Read, convert and write one table.

    The input is fully parsed and converted before the output file is opened,
    so a bad input never leaves a partial output behind.
    """
    result = convert_text(read_table_text(input_path))

    with open(output_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(result.text)

    return result
