import pytest

from converter.engine import convert_text, output_path_for, run_converter
from converter.errors import (
    HeaderError,
    InputDecodeError,
    InputPathError,
    InvalidDirection,
    InvalidPartCount,
    InvalidSymbol,
)
from converter.models import Direction, MachineType, Transition
from converter.serializer import render_header, render_table, render_transition

INFINITE_HEADER = "; --- Infinite-to-Sipser Simulation ---\n; Start state: 0\n"

EXPECTED_SINGLE_RULE = INFINITE_HEADER + """0 0 # r q_carry_0
0 1 # r q_carry_1
q_carry_0 0 * r *
q_carry_0 1 0 r q_carry_1
q_carry_1 0 1 r q_carry_0
q_carry_1 1 * r *
q_carry_0 _ 0 r q_write_end_marker
q_carry_1 _ 1 r q_write_end_marker
q_write_end_marker _ $ l q_return_head
q_return_head * * l *
q_return_head # * r sim_0
0 _ # r q_write_end_marker_empty
q_write_end_marker_empty _ $ l sim_0
sim_0 a b r halt
"""


def test_render_transition_compresses_unchanged_fields():
    assert render_transition(Transition("a", "0", "0", Direction.LEFT, "a")) == "a 0 * l *"
    assert render_transition(Transition("a", "0", "1", Direction.STAY, "b")) == "a 0 1 * b"


def test_render_header_names_conversion():
    assert render_header(MachineType.INFINITE) == INFINITE_HEADER
    assert render_header(MachineType.SIPSER).startswith("; --- Sipser-to-Infinite Simulation ---\n")


def test_render_table_ends_each_rule_with_newline():
    text = render_table(MachineType.SIPSER, [Transition("a", "0", "1", Direction.RIGHT, "b")])
    assert text.endswith("a 0 1 r b\n")
    assert text.count("\n") == 3


def test_single_rule_to_halt_end_to_end():
    result = convert_text(";I\n0 a b r halt\n")
    assert result.machine_type is MachineType.INFINITE
    assert result.target is MachineType.SIPSER
    assert result.text == EXPECTED_SINGLE_RULE


def test_conversion_is_deterministic():
    source = ";I\n0 0 1 r b\nb 1 0 l c\nc 0 0 r d\nd _ 1 l 0\nc 1 1 * halt\n"
    first = convert_text(source).text
    for _ in range(5):
        assert convert_text(source).text == first


def test_halt_destinations_survive_unrenamed():
    result = convert_text(";S\n0 0 1 l halt-left\n0 1 1 r halt-right\n")
    lines = result.text.splitlines()
    assert "sim_0 0 1 l halt-left" in lines
    assert "sim_0 1 * r halt-right" in lines


def test_sipser_left_moves_get_wall_checks():
    result = convert_text(";S\n0 0 1 l 1\n1 1 1 r 0\n")
    lines = result.text.splitlines()
    assert "sim_0 0 1 l check_left_wall_sim_1" in lines
    assert "check_left_wall_sim_1 * * * sim_1" in lines
    assert "check_left_wall_sim_1 # * * halt" in lines
    assert not any(line.startswith("check_left_wall_sim_0") for line in lines)


@pytest.mark.parametrize("text, error", [
    (";Q\n0 0 0 r halt\n", HeaderError),
    ("", HeaderError),
    (";I\n0 0 0 r\n", InvalidPartCount),
    (";I\n0 0 0 R halt\n", InvalidDirection),
])
def test_convert_text_errors(text, error):
    with pytest.raises(error):
        convert_text(text)


def test_output_path_replaces_suffix(tmp_path):
    assert output_path_for(tmp_path / "machine.in") == tmp_path / "machine.out"
    assert output_path_for("a.b.in", ".in", ".tm").name == "a.b.tm"


@pytest.mark.parametrize("name", ["machine.txt", "machine", "machine.in.txt"])
def test_output_path_requires_input_suffix(name):
    with pytest.raises(InputPathError):
        output_path_for(name)


def test_run_converter_writes_output(tmp_path):
    source = tmp_path / "one.in"
    source.write_text(";I\n0 a b r halt\n", encoding="utf-8")
    target = tmp_path / "one.out"

    result = run_converter(source, target)

    assert target.read_text(encoding="utf-8") == EXPECTED_SINGLE_RULE
    assert len(result.source_transitions) == 1


def test_run_converter_leaves_no_output_on_parse_error(tmp_path):
    source = tmp_path / "bad.in"
    source.write_text(";I\n0 a bb r halt\n", encoding="utf-8")
    target = tmp_path / "bad.out"

    with pytest.raises(InvalidSymbol):
        run_converter(source, target)
    assert not target.exists()


def test_run_converter_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_converter(tmp_path / "missing.in", tmp_path / "missing.out")


def test_run_converter_rejects_non_utf8_input(tmp_path):
    source = tmp_path / "latin.in"
    source.write_bytes(b";I\n0 \xff 1 r halt\n")

    with pytest.raises(InputDecodeError) as excinfo:
        run_converter(source, tmp_path / "latin.out")
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert not (tmp_path / "latin.out").exists()
