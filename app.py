# app.py

import argparse

from rich.console import Console
from rich.markup import escape

from config.config_loader import load_config
from converter.engine import output_path_for, run_converter
from converter.errors import ConversionError
from logger.logger import build_logger
from tools.table_inspect import print_transition_table

console = Console()
error_console = Console(stderr=True)

def report_error(message):
    error_console.print(f"[red]Error: {escape(str(message))}[/red]", highlight=False, soft_wrap=True)

def record(log_call, *args):
    """Write a history entry; a failing log never changes the outcome of a conversion."""
    try:
        log_call(*args)
    except OSError as e:
        error_console.print(f"[yellow]Warning: could not write conversion log: {escape(str(e))}[/yellow]", highlight=False, soft_wrap=True)

def convert(input_path, config, show_table=False):
    """Convert one file; returns the process exit code."""
    logger = build_logger(config)

    try:
        output_path = output_path_for(input_path, config["input_suffix"], config["output_suffix"])
    except ConversionError as e:
        report_error(e)
        return 1

    try:
        result = run_converter(input_path, output_path)
    except (ConversionError, OSError) as e:
        report_error(e)
        record(logger.log_failure, input_path, e)
        return 1

    record(logger.log_conversion, input_path, output_path, result)

    console.print(f"[green]Successfully converted to {result.target.label} model.[/green]")
    console.print(f" Input: {escape(str(input_path))}", highlight=False, soft_wrap=True)
    console.print(f" Output: {escape(str(output_path))}", highlight=False, soft_wrap=True)

    if show_table:
        print_transition_table(result.transitions, converted=True, title=escape(str(output_path)), out=console)
    return 0

def main(argv=None):
    parser = argparse.ArgumentParser(description="Convert a Turing machine table between the doubly-infinite and Sipser tape models")
    parser.add_argument("input", nargs="?", help="Input table (default from config: example.in)")
    parser.add_argument("--config", help="Path to a JSON runtime config (default: config/runtime_config.json)")
    parser.add_argument("--show-table", action="store_true", help="Print the generated table after converting")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        report_error(e)
        return 1

    input_path = args.input or config["default_input"]
    return convert(input_path, config, show_table=args.show_table)

if __name__ == "__main__":
    raise SystemExit(main())
