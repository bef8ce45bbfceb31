# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""CLI for dumping the interface description of a program module."""

import argparse
import logging
import sys
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.table import Table
from rich.text import Text

from pidl import extract_program_info
from pidl.model import FieldInfo, ProgramInfo
from pidl.serializer import to_json
from pidl.source import read_source

logger = logging.getLogger(__name__)

DUMP_INFO_COMMAND = "dump_info"
DEFAULT_SOURCE_PATH = Path("programs/swap-program/src/lib.rs")
USAGE_LINE = (
    "Program interface extractor - Use 'dump_info' command to export program definition"
)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True), rich_tracebacks=True, show_path=False
            )
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="pidl")
    subparsers = parser.add_subparsers(dest="command", required=True)
    dump_parser = subparsers.add_parser(DUMP_INFO_COMMAND)
    dump_parser.add_argument(
        "--source",
        default=str(DEFAULT_SOURCE_PATH),
        help="Program source file, relative to the working directory.",
    )
    dump_parser.add_argument(
        "--format",
        choices=("json", "table"),
        default="json",
        help="Output format.",
    )
    dump_parser.add_argument(
        "--output",
        required=False,
        help="Optional output file path; always written as raw JSON.",
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code, always 0.
    """
    if not argv or argv[0] != DUMP_INFO_COMMAND:
        stdout.write(f"{USAGE_LINE}\n")
        return 0
    try:
        with redirect_stdout(stdout), redirect_stderr(stderr):
            args, extra = build_parser().parse_known_args(argv)
    except SystemExit as exc:
        if exc.code == 0:
            return 0
        logger.warning(f"Argument parsing failed (argv={argv})")
        stdout.write(f"{USAGE_LINE}\n")
        return 0
    if extra:
        logger.debug(f"Ignoring extra arguments (extra={extra})")
    return _run_dump_info(args=args, stdout=stdout, stderr=stderr)


def _run_dump_info(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    """Run dump_info command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    source_path = Path.cwd() / args.source
    program_info = extract_program_info(read_source(source_path))
    logger.info(
        f"Program info extracted (path={source_path} instructions={len(program_info.instructions)} "
        f"accounts={len(program_info.accounts)} errors={len(program_info.errors)} "
        f"structs={len(program_info.structs)})"
    )
    if args.output:
        if args.format != "json":
            logger.warning(
                f"Output file is always JSON; ignoring format (format={args.format} output_path={args.output})"
            )
        try:
            _write_json_file(program_info=program_info, output_path=Path(args.output))
        except OSError as exc:
            logger.warning(
                f"Failed to write JSON output file (output_path={args.output} error={exc})"
            )
            stderr.write(f"Failed to write JSON output file: {args.output}\n")
    elif args.format == "table":
        _write_table(program_info=program_info, stdout=stdout)
    else:
        _write_json(program_info=program_info, stdout=stdout)
    return 0


def _write_json(program_info: ProgramInfo, stdout: TextIO) -> None:
    """Write the program record as pretty-printed JSON.

    Args:
        program_info: Assembled program record.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        to_json(program_info),
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def _write_json_file(program_info: ProgramInfo, output_path: Path) -> None:
    """Write raw JSON to an output file.

    Args:
        program_info: Assembled program record.
        output_path: Target file path.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(to_json(program_info) + "\n", encoding="utf-8")


def _write_table(program_info: ProgramInfo, stdout: TextIO) -> None:
    """Write a human-readable summary of the program record.

    Args:
        program_info: Assembled program record.
        stdout: Standard output stream.
    """
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.rule(
        Text(f"program_id: {program_info.program_id or '-'}"),
        style=Style(color="cyan"),
        characters="-",
    )

    instructions = Table(title="instructions", show_header=True, expand=True)
    instructions.add_column("name", ratio=1, overflow="fold")
    instructions.add_column("arguments", ratio=3, overflow="fold")
    for instruction in program_info.instructions:
        instructions.add_row(
            Text(instruction.name),
            Text(
                ", ".join(
                    f"{arg.name}: {arg.type_name}" for arg in instruction.arguments
                )
            ),
        )
    console.print(instructions)

    for title, items in (
        ("accounts", program_info.accounts),
        ("structs", program_info.structs),
    ):
        table = Table(title=title, show_header=True, show_lines=True, expand=True)
        table.add_column("name", ratio=1, overflow="fold")
        table.add_column("fields", ratio=3, overflow="fold")
        for item in items:
            table.add_row(Text(item.name), _format_fields(item.fields))
        console.print(table)

    errors = Table(title="errors", show_header=True, expand=True)
    errors.add_column("code", ratio=1, justify="right")
    errors.add_column("name", ratio=2, overflow="fold")
    errors.add_column("message", ratio=2, overflow="fold")
    for error in program_info.errors:
        errors.add_row(str(error.code), Text(error.name), Text(error.message))
    console.print(errors)


def _format_fields(fields: tuple[FieldInfo, ...]) -> Text:
    return Text("\n".join(f"{field.name}: {field.type_name}" for field in fields))


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
