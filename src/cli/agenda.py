#!/usr/bin/env python3
"""
Agenda Command Shell.

Runs agenda commands from the terminal against one in-memory session.

Usage:
    python -m src.cli.agenda
    python -m src.cli.agenda --script commands.txt
    python -m src.cli.agenda --script commands.txt --json
"""

import argparse
import json
import logging
import sys
from typing import Iterable, TextIO

from dotenv import load_dotenv

from src.app.command_coordinator import CommandCoordinator
from src.cli.utils import validate_script_path
from src.commands.base_command import CommandResult

# Setup logging
logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

PROMPT = "agenda> "
EXIT_WORDS = ("exit", "quit")


def format_result(result: CommandResult, as_json: bool = False) -> str:
    """
    Renders a result for the terminal.

    Args:
        result: The command result.
        as_json: Emit a single JSON object instead of text.

    Returns:
        str: The rendered result.
    """
    if as_json:
        return json.dumps(
            {
                "success": result.success,
                "message": result.message,
                "command": result.command_name,
                "failure_kind": (
                    result.failure_kind.value if result.failure_kind else None
                ),
                "parse_error": result.is_parse_error,
                "data": result.data,
            }
        )
    marker = "✓" if result.success else "✗"
    return f"{marker} {result.message}"


def run_lines(
    coordinator: CommandCoordinator,
    lines: Iterable[str],
    out: TextIO,
    as_json: bool = False,
    echo: bool = False,
) -> int:
    """
    Executes each non-blank line as a command.

    Args:
        coordinator: The session to run against.
        lines: Command texts; "exit" or "quit" stops early.
        out: Where results are written.
        as_json: Write JSON lines instead of text.
        echo: Print each command before its result.

    Returns:
        int: Number of failed commands.
    """
    failures = 0
    for raw in lines:
        text = raw.rstrip("\n")
        if not text.strip():
            continue
        if text.strip() in EXIT_WORDS:
            break
        if echo and not as_json:
            print(f"{PROMPT}{text}", file=out)
        result = coordinator.execute(text)
        if not result.success:
            failures += 1
        print(format_result(result, as_json), file=out)
    return failures


def interactive(coordinator: CommandCoordinator, as_json: bool = False) -> int:
    """Reads commands from stdin until EOF, Ctrl-C or an exit word."""

    def prompt_lines():
        while True:
            try:
                yield input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                print(file=sys.stdout)
                return

    run_lines(coordinator, prompt_lines(), sys.stdout, as_json=as_json)
    return 0


def run_script(args) -> int:
    """Runs every command in a script file."""
    coordinator = CommandCoordinator()
    try:
        with open(args.script, "r", encoding="utf-8") as f:
            failures = run_lines(
                coordinator, f, sys.stdout, as_json=args.json, echo=True
            )
    except Exception as e:
        logger.error(f"Failed to run script: {e}")
        if args.verbose:
            raise
        return 1
    return 1 if failures and args.strict else 0


def main():
    """Main CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Run ProjektAgenda commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument("--script", "-s", help="File with one command per line")
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any scripted command fails",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.script:
        if not validate_script_path(args.script):
            sys.exit(1)
        sys.exit(run_script(args))

    try:
        exit_code = interactive(CommandCoordinator(), as_json=args.json)
    except Exception as e:
        logger.error(f"Session aborted: {e}")
        if args.verbose:
            raise
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
