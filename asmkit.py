#!/usr/bin/env python3
"""
asmkit — asmvm command-line front end
=====================================

    asmkit run     — Run a source file as a one-shot program
    asmkit repl    — Interactive line-by-line session
    asmkit help    — List the instruction set

Usage:
    python asmkit.py <command> [options]
    python asmkit.py --help

Examples:
    python asmkit.py run add.asm
    python asmkit.py run add.asm --trace
    python asmkit.py -vv --log-file logs/asmkit.log repl
    echo "SET 1 10" | python asmkit.py run -
"""

import argparse
import logging
import sys
import os

__version__ = "0.1.0"

# Ensure our package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from asmvm import Program, REPL, MachineError
from asmvm.log_setup import setup_logging, verbosity_to_level

log = logging.getLogger("asmvm.cli")

QUIT_WORDS = ("QUIT", "EXIT")
PROMPT = "> "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asmkit",
        description="asmvm: run SET/ADD assembly on a 16-bit register machine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""commands:
  run        Run a source file (or - for stdin) as a one-shot program
  repl       Interactive session on a persistent machine
  help       List the instruction set
""",
    )
    parser.add_argument("--version", action="version", version=f"asmkit {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase console log verbosity (-v, -vv)")
    parser.add_argument("--log-file", default=None,
                        help="Also write a DEBUG log to this file")
    sub = parser.add_subparsers(dest="command", metavar="command")

    # ── run ──────────────────────────────────────────────────────────────
    p_run = sub.add_parser("run", help="Run a source file as a one-shot program")
    p_run.add_argument("input", help="Input source file, or - for stdin")
    p_run.add_argument("--trace", action="store_true",
                       help="Print an execution trace after the output log")

    # ── repl ─────────────────────────────────────────────────────────────
    sub.add_parser("repl", help="Interactive line-by-line session")

    # ── help ─────────────────────────────────────────────────────────────
    sub.add_parser("help", help="List the instruction set")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    setup_logging("asmvm", console_level=verbosity_to_level(args.verbose),
                  log_file=args.log_file)

    handler = COMMANDS[args.command]
    try:
        return handler(args)
    except (MachineError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


# ═════════════════════════════════════════════════════════════════════════════
# COMMAND IMPLEMENTATIONS
# ═════════════════════════════════════════════════════════════════════════════

def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


# ── run ──────────────────────────────────────────────────────────────────
def cmd_run(args):
    source = _read_source(args.input)
    log.info("Running %s", args.input)
    program = Program(source, trace=args.trace)

    for line in program.output:
        print(line)
    if args.trace:
        print("-" * 40)
        print(program.machine.get_trace())

    if not program.halted:
        print(f"{args.input}: {program.error}", file=sys.stderr)
        return 1
    return 0


# ── repl ─────────────────────────────────────────────────────────────────
def cmd_repl(args):
    repl = REPL()
    print(f"asmkit {__version__}: type HELP for instructions, QUIT to exit.")
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            break
        if line.strip().upper() in QUIT_WORDS:
            break
        print(repl.run(line))
    return 0


# ── help ─────────────────────────────────────────────────────────────────
def cmd_help(args):
    print(REPL().help_text)
    return 0


COMMANDS = {
    "run": cmd_run,
    "repl": cmd_repl,
    "help": cmd_help,
}


if __name__ == "__main__":
    sys.exit(main())
