#!/usr/bin/env python3
"""
alu8calc — 8-bit ALU Emulator CLI

Usage:
    python alu8calc.py                      # demo, then interactive calculations
    python alu8calc.py --no-demo            # interactive only
    python alu8calc.py --demo               # print the five demo calculations and exit
    python alu8calc.py OP A B               # one calculation, e.g. ADD 100 50

Operands may be decimal, hex (0x24 or $24) or binary (0b100100). Values
outside 0..255 are truncated to 8 bits, so -100 is entered as 156.

Examples:
    python alu8calc.py SUB -100 50
    python alu8calc.py AND 0x24 0x20 -v
    python alu8calc.py --log-file logs/alu8.log
"""

import argparse
import logging
import sys
import os

# Allow running from project root without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from alu8 import __version__
from alu8.console import parse_byte, print_calculation, run_console, run_demo
from alu8.log_setup import setup_logging
from alu8.ops import ALU_OPERATIONS, parse_operation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alu8calc",
        description="8-bit ALU emulator (OR, AND, XOR, ADD, SUB with SNZVC flags)",
        epilog="Operations: " + ", ".join(op.mnemonic for op in ALU_OPERATIONS),
    )
    parser.add_argument("operation", nargs="?",
                        help="Operation for a single calculation (case-sensitive)")
    parser.add_argument("a", nargs="?", help="First operand (0-255, hex or binary allowed)")
    parser.add_argument("b", nargs="?", help="Second operand (0-255, hex or binary allowed)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--demo", action="store_true",
                      help="Print the five demo calculations and exit")
    mode.add_argument("--no-demo", action="store_true",
                      help="Skip the demo before the interactive loop")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log every calculation to stderr")
    parser.add_argument("--log-file", default=None,
                        help="Also write a DEBUG log to this file")
    parser.add_argument("--version", action="version",
                        version=f"alu8calc {__version__}")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        console_level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
    )

    if args.operation is not None:
        if args.demo or args.no_demo:
            parser.error("--demo/--no-demo cannot be combined with a calculation")
        if args.b is None:
            parser.error("a calculation needs OP A B")
        op = parse_operation(args.operation)
        if op is None:
            parser.error(f"unknown operation {args.operation!r} "
                         f"(choose from {', '.join(o.mnemonic for o in ALU_OPERATIONS)})")
        a = parse_byte(args.a)
        b = parse_byte(args.b)
        if a is None or b is None:
            bad = args.a if a is None else args.b
            parser.error(f"invalid operand {bad!r}")
        print_calculation(op, a, b, sys.stdout)
        return 0

    if args.demo:
        run_demo(sys.stdout)
        return 0

    run_console(sys.stdin, sys.stdout, demo=not args.no_demo)
    return 0


if __name__ == "__main__":
    sys.exit(main())
