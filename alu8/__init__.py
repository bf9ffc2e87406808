"""
alu8 — 8-bit ALU Emulator
=========================
Computes OR, AND, XOR, ADD and SUB on two 8-bit operands and derives the
SNZVC status flags the way a hardware ALU does.

Architecture:
    ┌────────────┐    ┌──────────────┐    ┌────────────────┐
    │ text input │───>│ console.py   │───>│ alu.evaluate() │──> (result, FlagSet)
    │ (terminal) │    │ parse / retry│    │ pure, 9-bit acc│          │
    └────────────┘    └──────────────┘    └────────────────┘          v
                                                       console.format_calculation()

    - ops.py:        Operation enum, mnemonic/symbol lookups
    - flags.py:      FlagSet bit-set value type (S N Z V C)
    - alu.py:        evaluate(), signed readings, ALUError
    - console.py:    input parsing, retry loops, rendering, demo + loop driver
    - log_setup.py:  logging (rich console handler + optional file)
"""

__version__ = "1.0.0"

from .ops import Operation, ALU_OPERATIONS, parse_operation
from .flags import FlagSet, S, N, Z, V, C
from .alu import ALUError, evaluate, to_signed, to_signed_raw, to_byte
from .console import (
    parse_byte, format_calculation, print_calculation,
    calculate_by_input, run_demo, run_console,
)
