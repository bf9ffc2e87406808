"""
alu8 — Console Front End

Input side: text -> Operation / byte. The parse_* functions return None
for text they cannot use; the read_* loops print a retry message and ask
again, so nothing invalid ever reaches the ALU.

Output side: one calculation rendered as a framed block:

    --------------------------------------------------------------------------------
    Instruction: SUB
    Decimal    : -100 - 50 = -150
    Binary     : 10011100 - 00110010 = 01101010
    Status bits: SNZVC = 10010
    --------------------------------------------------------------------------------

Operands are shown with their two's complement reading (bit 7 = sign),
the result with the reading selected by the S flag.
"""

import logging
import re
import sys
from typing import Optional, TextIO

from .alu import evaluate, to_byte, to_signed, to_signed_raw
from .config import (
    DATA_BITS, MAX_NUMBER_LENGTH, SEPARATOR, DEMO_CALCULATIONS, MSG_DEMO_BANNER,
    MSG_INVALID_BYTE, MSG_INVALID_OPERATION,
    PROMPT_FIRST_OPERAND, PROMPT_OPERATION, PROMPT_SECOND_OPERAND,
)
from .flags import FlagSet
from .ops import Operation, instruction_name, operator_symbol, parse_operation

log = logging.getLogger(__name__)

_INT_RE = re.compile(r'^[+-]?(0[xX][0-9a-fA-F]+|0[bB][01]+|\$[0-9a-fA-F]+|[0-9]+)$')


# ══════════════════════════════════════════════
# Input
# ══════════════════════════════════════════════

def parse_int(text: str) -> Optional[int]:
    """Parse an integer that may be hex (0x... or $...), binary (0b...) or decimal.

    A leading sign is allowed. Returns None for anything else, and for
    text longer than MAX_NUMBER_LENGTH characters.
    """
    value = text.strip()
    if len(value) > MAX_NUMBER_LENGTH or not _INT_RE.match(value):
        return None
    sign = 1
    if value[0] in '+-':
        if value[0] == '-':
            sign = -1
        value = value[1:]
    if value[:2] in ('0x', '0X'):
        return sign * int(value[2:], 16)
    if value[:2] in ('0b', '0B'):
        return sign * int(value[2:], 2)
    if value.startswith('$'):
        return sign * int(value[1:], 16)  # Motorola hex convention
    return sign * int(value)


def parse_byte(text: str) -> Optional[int]:
    """Parse an operand and truncate it to 8 bits (-100 -> 156).

    Returns None when the text is not a number.
    """
    value = parse_int(text)
    if value is None:
        return None
    return to_byte(value)


def _readline(stream_in: TextIO, stream_out: TextIO) -> str:
    line = stream_in.readline()
    if not line:
        raise EOFError("end of input")
    stream_out.write("\n")
    return line


def read_operation(stream_in: TextIO = sys.stdin, stream_out: TextIO = sys.stdout) -> Operation:
    """Read lines until one names an ALU operation."""
    while True:
        line = _readline(stream_in, stream_out)
        op = parse_operation(line)
        if op is not None:
            return op
        log.debug("Rejected operation %r", line.rstrip("\n"))
        stream_out.write(f"{MSG_INVALID_OPERATION}\n\n")


def read_byte(stream_in: TextIO = sys.stdin, stream_out: TextIO = sys.stdout) -> int:
    """Read lines until one holds a number; return it truncated to a byte."""
    while True:
        line = _readline(stream_in, stream_out)
        value = parse_byte(line)
        if value is not None:
            return value
        log.debug("Rejected operand %r", line.rstrip("\n"))
        stream_out.write(f"{MSG_INVALID_BYTE}\n\n")


# ══════════════════════════════════════════════
# Output
# ══════════════════════════════════════════════

def _bits(value: int, width: int = DATA_BITS) -> str:
    return format(value, f"0{width}b")


def format_calculation(operation, a: int, b: int, result: int, flags: FlagSet) -> str:
    """Render one calculation as the framed text block (trailing blank line included)."""
    op = f" {operator_symbol(operation)} "
    lines = [
        SEPARATOR,
        f"Instruction: {instruction_name(operation)}",
        f"Decimal    : {to_signed_raw(a)}{op}{to_signed_raw(b)} = {to_signed(result, flags)}",
        f"Binary     : {_bits(a)}{op}{_bits(b)} = {_bits(result)}",
        f"Status bits: SNZVC = {flags.to_bits()}",
        SEPARATOR,
    ]
    return "\n".join(lines) + "\n\n"


def print_calculation(operation, a: int, b: int, stream: TextIO = sys.stdout):
    """Evaluate one calculation and write its block to stream.

    Returns the (result, flags) pair from the ALU.
    """
    result, flags = evaluate(operation, a, b)
    stream.write(format_calculation(operation, a, b, result, flags))
    return result, flags


# ══════════════════════════════════════════════
# Driver
# ══════════════════════════════════════════════

def run_demo(stream: TextIO = sys.stdout):
    """Print the five reference calculations."""
    stream.write(f"{MSG_DEMO_BANNER}\n\n")
    for name, a, b in DEMO_CALCULATIONS:
        print_calculation(parse_operation(name), to_byte(a), to_byte(b), stream)


def calculate_by_input(stream_in: TextIO = sys.stdin, stream_out: TextIO = sys.stdout):
    """Prompt for an operation and two operands, then print the calculation."""
    stream_out.write(f"{PROMPT_OPERATION}\n")
    op = read_operation(stream_in, stream_out)

    stream_out.write(f"{PROMPT_FIRST_OPERAND}\n")
    a = read_byte(stream_in, stream_out)

    stream_out.write(f"{PROMPT_SECOND_OPERAND}\n")
    b = read_byte(stream_in, stream_out)

    return print_calculation(op, a, b, stream_out)


def run_console(stream_in: TextIO = sys.stdin, stream_out: TextIO = sys.stdout,
                demo: bool = True) -> int:
    """Interactive loop: optional demo, then calculations until end of input.

    Returns the number of calculations entered by the user.
    """
    if demo:
        run_demo(stream_out)

    count = 0
    try:
        while True:
            calculate_by_input(stream_in, stream_out)
            count += 1
    except EOFError:
        log.info("End of input after %d calculation(s)", count)
    except KeyboardInterrupt:
        stream_out.write("\n")
        log.info("Interrupted after %d calculation(s)", count)
    return count
