"""
alu8 — ALU Evaluator

evaluate() is a pure function of (operation, a, b) → (result, flags).

The raw result is computed into a widened accumulator (at least 9 bits)
so the carry / borrow out of bit 7 is still visible in bit 8 before the
result is truncated to a byte. Flags are derived from that accumulator:

    C = acc[8]      (sub: acc = (a - b) mod 2^9, so a borrow sets bit 8)
    Z = (acc & 0xFF) == 0
    N = acc[7]
    V = add: (A[7] == B[7]) && (A[7] != R[7])
        sub: (A[7] != B[7]) && (B[7] == R[7])
        logic ops never set V
    S = N ^ V

S is what makes a signed decimal reading correct under overflow. For
-100 - 50 the byte result is 106 (0110 0110): N=0, but V=1, so S=1 and
the result reads as 106 - 256 = -150.

Operation codes other than OR/AND/XOR/ADD/SUB are rejected with ALUError
instead of falling through to a zero result.
"""

import logging
from typing import Tuple

from .config import BYTE_MASK, CARRY_BIT, SIGN_BIT, WIDE_MASK, BYTE_MODULUS
from .flags import FlagSet, S, N, Z, V, C
from .ops import Operation, to_operation

__all__ = ['ALUError', 'evaluate', 'to_signed', 'to_signed_raw', 'to_byte']

log = logging.getLogger(__name__)


class ALUError(ValueError):
    """Raised when evaluate() is called outside its contract."""
    pass


def _read(value: int, bit: int) -> int:
    """Return bit `bit` of value as 0 or 1."""
    return (value >> bit) & 1


def _check_operand(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ALUError(f"Operand {name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= BYTE_MASK:
        raise ALUError(f"Operand {name}={value} outside 0..{BYTE_MASK}")
    return value


def evaluate(operation, a: int, b: int) -> Tuple[int, FlagSet]:
    """Perform one ALU calculation.

    Args:
        operation: Operation.OR/AND/XOR/ADD/SUB or the matching op-code int.
        a: First operand, 0..255.
        b: Second operand, 0..255.

    Returns:
        (result_byte, flags) — flags is a new FlagSet (SNZVC).

    Raises:
        ALUError: unknown op-code (including NOP) or operand out of range.
    """
    op = to_operation(operation)
    if op is None:
        raise ALUError(f"Unknown ALU operation code {operation!r}")
    a = _check_operand('a', a)
    b = _check_operand('b', b)

    flags = FlagSet()

    if op is Operation.OR:
        acc = a | b
    elif op is Operation.AND:
        acc = a & b
    elif op is Operation.XOR:
        acc = a ^ b
    elif op is Operation.ADD:
        acc = a + b
        if _read(a, SIGN_BIT) == _read(b, SIGN_BIT) and _read(a, SIGN_BIT) != _read(acc, SIGN_BIT):
            flags.set(V)
    else:  # SUB
        # 9-bit modular difference: a borrow leaves bit 8 set
        acc = (a - b) & WIDE_MASK
        if _read(a, SIGN_BIT) != _read(b, SIGN_BIT) and _read(b, SIGN_BIT) == _read(acc, SIGN_BIT):
            flags.set(V)

    if _read(acc, CARRY_BIT):
        flags.set(C)
    if acc & BYTE_MASK == 0:
        flags.set(Z)
    if _read(acc, SIGN_BIT):
        flags.set(N)
    if flags.is_set(N) != flags.is_set(V):
        flags.set(S)

    result = acc & BYTE_MASK
    if log.isEnabledFor(logging.DEBUG):
        log.debug("%s %d, %d -> %d [%s]", op.mnemonic, a, b, result, flags.display())
    return result, flags


def to_signed(value: int, flags: FlagSet) -> int:
    """Signed reading of a result byte using the S flag of its calculation."""
    if flags.is_set(S):
        return value - BYTE_MODULUS
    return value


def to_signed_raw(value: int) -> int:
    """Two's complement reading of a byte from bit 7 alone (no flags needed)."""
    if _read(value, SIGN_BIT):
        return value - BYTE_MODULUS
    return value


def to_byte(value: int) -> int:
    """Truncate any integer to its low 8 bits (-100 -> 156, 300 -> 44)."""
    return value & BYTE_MASK
