"""
alu8 — Operation Codes

Maps op-codes to mnemonics and operator symbols in both directions.

    Code  Mnemonic  Symbol
    0x00  NOP       (not an ALU operation, never evaluated)
    0x01  OR        |
    0x02  AND       &
    0x03  XOR       ^
    0x04  ADD       +
    0x05  SUB       -

Text lookups return None for anything that is not one of the five
ALU mnemonics; there is no sentinel op-code standing in for "not found".
"""

from enum import IntEnum
from typing import Optional

__all__ = ['Operation', 'ALU_OPERATIONS', 'parse_operation', 'to_operation',
           'instruction_name', 'operator_symbol']


class Operation(IntEnum):
    NOP = 0x00
    OR = 0x01
    AND = 0x02
    XOR = 0x03
    ADD = 0x04
    SUB = 0x05

    @property
    def mnemonic(self) -> str:
        return self.name

    @property
    def symbol(self) -> str:
        return _SYMBOLS.get(self, '?')

    @property
    def is_alu(self) -> bool:
        """True for the five operations the ALU can evaluate."""
        return self in _SYMBOLS


_SYMBOLS = {
    Operation.OR:  '|',
    Operation.AND: '&',
    Operation.XOR: '^',
    Operation.ADD: '+',
    Operation.SUB: '-',
}

ALU_OPERATIONS = tuple(_SYMBOLS)

# mnemonic -> Operation (exact, case-sensitive)
_BY_NAME = {op.mnemonic: op for op in ALU_OPERATIONS}


def parse_operation(text: str) -> Optional[Operation]:
    """Look up an ALU mnemonic. Case-sensitive: 'ADD' matches, 'add' does not.

    Surrounding whitespace (e.g. the newline of a terminal line) is ignored.
    """
    return _BY_NAME.get(text.strip())


def to_operation(code) -> Optional[Operation]:
    """Return the ALU Operation for an integer code, or None.

    Only real ints qualify: bools and floats such as 1.0 are not op-codes.
    """
    if isinstance(code, bool) or not isinstance(code, int):
        return None
    try:
        op = Operation(code)
    except ValueError:
        return None
    return op if op.is_alu else None


def instruction_name(code) -> str:
    """Mnemonic for an op-code, 'Unknown' outside the five ALU operations."""
    op = to_operation(code)
    return op.mnemonic if op is not None else 'Unknown'


def operator_symbol(code) -> str:
    """Operator for an op-code, 'Unknown' outside the five ALU operations."""
    op = to_operation(code)
    return op.symbol if op is not None else 'Unknown'
