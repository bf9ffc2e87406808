"""
alu8 — Status Register (SNZVC)

Bit layout of the 5-bit status field:
    bit 4: S (Signed   — N XOR V, sign of the true result)
    bit 3: N (Negative — bit 7 of the result)
    bit 2: Z (Zero     — result byte is zero)
    bit 1: V (Overflow — signed overflow)
    bit 0: C (Carry    — bit 8 of the widened accumulator)

FlagSet is a small value type: two flag sets are equal when their bit
patterns are equal. The ALU builds a fresh one for every calculation.
"""

from .config import FLAG_BITS, FLAG_ORDER

# Flag bit positions
S = 4
N = 3
Z = 2
V = 1
C = 0

_POSITIONS = {'S': S, 'N': N, 'Z': Z, 'V': V, 'C': C}


class FlagSet:
    """Fixed-width bit set holding status flags.

    The width defaults to the five SNZVC bits but any positive width is
    accepted, so the same type can model a wider condition code register.
    """

    __slots__ = ('_bits', '_width')

    def __init__(self, bits: int = 0, width: int = FLAG_BITS):
        if width <= 0:
            raise ValueError(f"FlagSet width must be positive, got {width}")
        if bits < 0 or bits >> width:
            raise ValueError(f"Flag bits 0x{bits:X} do not fit in {width} bits")
        self._bits = bits
        self._width = width

    # --- bit access ---

    def _check(self, bit: int):
        if not 0 <= bit < self._width:
            raise IndexError(f"Flag bit {bit} outside 0..{self._width - 1}")

    def set(self, bit: int) -> "FlagSet":
        """Set one bit without affecting the others."""
        self._check(bit)
        self._bits |= (1 << bit)
        return self

    def clear(self, bit: int) -> "FlagSet":
        """Clear one bit without affecting the others."""
        self._check(bit)
        self._bits &= ~(1 << bit)
        return self

    def is_set(self, bit: int) -> bool:
        self._check(bit)
        return bool(self._bits & (1 << bit))

    def assign(self, bit: int, value: bool) -> "FlagSet":
        """Set or clear one bit depending on value."""
        return self.set(bit) if value else self.clear(bit)

    # --- named flags ---

    @property
    def signed(self) -> bool:
        return self.is_set(S)

    @property
    def negative(self) -> bool:
        return self.is_set(N)

    @property
    def zero(self) -> bool:
        return self.is_set(Z)

    @property
    def overflow(self) -> bool:
        return self.is_set(V)

    @property
    def carry(self) -> bool:
        return self.is_set(C)

    @property
    def width(self) -> int:
        return self._width

    # --- conversion ---

    def __int__(self) -> int:
        return self._bits

    def __index__(self) -> int:
        return self._bits

    def __eq__(self, other):
        if isinstance(other, FlagSet):
            return self._bits == other._bits and self._width == other._width
        if isinstance(other, int):
            return self._bits == other
        return NotImplemented

    def to_bits(self) -> str:
        """Bit pattern as text, most significant bit first (SNZVC for 5 bits)."""
        return format(self._bits, f"0{self._width}b")

    def display(self) -> str:
        """Flag letters, '.' for a clear flag (e.g. 'S..V.')."""
        chars = []
        for letter in FLAG_ORDER:
            pos = _POSITIONS[letter]
            chars.append(letter if pos < self._width and self.is_set(pos) else '.')
        return ''.join(chars)

    def __repr__(self):
        return f"FlagSet(0b{self.to_bits()}, width={self._width})"

    @classmethod
    def from_flags(cls, *, signed: bool = False, negative: bool = False,
                   zero: bool = False, overflow: bool = False,
                   carry: bool = False) -> "FlagSet":
        """Build a flag set from named booleans."""
        fs = cls()
        fs.assign(S, signed)
        fs.assign(N, negative)
        fs.assign(Z, zero)
        fs.assign(V, overflow)
        fs.assign(C, carry)
        return fs
