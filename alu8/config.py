"""
alu8 — Configuration Constants
==============================

All tunables live here as module constants. Nothing is read from the
environment; run-time options come from the alu8calc command line only.
"""


# =============================================================================
#  DATA PATH
# =============================================================================
DATA_BITS = 8             # Operand / result width
BYTE_MASK = 0xFF          # Truncation mask for the result byte
SIGN_BIT = 7              # Bit 7 carries the two's complement sign
CARRY_BIT = 8             # Bit 8 of the widened accumulator = carry / borrow
WIDE_MASK = 0x1FF         # 9-bit accumulator (result + carry/borrow)
BYTE_MODULUS = 0x100      # 2^8, offset between unsigned and signed readings


# =============================================================================
#  STATUS REGISTER
# =============================================================================
FLAG_BITS = 5             # S N Z V C
FLAG_ORDER = "SNZVC"      # Display order, most significant first


# =============================================================================
#  CONSOLE
# =============================================================================
SEPARATOR_WIDTH = 80
SEPARATOR = "-" * SEPARATOR_WIDTH

PROMPT_OPERATION = "Enter an operation to perform (OR, AND, XOR, ADD or SUB):"
PROMPT_FIRST_OPERAND = "Enter the first operand (0 - 255):"
PROMPT_SECOND_OPERAND = "Enter the second operand (0 - 255):"

MSG_INVALID_OPERATION = "Invalid instruction, try again!"
MSG_INVALID_BYTE = "Invalid input, try again!"
MSG_DEMO_BANNER = "Five examples of ALU calculations are printed below!"

# Longest operand text accepted, sign and prefix included. Must stay below
# the interpreter's str -> int digit limit (4300).
MAX_NUMBER_LENGTH = 64

# (mnemonic, a, b) — negative operands are truncated to 8 bits before use,
# so -100 is fed to the ALU as 156 and -5 as 251.
DEMO_CALCULATIONS = (
    ("ADD", 100, 50),
    ("SUB", -100, 50),
    ("AND", 0x24, 1 << 5),
    ("OR", 0x20, 1 << 0),
    ("ADD", -5, 10),
)


# =============================================================================
#  LOGGING
# =============================================================================
LOG_NAME = "alu8"
LOG_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-7s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
