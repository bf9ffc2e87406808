"""
Console Front End Tests

Input parsing + retry loops driven from io.StringIO, the rendered
calculation block, and the demo / interactive driver.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io
import pytest
from alu8.alu import evaluate
from alu8.config import (
    SEPARATOR, MAX_NUMBER_LENGTH, MSG_DEMO_BANNER, MSG_INVALID_BYTE, MSG_INVALID_OPERATION,
)
from alu8.console import (
    parse_int, parse_byte, read_operation, read_byte,
    format_calculation, print_calculation,
    calculate_by_input, run_demo, run_console,
)
from alu8.ops import Operation


def _io(text: str):
    return io.StringIO(text), io.StringIO()


# ═══════════════════════════════════════════════
# Input parsing
# ═══════════════════════════════════════════════

class TestParseInt:

    @pytest.mark.parametrize("text, value", [
        ("0", 0),
        ("255", 255),
        ("007", 7),
        ("-100", -100),
        ("+5", 5),
        ("0x24", 0x24),
        ("0XfF", 0xFF),
        ("$20", 0x20),
        ("-$10", -0x10),
        ("0b100100", 0x24),
        ("  42\n", 42),
    ])
    def test_valid(self, text, value):
        assert parse_int(text) == value

    @pytest.mark.parametrize("text", ["", "abc", "12abc", "0x", "$", "0b2", "1.5", "--1", "1 2"])
    def test_invalid(self, text):
        assert parse_int(text) is None

    def test_length_limit(self):
        """Numbers up to MAX_NUMBER_LENGTH characters parse; longer text is rejected"""
        assert parse_int("1" * MAX_NUMBER_LENGTH) == int("1" * MAX_NUMBER_LENGTH)
        assert parse_int("-0b" + "1" * (MAX_NUMBER_LENGTH - 3)) is not None
        assert parse_int("1" * (MAX_NUMBER_LENGTH + 1)) is None

    @pytest.mark.parametrize("text", ["9" * 5000, "-" + "9" * 5000, "0x" + "F" * 5000])
    def test_huge_numbers_rejected(self, text):
        """Thousands of digits → None, never a ValueError from int()"""
        assert parse_int(text) is None
        assert parse_byte(text) is None


class TestParseByte:

    def test_in_range(self):
        assert parse_byte("100") == 100
        assert parse_byte("0xFF") == 255

    def test_truncates_to_eight_bits(self):
        """-100 → 156, -5 → 251, 300 → 44, 256 → 0"""
        assert parse_byte("-100") == 156
        assert parse_byte("-5") == 251
        assert parse_byte("300") == 44
        assert parse_byte("256") == 0

    def test_non_numeric(self):
        assert parse_byte("ten") is None


class TestReadLoops:

    def test_read_operation_first_try(self):
        src, out = _io("XOR\n")
        assert read_operation(src, out) is Operation.XOR
        assert MSG_INVALID_OPERATION not in out.getvalue()

    def test_read_operation_retries(self):
        """Invalid mnemonics are reported and the next line is read"""
        src, out = _io("add\nNOP\nSUB\n")
        assert read_operation(src, out) is Operation.SUB
        assert out.getvalue().count(MSG_INVALID_OPERATION) == 2

    def test_read_byte_retries(self):
        src, out = _io("x\n\n0x80\n")
        assert read_byte(src, out) == 0x80
        assert out.getvalue().count(MSG_INVALID_BYTE) == 2

    def test_read_byte_retries_after_huge_number(self):
        """A 5000-digit line is reported as invalid and the next line is read"""
        src, out = _io("9" * 5000 + "\n7\n")
        assert read_byte(src, out) == 7
        assert out.getvalue().count(MSG_INVALID_BYTE) == 1

    def test_read_byte_truncates(self):
        src, out = _io("-100\n")
        assert read_byte(src, out) == 156

    def test_eof_raises(self):
        src, out = _io("bogus\n")
        with pytest.raises(EOFError):
            read_operation(src, out)
        with pytest.raises(EOFError):
            read_byte(*_io(""))


# ═══════════════════════════════════════════════
# Rendering
# ═══════════════════════════════════════════════

class TestFormatCalculation:

    def test_add_block(self):
        result, flags = evaluate(Operation.ADD, 100, 50)
        text = format_calculation(Operation.ADD, 100, 50, result, flags)
        assert text == (
            f"{SEPARATOR}\n"
            "Instruction: ADD\n"
            "Decimal    : 100 + 50 = 150\n"
            "Binary     : 01100100 + 00110010 = 10010110\n"
            "Status bits: SNZVC = 01010\n"
            f"{SEPARATOR}\n\n"
        )

    def test_sub_block_reads_negative_operand(self):
        """156 is shown as -100; the result 106 reads as -150 because S=1"""
        result, flags = evaluate(Operation.SUB, 156, 50)
        text = format_calculation(Operation.SUB, 156, 50, result, flags)
        assert "Instruction: SUB\n" in text
        assert "Decimal    : -100 - 50 = -150\n" in text
        assert "Binary     : 10011100 - 00110010 = 01101010\n" in text
        assert "Status bits: SNZVC = 10010\n" in text

    def test_logic_block(self):
        result, flags = evaluate(Operation.AND, 0x24, 0x20)
        text = format_calculation(Operation.AND, 0x24, 0x20, result, flags)
        assert "Decimal    : 36 & 32 = 32\n" in text
        assert "Binary     : 00100100 & 00100000 = 00100000\n" in text
        assert "Status bits: SNZVC = 00000\n" in text

    def test_separator_width(self):
        assert SEPARATOR == "-" * 80

    def test_print_calculation_returns_alu_output(self):
        out = io.StringIO()
        result, flags = print_calculation(Operation.ADD, 251, 10, out)
        assert result == 5
        assert flags.carry
        assert "Decimal    : -5 + 10 = 5\n" in out.getvalue()
        assert "Status bits: SNZVC = 00001\n" in out.getvalue()


# ═══════════════════════════════════════════════
# Driver
# ═══════════════════════════════════════════════

class TestDemo:

    def test_demo_prints_five_blocks(self):
        out = io.StringIO()
        run_demo(out)
        text = out.getvalue()
        assert text.startswith(MSG_DEMO_BANNER)
        assert text.count("Instruction:") == 5
        assert text.count(SEPARATOR) == 10

    def test_demo_calculations(self):
        out = io.StringIO()
        run_demo(out)
        text = out.getvalue()
        assert "Decimal    : 100 + 50 = 150\n" in text
        assert "Decimal    : -100 - 50 = -150\n" in text
        assert "Decimal    : 36 & 32 = 32\n" in text
        assert "Decimal    : 32 | 1 = 33\n" in text
        assert "Decimal    : -5 + 10 = 5\n" in text


class TestInteractive:

    def test_calculate_by_input(self):
        src, out = _io("ADD\n100\n50\n")
        result, flags = calculate_by_input(src, out)
        assert result == 150
        text = out.getvalue()
        assert "Enter an operation to perform" in text
        assert "Enter the first operand (0 - 255):" in text
        assert "Enter the second operand (0 - 255):" in text
        assert "Instruction: ADD" in text

    def test_calculate_by_input_with_retries(self):
        src, out = _io("sub\nSUB\nminus five\n-100\n50\n")
        result, flags = calculate_by_input(src, out)
        assert result == 106
        assert flags.signed
        text = out.getvalue()
        assert MSG_INVALID_OPERATION in text
        assert MSG_INVALID_BYTE in text

    def test_run_console_until_eof(self):
        src, out = _io("ADD\n1\n2\nOR\n$F0\n$0F\n")
        count = run_console(src, out, demo=False)
        assert count == 2
        text = out.getvalue()
        assert MSG_DEMO_BANNER not in text
        assert "Decimal    : 1 + 2 = 3\n" in text
        assert "Binary     : 11110000 | 00001111 = 11111111\n" in text

    def test_run_console_with_demo(self):
        src, out = _io("")
        count = run_console(src, out, demo=True)
        assert count == 0
        assert out.getvalue().count("Instruction:") == 5

    def test_huge_operand_does_not_end_loop(self):
        src, out = _io("ADD\n" + "9" * 5000 + "\n1\n2\n")
        assert run_console(src, out, demo=False) == 1
        text = out.getvalue()
        assert MSG_INVALID_BYTE in text
        assert "Decimal    : 1 + 2 = 3\n" in text

    def test_partial_calculation_not_counted(self):
        """EOF in the middle of a calculation ends the loop cleanly"""
        src, out = _io("ADD\n1\n")
        assert run_console(src, out, demo=False) == 0

    def test_keyboard_interrupt_ends_loop(self):
        class _Interrupting(io.StringIO):
            def readline(self, *args):
                raise KeyboardInterrupt

        out = io.StringIO()
        assert run_console(_Interrupting(), out, demo=False) == 0
