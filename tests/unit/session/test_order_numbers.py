"""Unit tests for order number parsing and loading."""

import pytest

from order_tracker.session.order_numbers import (
    load_order_numbers,
    parse_order_numbers,
    parse_order_numbers_file,
)
from order_tracker.utils.error_handler import ValidationException


class TestParseOrderNumbers:
    """Tests for typed input."""

    def test_space_separated(self):
        """Should split on spaces and keep input order."""
        assert parse_order_numbers("1001 1002 1003") == ["1001", "1002", "1003"]

    def test_collapses_repeated_whitespace(self):
        """Should ignore repeated and surrounding whitespace."""
        assert parse_order_numbers("  1001   1002\t1003 ") == ["1001", "1002", "1003"]

    def test_blank_input(self):
        """Should return nothing for blank input."""
        assert parse_order_numbers("   ") == []


class TestParseOrderNumbersFile:
    """Tests for file contents."""

    @pytest.mark.parametrize("content", ["A1\nA2\nA3", "A1\r\nA2\r\nA3\r\n", "A1\n\n  A2  \n\r\nA3\n"])
    def test_line_endings_and_blanks(self, content):
        """Should handle LF and CRLF and drop blank lines."""
        assert parse_order_numbers_file(content) == ["A1", "A2", "A3"]


class TestLoadOrderNumbers:
    """Tests for load_order_numbers()."""

    def test_reads_file(self, tmp_path):
        """Should read one order number per line."""
        path = tmp_path / "ordernumbers.txt"
        path.write_text("1001\r\n1002\r\n", encoding="utf-8")

        assert load_order_numbers(path) == ["1001", "1002"]

    def test_strips_byte_order_mark(self, tmp_path):
        """Should not keep a UTF-8 BOM on the first order number."""
        path = tmp_path / "ordernumbers.txt"
        path.write_bytes("\ufeff1001\n1002\n".encode("utf-8"))

        assert load_order_numbers(path) == ["1001", "1002"]

    def test_missing_file(self, tmp_path):
        """Should raise ValidationException for a missing file."""
        with pytest.raises(ValidationException) as exc_info:
            load_order_numbers(tmp_path / "missing.txt")

        assert exc_info.value.field == "orders_file"
        assert "missing.txt" in exc_info.value.message

    def test_empty_file(self, tmp_path):
        """Should raise ValidationException for a file with no order numbers."""
        path = tmp_path / "ordernumbers.txt"
        path.write_text("\n\n", encoding="utf-8")

        with pytest.raises(ValidationException):
            load_order_numbers(path)
