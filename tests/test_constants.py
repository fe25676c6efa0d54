"""Tests for the lookup tables."""

from enum import Enum

import pytest

from termlog.constants import (
    COLORS,
    ESCAPE_SEQUENCES,
    LABEL_WIDTH,
    LABELS,
    MIN_LABEL_WIDTH,
    LineType,
    LogType,
    _check_table,
)


class TestTables:
    """Test table coverage and values."""

    def test_every_type_has_color_and_label(self):
        assert set(COLORS) == set(LogType)
        assert set(LABELS) == set(LogType)
        assert set(ESCAPE_SEQUENCES) == set(LineType)

    def test_label_widths(self):
        assert LABEL_WIDTH == 7
        assert MIN_LABEL_WIDTH == 4

    def test_colors(self):
        assert COLORS[LogType.INFO] == "\x1b[34m"
        assert COLORS[LogType.WARN] == "\x1b[33m"
        assert COLORS[LogType.ERROR] == "\x1b[31m"
        assert COLORS[LogType.DEBUG] == "\x1b[36m"
        assert COLORS[LogType.SUCCESS] == "\x1b[32m"
        assert COLORS[LogType.MISC] == "\x1b[37m"

    def test_incomplete_table_rejected(self):
        class Shade(Enum):
            LIGHT = "light"
            DARK = "dark"

        with pytest.raises(RuntimeError, match="dark"):
            _check_table("SHADES", {Shade.LIGHT: ""}, Shade)
