"""Unit tests for core severities."""
from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mp_logging.core import Severity


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestSeverityOrder:
    def test_declaration_order(self) -> None:
        assert [s.label for s in Severity] == [
            "trace",
            "debug",
            "verbose",
            "info",
            "status",
            "warning",
            "error",
            "critical",
            "code",
        ]

    def test_ordinals_follow_declaration(self) -> None:
        assert [s.ordinal for s in Severity] == list(range(9))

    def test_comparisons(self) -> None:
        assert Severity.TRACE < Severity.DEBUG < Severity.INFO
        assert Severity.WARNING >= Severity.WARNING
        assert Severity.CODE > Severity.CRITICAL

    @given(st.sampled_from(list(Severity)), st.sampled_from(list(Severity)))
    def test_order_matches_ordinal(self, a: Severity, b: Severity) -> None:
        assert (a < b) == (a.ordinal < b.ordinal)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestSeverityParse:
    @given(st.sampled_from(list(Severity)))
    def test_round_trip(self, severity: Severity) -> None:
        assert Severity.parse(severity.label) is severity

    @pytest.mark.parametrize(
        "name", ["not-a-level", "", "WARNING", "Warning", " warning", "warn", "fatal"]
    )
    def test_unknown_returns_none(self, name: str) -> None:
        assert Severity.parse(name) is None


# ---------------------------------------------------------------------------
# Display metadata
# ---------------------------------------------------------------------------


class TestSeverityDisplay:
    def test_icons(self) -> None:
        assert Severity.TRACE.icon == "🔍"
        assert Severity.DEBUG.icon == "🐜"
        assert Severity.CRITICAL.icon == "🔥"
        assert Severity.CODE.icon == "🎱"

    def test_verbose_and_info_share_icon(self) -> None:
        assert Severity.VERBOSE.icon == Severity.INFO.icon

    def test_text_is_icon_and_label(self) -> None:
        for severity in Severity:
            assert severity.text == f"{severity.icon} {severity.label}"

    def test_str_is_label(self) -> None:
        assert str(Severity.ERROR) == "error"
