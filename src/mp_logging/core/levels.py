"""Core – Severity levels.

Severities are totally ordered by declaration; the order drives console
filtering. Each member carries a stable lowercase ``label`` (used by
:meth:`Severity.parse`) and a display ``icon``.
"""
from __future__ import annotations

from enum import IntEnum


class Severity(IntEnum):
    """Leveled rank of log importance, lowest first."""

    TRACE = 0
    DEBUG = 1
    VERBOSE = 2
    INFO = 3
    STATUS = 4
    WARNING = 5
    ERROR = 6
    CRITICAL = 7
    #: Error in the source code; things that should never happen.
    CODE = 8

    @property
    def ordinal(self) -> int:
        return int(self)

    @property
    def label(self) -> str:
        """Stable name, e.g. ``"warning"``."""
        return self.name.lower()

    @property
    def icon(self) -> str:
        return _ICONS[self]

    @property
    def text(self) -> str:
        """Icon and label, e.g. ``"⚠️ warning"``."""
        return f"{self.icon} {self.label}"

    @classmethod
    def parse(cls, name: str) -> Severity | None:
        """Return the severity whose :attr:`label` equals *name*, else ``None``.

        Matching is exact: ``"Warning"`` or ``" warning"`` are not recognised.
        """
        return _BY_LABEL.get(name)

    def __str__(self) -> str:
        return self.label


_ICONS: dict[Severity, str] = {
    Severity.TRACE: "🔍",
    Severity.DEBUG: "🐜",
    Severity.VERBOSE: "💬",
    Severity.INFO: "💬",
    Severity.STATUS: "✔️",
    Severity.WARNING: "⚠️",
    Severity.ERROR: "❗️",
    Severity.CRITICAL: "🔥",
    Severity.CODE: "🎱",
}

_BY_LABEL: dict[str, Severity] = {member.label: member for member in Severity}


__all__ = ["Severity"]
