"""Core – LogEntry and SourceLocation value objects."""
from __future__ import annotations

import dataclasses
import itertools
import sys
from datetime import datetime

from mp_logging.core.levels import Severity


@dataclasses.dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a log call was made."""

    file: str
    function: str
    line: int
    column: int = 0

    @classmethod
    def unknown(cls) -> SourceLocation:
        return cls(file="<unknown>", function="<unknown>", line=0, column=0)

    @classmethod
    def capture(cls, depth: int = 1) -> SourceLocation:
        """Read the location of the frame *depth* levels above this call.

        ``depth=1`` is the function that called :meth:`capture`. Columns are
        1-based; ``0`` means the interpreter did not record one.
        """
        try:
            frame = sys._getframe(depth)  # noqa: SLF001
        except ValueError:
            return cls.unknown()
        code = frame.f_code
        try:
            position = None
            if frame.f_lasti >= 0:
                # one position per 2-byte code unit; f_lasti is a byte offset
                position = next(itertools.islice(code.co_positions(), frame.f_lasti // 2, None), None)
            line = frame.f_lineno or 0
        finally:
            del frame
        column = 0
        if position is not None and position[2] is not None:
            column = position[2] + 1
        return cls(file=code.co_filename, function=code.co_name, line=line, column=column)

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column} in {self.function}"


@dataclasses.dataclass(frozen=True, slots=True)
class LogEntry:
    """One log call's record, shared read-only by every observer that receives it."""

    category: str
    timestamp: datetime
    severity: Severity
    message: str
    source: SourceLocation
    error: BaseException | None = None

    @property
    def file(self) -> str:
        return self.source.file

    @property
    def function(self) -> str:
        return self.source.function

    @property
    def line(self) -> int:
        return self.source.line

    @property
    def column(self) -> int:
        return self.source.column


__all__ = ["LogEntry", "SourceLocation"]
