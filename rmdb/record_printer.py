"""Tabular rendering of query results into a context's reply buffer."""

from __future__ import annotations

from collections.abc import Sequence

from rmdb.context import Context
from rmdb.defs import BUFFER_LENGTH

RECORD_COUNT_LENGTH = 40


def _fits(context: Context, text: str) -> bool:
    return (
        not context.ellipsis
        and context.offset + RECORD_COUNT_LENGTH + len(text.encode()) < BUFFER_LENGTH
    )


class RecordPrinter:
    """Writes separators, rows and the record count as a fixed-width text table."""

    COL_WIDTH = 16

    def __init__(self, num_cols: int) -> None:
        if num_cols <= 0:
            raise ValueError("a table needs at least one column")
        self.num_cols = num_cols

    def _emit(self, context: Context, text: str, mark_ellipsis: bool = True) -> None:
        if _fits(context, text):
            context.append(text)
        elif mark_ellipsis:
            context.ellipsis = True

    def print_separator(self, context: Context) -> None:
        for _ in range(self.num_cols):
            self._emit(context, "+" + "-" * (self.COL_WIDTH + 2))
        self._emit(context, "+\n")

    def print_record(self, rec_str: Sequence[str], context: Context) -> None:
        if len(rec_str) != self.num_cols:
            raise ValueError(f"expected {self.num_cols} columns, got {len(rec_str)}")
        for col in rec_str:
            if len(col) > self.COL_WIDTH:
                col = col[: self.COL_WIDTH - 3] + "..."
            self._emit(context, f"| {col:>{self.COL_WIDTH}} ")
        self._emit(context, "|\n", mark_ellipsis=False)

    @staticmethod
    def print_record_count(num_rec: int, context: Context) -> None:
        text = "... ...\n" if context.ellipsis else ""
        text += f"Total record(s): {num_rec}\n"
        context.append(text)