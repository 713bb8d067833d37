import pytest

from rmdb.context import Context
from rmdb.defs import BUFFER_LENGTH
from rmdb.record_printer import RecordPrinter


def _ctx():
    return Context(data_send=bytearray())


def _text(ctx):
    return ctx.data_send.decode()


def test_separator_single_column():
    ctx = _ctx()
    RecordPrinter(1).print_separator(ctx)
    assert _text(ctx) == "+------------------+\n"


def test_separator_width_matches_row_width():
    sep_ctx = _ctx()
    row_ctx = _ctx()
    printer = RecordPrinter(3)
    printer.print_separator(sep_ctx)
    printer.print_record(["a", "bb", "ccc"], row_ctx)
    assert len(_text(sep_ctx)) == len(_text(row_ctx))
    assert _text(sep_ctx).count("+") == 4


def test_row_is_right_aligned():
    ctx = _ctx()
    RecordPrinter(1).print_record(["hello"], ctx)
    row = _text(ctx)
    assert row.startswith("| ")
    assert row.endswith(" hello |\n")


def test_long_value_is_truncated():
    ctx = _ctx()
    value = "abcdefghijklmnopqrstuvwxyz"
    RecordPrinter(1).print_record([value], ctx)
    row = _text(ctx)
    assert value[:13] + "..." in row
    assert value not in row
    sep = _ctx()
    RecordPrinter(1).print_separator(sep)
    assert len(row) == len(_text(sep))


def test_record_count():
    ctx = _ctx()
    RecordPrinter.print_record_count(3, ctx)
    assert _text(ctx) == "Total record(s): 3\n"


def test_wrong_column_count_raises():
    with pytest.raises(ValueError):
        RecordPrinter(2).print_record(["only one"], _ctx())


def test_zero_columns_rejected():
    with pytest.raises(ValueError):
        RecordPrinter(0)


def test_overflow_sets_ellipsis():
    ctx = _ctx()
    printer = RecordPrinter(2)
    rows = 1000
    for i in range(rows):
        printer.print_record([str(i), "x"], ctx)
    assert ctx.ellipsis is True
    assert ctx.offset < BUFFER_LENGTH
    RecordPrinter.print_record_count(rows, ctx)
    assert _text(ctx).endswith("... ...\nTotal record(s): 1000\n")
    assert ctx.offset <= BUFFER_LENGTH


def test_nothing_written_after_ellipsis():
    ctx = _ctx()
    ctx.ellipsis = True
    printer = RecordPrinter(1)
    printer.print_separator(ctx)
    assert ctx.offset == 0