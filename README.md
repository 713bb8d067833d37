# rmdb

Building blocks for a small relational database engine: record ids, typed
values, the error hierarchy, transaction bookkeeping and the text table that
query results are written as. The package has no dependencies outside the
standard library.

## Contents

- `rmdb.defs`: the frozen dataclass `Rid(page_no, slot_no)`, the `ColType`
  enum (`TYPE_INT`, `TYPE_FLOAT`, `TYPE_STRING`), `coltype2str` (returns
  `"INT"`, `"FLOAT"` or `"STRING"`), the abstract `RecScan` interface
  (`next`, `is_end`, `rid`) and storage constants such as `PAGE_SIZE`
  (4096), `BUFFER_LENGTH` (8192), `INVALID_PAGE_ID` and `DB_META_NAME`.
- `rmdb.errors`: the exception hierarchy, all deriving from `RMDBError`.
  Messages start with `"Error: "`; for example `TableNotFoundError("t")`
  gives `"Error: Table not found: t"` and
  `IndexNotFoundError("t", ["a", "b"])` gives
  `"Error: Index not found: t.(a, b)"`. File errors are named
  `DbFileExistsError` and `DbFileNotFoundError` so that they do not shadow
  the built-in exceptions.
- `rmdb.common`: `TabCol` (ordered by table, then column), `Value`,
  `CompOp`, `Condition` and `SetClause`. `Value.set_int`, `set_float` and
  `set_str` set the type and the value; `Value.init_raw(length)` encodes it
  into `raw` as 4 bytes for ints and floats, or as a string padded with zero
  bytes to `length`, raising `StringOverflowError` if the string is longer.
- `rmdb.txn_defs`: `TransactionState`, `IsolationLevel`, `WType`,
  `WriteRecord`, `LockDataType`, `LockDataId` (built with
  `LockDataId.table(fd)` or `LockDataId.record(fd, rid)`; `key()` packs it
  into a signed 64-bit integer), `AbortReason` and
  `TransactionAbortException`, whose `info()` gives the abort message.
- `rmdb.transaction`: the `Transaction` dataclass with its state, isolation
  level (serializable by default), write set, lock set and index page sets,
  and `append_write_record`, `append_index_deleted_page` and
  `append_index_latch_page`.
- `rmdb.context`: `Context`, which carries the lock manager, log manager,
  transaction and a `bytearray` output buffer. `offset` is the number of
  bytes written (-1 without a buffer); `append(text)` writes to the buffer
  and raises `InternalError` if there is no buffer or it would exceed
  `BUFFER_LENGTH`.
- `rmdb.record_printer`: `RecordPrinter`, which writes separators, rows
  (columns right-aligned to 16 characters, longer values cut with `...`)
  and the record count into a context's buffer. When the buffer runs short
  it stops writing and the record count is preceded by `... ...`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from rmdb.common import Value
from rmdb.context import Context
from rmdb.record_printer import RecordPrinter

value = Value()
value.set_str("abc")
value.init_raw(8)          # b"abc\x00\x00\x00\x00\x00"

context = Context(data_send=bytearray())
printer = RecordPrinter(2)
printer.print_separator(context)
printer.print_record(["id", "name"], context)
printer.print_separator(context)
RecordPrinter.print_record_count(0, context)
print(context.data_send.decode())
```

## What this package does not do

It holds definitions only. There is no disk or buffer-pool storage, no
record files or indexes, no lock manager or transaction manager, no query
planner or executors, and no server or client command. `Context` accepts
lock and log managers as opaque objects and does not use them.