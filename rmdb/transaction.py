"""Per-transaction bookkeeping: state, write set, lock set and index page sets."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Any

from rmdb.defs import INVALID_LSN, INVALID_TIMESTAMP
from rmdb.txn_defs import IsolationLevel, LockDataId, TransactionState, WriteRecord


@dataclass(eq=False)
class Transaction:
    """A transaction and everything it has touched so far."""

    txn_id: int
    isolation_level: IsolationLevel = IsolationLevel.SERIALIZABLE
    state: TransactionState = TransactionState.DEFAULT
    txn_mode: bool = False
    start_ts: int = INVALID_TIMESTAMP
    prev_lsn: int = INVALID_LSN
    thread_id: int = field(default_factory=threading.get_ident)
    write_set: deque[WriteRecord] = field(default_factory=deque)
    lock_set: set[LockDataId] = field(default_factory=set)
    index_latch_page_set: deque[Any] = field(default_factory=deque)
    index_deleted_page_set: deque[Any] = field(default_factory=deque)

    def append_write_record(self, write_record: WriteRecord) -> None:
        """Remember a write so that it can be undone on abort."""
        self.write_set.append(write_record)

    def append_index_deleted_page(self, page: Any) -> None:
        """Remember an index page deleted by this transaction."""
        self.index_deleted_page_set.append(page)

    def append_index_latch_page(self, page: Any) -> None:
        """Remember an index page latched by this transaction."""
        self.index_latch_page_set.append(page)