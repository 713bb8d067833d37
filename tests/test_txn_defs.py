import pytest

from rmdb.defs import Rid
from rmdb.txn_defs import (
    AbortReason,
    LockDataId,
    LockDataType,
    TransactionAbortException,
    WriteRecord,
    WType,
)


def test_table_lock_key_is_fd():
    lock = LockDataId.table(5)
    assert lock.key() == 5
    assert lock.type == LockDataType.TABLE
    assert lock.rid == Rid(-1, -1)


def test_record_lock_key_properties():
    lock = LockDataId.record(3, Rid(2, 7))
    key = lock.key()
    assert key < 0
    assert key & 0xFFFF == 7
    assert -(1 << 63) <= key < (1 << 63)


def test_record_keys_distinct():
    keys = {LockDataId.record(fd, Rid(p, s)).key() for fd in (1, 2) for p in (0, 1) for s in (0, 1)}
    assert len(keys) == 8


def test_lock_equality_and_hash():
    a = LockDataId.record(1, Rid(1, 1))
    b = LockDataId.record(1, Rid(1, 1))
    assert a == b
    assert hash(a) == hash(b)
    assert a != LockDataId.table(1)
    assert len({a, b, LockDataId.table(1)}) == 2


def test_write_record():
    insert = WriteRecord(WType.INSERT_TUPLE, "t", Rid(1, 2))
    assert insert.record is None
    update = WriteRecord(WType.UPDATE_TUPLE, "t", Rid(1, 2), b"old")
    assert update.record == b"old"
    assert update.tab_name == "t"


@pytest.mark.parametrize(
    "reason, fragment",
    [
        (AbortReason.LOCK_ON_SHIRINKING, " aborted because it cannot request locks on SHRINKING phase\n"),
        (AbortReason.UPGRADE_CONFLICT, " aborted because another transaction is waiting for upgrading\n"),
        (AbortReason.DEADLOCK_PREVENTION, " aborted for deadlock prevention\n"),
    ],
)
def test_abort_info(reason, fragment):
    exc = TransactionAbortException(4, reason)
    assert exc.info() == "Transaction 4" + fragment
    assert exc.txn_id == 4
    assert exc.abort_reason is reason


def test_abort_exception_carries_details():
    exc = TransactionAbortException(9, AbortReason.DEADLOCK_PREVENTION)
    assert isinstance(exc, Exception)
    assert exc.txn_id == 9
    assert exc.info() == "Transaction 9 aborted for deadlock prevention\n"