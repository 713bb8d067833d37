"""Transaction states, write records, lock identifiers and abort exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from rmdb.defs import Rid

_MASK64 = (1 << 64) - 1
_SIGN64 = 1 << 63


class TransactionState(Enum):
    DEFAULT = 0
    GROWING = 1
    SHRINKING = 2
    COMMITTED = 3
    ABORTED = 4


class IsolationLevel(Enum):
    READ_UNCOMMITTED = 0
    REPEATABLE_READ = 1
    READ_COMMITTED = 2
    SERIALIZABLE = 3


class WType(IntEnum):
    INSERT_TUPLE = 0
    DELETE_TUPLE = 1
    UPDATE_TUPLE = 2


@dataclass
class WriteRecord:
    """A write performed by a transaction; ``record`` holds the old image for delete/update."""

    wtype: WType
    tab_name: str
    rid: Rid
    record: bytes | None = None


class LockDataType(IntEnum):
    TABLE = 0
    RECORD = 1


@dataclass(frozen=True)
class LockDataId:
    """Identity of a lockable object: a whole table or a single record."""

    fd: int
    rid: Rid = field(default_factory=lambda: Rid(-1, -1))
    type: LockDataType = LockDataType.TABLE

    @classmethod
    def table(cls, fd: int) -> LockDataId:
        return cls(fd, Rid(-1, -1), LockDataType.TABLE)

    @classmethod
    def record(cls, fd: int, rid: Rid) -> LockDataId:
        return cls(fd, rid, LockDataType.RECORD)

    def key(self) -> int:
        """Pack the identity into a signed 64-bit integer."""
        if self.type == LockDataType.TABLE:
            return self.fd
        packed = (
            (int(self.type) << 63)
            | (self.fd << 31)
            | (self.rid.page_no << 16)
            | self.rid.slot_no
        ) & _MASK64
        return packed - (1 << 64) if packed & _SIGN64 else packed

    def __hash__(self) -> int:
        return hash(self.key())


class AbortReason(Enum):
    LOCK_ON_SHIRINKING = 0
    UPGRADE_CONFLICT = 1
    DEADLOCK_PREVENTION = 2


class TransactionAbortException(Exception):
    """Raised when a transaction must be rolled back."""

    def __init__(self, txn_id: int, abort_reason: AbortReason) -> None:
        self.txn_id = txn_id
        self.abort_reason = abort_reason
        super().__init__(self.info())

    def info(self) -> str:
        if self.abort_reason == AbortReason.LOCK_ON_SHIRINKING:
            return (
                f"Transaction {self.txn_id} aborted because it cannot request locks on SHRINKING phase\n"
            )
        if self.abort_reason == AbortReason.UPGRADE_CONFLICT:
            return (
                f"Transaction {self.txn_id} aborted because another transaction is waiting for upgrading\n"
            )
        if self.abort_reason == AbortReason.DEADLOCK_PREVENTION:
            return f"Transaction {self.txn_id} aborted for deadlock prevention\n"
        return "Transaction aborted\n"

    def __str__(self) -> str:
        return self.info()