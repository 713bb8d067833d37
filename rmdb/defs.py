"""Record ids, column types, the record-scan interface and storage constants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum

BUFFER_LENGTH = 8192

INVALID_FRAME_ID = -1
INVALID_PAGE_ID = -1
INVALID_TXN_ID = -1
INVALID_TIMESTAMP = -1
INVALID_LSN = -1
HEADER_PAGE_ID = 0
PAGE_SIZE = 4096
BUFFER_POOL_SIZE = 65536
LOG_BUFFER_SIZE = 1024 * PAGE_SIZE
BUCKET_SIZE = 50

LOG_FILE_NAME = "db.log"
REPLACER_TYPE = "LRU"
DB_META_NAME = "db.meta"


@dataclass(frozen=True)
class Rid:
    """Location of a record: page number and slot number."""

    page_no: int
    slot_no: int


class ColType(IntEnum):
    TYPE_INT = 0
    TYPE_FLOAT = 1
    TYPE_STRING = 2


_COLTYPE_NAMES = {
    ColType.TYPE_INT: "INT",
    ColType.TYPE_FLOAT: "FLOAT",
    ColType.TYPE_STRING: "STRING",
}


def coltype2str(col_type: ColType) -> str:
    """Return the SQL name of a column type; raise KeyError for unknown types."""
    return _COLTYPE_NAMES[ColType(col_type)] if col_type in _COLTYPE_NAMES else _COLTYPE_NAMES[col_type]


class RecScan(ABC):
    """Cursor over record ids."""

    @abstractmethod
    def next(self) -> None:
        """Advance to the next record."""

    @abstractmethod
    def is_end(self) -> bool:
        """Return True once the scan is exhausted."""

    @abstractmethod
    def rid(self) -> Rid:
        """Return the id of the current record."""