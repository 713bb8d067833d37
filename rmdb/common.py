"""Values, columns, conditions and set clauses shared by the query layers."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

from rmdb.defs import ColType
from rmdb.errors import StringOverflowError

_INT = struct.Struct("=i")
_FLOAT = struct.Struct("=f")


@dataclass(frozen=True, order=True)
class TabCol:
    """A column qualified by its table; ordered by (table, column)."""

    tab_name: str
    col_name: str


@dataclass
class Value:
    """A typed literal together with its optional fixed-width raw encoding."""

    type: ColType | None = None
    int_val: int = 0
    float_val: float = 0.0
    str_val: str = ""
    raw: bytes | None = None

    def set_int(self, int_val: int) -> None:
        self.type = ColType.TYPE_INT
        self.int_val = int_val

    def set_float(self, float_val: float) -> None:
        self.type = ColType.TYPE_FLOAT
        self.float_val = _FLOAT.unpack(_FLOAT.pack(float_val))[0]

    def set_str(self, str_val: str) -> None:
        self.type = ColType.TYPE_STRING
        self.str_val = str_val

    def init_raw(self, length: int) -> None:
        """Encode the value into ``length`` bytes stored in ``raw``."""
        if self.raw is not None:
            raise ValueError("raw buffer already initialised")
        if self.type == ColType.TYPE_INT:
            if length != _INT.size:
                raise ValueError(f"int value needs {_INT.size} bytes, got {length}")
            self.raw = _INT.pack(self.int_val)
        elif self.type == ColType.TYPE_FLOAT:
            if length != _FLOAT.size:
                raise ValueError(f"float value needs {_FLOAT.size} bytes, got {length}")
            self.raw = _FLOAT.pack(self.float_val)
        elif self.type == ColType.TYPE_STRING:
            encoded = self.str_val.encode()
            if length < len(encoded):
                raise StringOverflowError()
            self.raw = encoded.ljust(length, b"\0")
        else:
            self.raw = bytes(length)


class CompOp(IntEnum):
    OP_EQ = 0
    OP_NE = 1
    OP_LT = 2
    OP_GT = 3
    OP_LE = 4
    OP_GE = 5


@dataclass
class Condition:
    """``lhs_col op rhs``, where rhs is a value or another column."""

    lhs_col: TabCol
    op: CompOp
    is_rhs_val: bool
    rhs_col: TabCol = field(default_factory=lambda: TabCol("", ""))
    rhs_val: Value = field(default_factory=Value)


@dataclass
class SetClause:
    lhs: TabCol
    rhs: Value