"""Execution context: managers, the current transaction and the reply buffer."""

from __future__ import annotations

from typing import Any

from rmdb.defs import BUFFER_LENGTH
from rmdb.errors import InternalError


class Context:
    """Carries the lock/log managers, the transaction and the output buffer of a statement.

    ``data_send`` is a bytearray shared with whoever sends the reply; several
    contexts may write into the same buffer.
    """

    def __init__(
        self,
        lock_mgr: Any = None,
        log_mgr: Any = None,
        txn: Any = None,
        data_send: bytearray | None = None,
    ) -> None:
        self.lock_mgr = lock_mgr
        self.log_mgr = log_mgr
        self.txn = txn
        self.data_send = data_send
        self.ellipsis = False

    @property
    def offset(self) -> int:
        """Number of bytes written so far, or -1 when there is no buffer."""
        if self.data_send is None:
            return -1
        return len(self.data_send)

    def append(self, text: str) -> int:
        """Write ``text`` at the end of the buffer and return the new offset."""
        if self.data_send is None:
            raise InternalError("No output buffer in context")
        encoded = text.encode()
        if len(self.data_send) + len(encoded) > BUFFER_LENGTH:
            raise InternalError("Output buffer overflow")
        self.data_send.extend(encoded)
        return len(self.data_send)