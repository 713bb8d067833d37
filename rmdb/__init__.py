"""Core definitions of a small relational database engine: ids, values, errors, transactions and result printing."""

__version__ = "0.1.0"

__all__ = [
    "common",
    "context",
    "defs",
    "errors",
    "record_printer",
    "transaction",
    "txn_defs",
]