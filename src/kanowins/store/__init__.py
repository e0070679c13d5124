"""DynamoDB-backed WIN store."""

from kanowins.store.client import get_table, reset_table
from kanowins.store.repository import put_win, scan_wins

__all__ = [
    "get_table",
    "put_win",
    "reset_table",
    "scan_wins",
]
