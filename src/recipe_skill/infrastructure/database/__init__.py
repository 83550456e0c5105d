"""Document Store Connection"""
from .connection import (
    Collection,
    Connection,
    close_connection,
    get_connection,
    initialize,
)
from .executor import store_executor

__all__ = [
    "Collection",
    "Connection",
    "close_connection",
    "get_connection",
    "initialize",
    "store_executor",
]
