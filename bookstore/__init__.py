"""Book catalog kept in memory and persisted to a delimited flat file."""

from bookstore.config import Settings, get_settings
from bookstore.core.books import BookFileCodec, BookStore
from bookstore.exceptions import ParseError, StoreError
from bookstore.schemas.books import Book
from bookstore.utils.logging import setup_logging

__all__ = [
    "Book",
    "BookFileCodec",
    "BookStore",
    "ParseError",
    "Settings",
    "StoreError",
    "get_settings",
    "setup_logging",
]
