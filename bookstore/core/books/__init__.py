"""Book storage module."""

from bookstore.core.books.codec import BookFileCodec
from bookstore.core.books.store import BookStore

__all__ = ["BookStore", "BookFileCodec"]
