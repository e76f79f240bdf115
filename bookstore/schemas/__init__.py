"""Catalog schemas."""

from bookstore.schemas.books import Book

__all__ = ["Book"]
