"""Pytest configuration and fixtures."""

import pytest

from bookstore.config import get_settings
from bookstore.core.books.store import BookStore
from bookstore.schemas.books import Book


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Keep environment overrides from leaking between tests."""
    for name in ("BOOKSTORE_DELIMITER", "BOOKSTORE_HEADER", "BOOKSTORE_ENCODING", "BOOKSTORE_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def books_file(tmp_path):
    """Path to a backing file that does not exist yet."""
    return tmp_path / "books.csv"


@pytest.fixture
def store(books_file):
    """Empty store backed by a temporary file."""
    return BookStore(books_file, [])


@pytest.fixture
def seeded_store(books_file):
    """Store seeded with three books, not yet persisted."""
    books = [
        Book(id=1, title="Dune", author="Frank Herbert", isbn="9780441013593"),
        Book(id=2, title="Emma", author="Jane Austen", isbn="9780141439587"),
        Book(id=3, title="Ubik", author="Philip K. Dick", isbn="9780547572291"),
    ]
    return BookStore(books_file, books)


@pytest.fixture
def write_lines():
    """Write lines to a backing file with a trailing newline."""
    def _write(path, lines):
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return _write
