"""Flat-file backed book storage."""

import os
import threading
from pathlib import Path
from typing import Optional, Union

import structlog

from bookstore.core.books.codec import BookFileCodec
from bookstore.exceptions import ParseError
from bookstore.schemas.books import Book

logger = structlog.get_logger(__name__)


class BookStore:
    """In-memory list of books, rewritten to a delimited file after every change.

    The store never reads the backing file on its own; call :meth:`load` to
    replace the in-memory records with the file contents. Seed records passed
    to the constructor are used as-is until then.
    """

    def __init__(
        self,
        path: Union[str, os.PathLike],
        books: Optional[list[Book]] = None,
        *,
        codec: Optional[BookFileCodec] = None,
    ) -> None:
        self._path = Path(path)
        self._books: list[Book] = list(books) if books else []
        self._codec = codec or BookFileCodec()
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    def load(self) -> list[Book]:
        """
        Replace the in-memory books with the backing file contents.

        A missing file is an uninitialized catalog and loads as empty.

        Returns:
            The loaded books

        Raises:
            ParseError: If a record line is malformed; nothing is replaced
            OSError: If the file exists but cannot be read
        """
        with self._lock:
            if not self._path.exists():
                logger.debug("Backing file missing, starting empty", path=str(self._path))
                self._books = []
                return self.get_all()

            with open(self._path, encoding=self._codec.encoding, newline="") as f:
                text = f.read()

            try:
                books = self._codec.parse(text)
            except ParseError as e:
                logger.error("Failed to parse backing file", path=str(self._path), line_no=e.line_no)
                raise

            self._books = books
            logger.info("Loaded books", path=str(self._path), count=len(books))
            return self.get_all()

    def get_all(self) -> list[Book]:
        """List all books in display order."""
        return list(self._books)

    def get(self, book_id: int) -> Optional[Book]:
        """Get a book by ID."""
        return self._find(book_id)

    def add(self, book: Book) -> bool:
        """Assign the next ID to a book, append it and persist."""
        with self._lock:
            book.id = self._next_id()
            self._books.append(book)
            self._persist()
            logger.info("Book added", book_id=book.id)
            return True

    def edit(self, book: Book) -> bool:
        """Overwrite title, author and ISBN of the book with the same ID."""
        with self._lock:
            existing = self._find(book.id)
            if existing is None:
                return False

            existing.title = book.title
            existing.author = book.author
            existing.isbn = book.isbn
            self._persist()
            logger.info("Book updated", book_id=existing.id)
            return True

    def delete(self, book_id: int) -> bool:
        """Remove the book with the given ID and persist."""
        with self._lock:
            book = self._find(book_id)
            if book is None:
                return False

            # Remove this instance, not every equal record
            for index, candidate in enumerate(self._books):
                if candidate is book:
                    del self._books[index]
                    break
            self._persist()
            logger.info("Book deleted", book_id=book_id)
            return True

    def _find(self, book_id: int) -> Optional[Book]:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def _next_id(self) -> int:
        # Deleting the highest ID frees it for reuse
        if not self._books:
            return 1
        return max(book.id for book in self._books) + 1

    def _persist(self) -> None:
        """Rewrite the whole backing file from the in-memory books."""
        content = self._codec.serialize(self._books)
        with open(self._path, "w", encoding=self._codec.encoding, newline="") as f:
            f.write(content)
        logger.debug("Persisted books", path=str(self._path), count=len(self._books))
