"""Backing file encoding and decoding."""

import csv
import io
from typing import Iterable, Optional

from bookstore.config import Settings, get_settings
from bookstore.exceptions import ParseError
from bookstore.schemas.books import Book

# id, title, author, isbn
FIELD_COUNT = 4


class BookFileCodec:
    """Converts between book records and the delimited text of the backing file.

    The first line is a header. It is written on every serialization and
    discarded unread on parsing. Each following line holds one record as
    ``id,title,author,isbn``. Fields containing the delimiter, a quote or a
    line break are quoted; plain fields are written as-is.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        settings = settings or get_settings()
        self.delimiter = settings.delimiter
        self.header = settings.header
        self.encoding = settings.encoding

    def parse(self, text: str) -> list[Book]:
        """
        Parse the full file contents into books.

        Args:
            text: File contents, header line included

        Returns:
            Books in line order

        Raises:
            ParseError: If any record line is malformed
        """
        # The header is dropped as a raw line, never run through the reader
        _, _, body = text.partition("\n")
        reader = csv.reader(io.StringIO(body, newline=""), delimiter=self.delimiter, strict=True)
        books: list[Book] = []
        try:
            for fields in reader:
                books.append(self.parse_line(fields, reader.line_num + 1))
        except csv.Error as e:
            raise ParseError(str(e), reader.line_num + 1) from e
        return books

    def parse_line(self, fields: list[str], line_no: int) -> Book:
        """Build a book from the fields of one record line.

        Fields past the fourth come from an unquoted delimiter and are ignored.
        """
        raw = self.delimiter.join(fields)
        if len(fields) < FIELD_COUNT:
            raise ParseError(f"expected {FIELD_COUNT} fields, got {len(fields)}", line_no, raw)
        try:
            book_id = int(fields[0])
        except ValueError:
            raise ParseError(f"invalid id {fields[0]!r}", line_no, raw) from None
        return Book(id=book_id, title=fields[1], author=fields[2], isbn=fields[3])

    def format_row(self, book: Book) -> list[str]:
        """Return the fields of a book in file order."""
        return [str(book.id), book.title, book.author, book.isbn]

    def serialize(self, books: Iterable[Book]) -> str:
        """Render the header and one line per book."""
        buffer = io.StringIO(newline="")
        buffer.write(self.header + "\n")
        writer = csv.writer(
            buffer,
            delimiter=self.delimiter,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator="\n",
        )
        for book in books:
            writer.writerow(self.format_row(book))
        return buffer.getvalue()
