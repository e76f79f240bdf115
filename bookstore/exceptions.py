"""Catalog exception hierarchy."""

__all__ = ["StoreError", "ParseError"]


class StoreError(Exception):
    """Root exception for all catalog errors."""


class ParseError(StoreError, ValueError):
    """Raised when a line of the backing file cannot be turned into a book."""

    def __init__(self, message: str, line_no: int, line: str = "") -> None:
        super().__init__(f"line {line_no}: {message}")
        self.line_no = line_no
        self.line = line
