"""Book schema."""

from pydantic import BaseModel, Field


class Book(BaseModel):
    """A single catalog record."""
    id: int = Field(default=0, description="Store-assigned identifier")
    title: str = Field(default="", description="Book title")
    author: str = Field(default="", description="Book author")
    isbn: str = Field(default="", description="ISBN, stored as given")
