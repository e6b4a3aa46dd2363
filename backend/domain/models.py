"""
Core domain models for the bookshelf server.
These are framework-agnostic and can be used across all routes.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict

# Books are addressed by unsigned 64-bit ids.
BOOK_ID_MAX = 2**64 - 1

PLACEHOLDER_TITLE = "Solaris"
PLACEHOLDER_AUTHOR = "Stanisław Lem"


@dataclass
class Book:
    """A single book record."""
    id: int
    title: str
    author: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def is_valid_book_id(book_id: int) -> bool:
    return 0 <= book_id <= BOOK_ID_MAX


def make_placeholder_book(book_id: int) -> Book:
    """
    Build the book returned for every lookup.

    There is no catalogue behind this yet: the id is echoed back and the
    title/author are always the same.
    """
    if not is_valid_book_id(book_id):
        raise ValueError(f"book id out of range: {book_id}")
    return Book(id=book_id, title=PLACEHOLDER_TITLE, author=PLACEHOLDER_AUTHOR)
