"""
Books API routes.
"""
import logging
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from domain.models import Book, is_valid_book_id, make_placeholder_book

router = APIRouter()
logger = logging.getLogger(__name__)


class BookResponse(BaseModel):
    id: int
    title: str
    author: str


def book_to_response(book: Book) -> BookResponse:
    """Convert domain Book to API response."""
    return BookResponse(id=book.id, title=book.title, author=book.author)


# The int convertor only matches digits, so "/books/abc" and "/books/-1"
# never reach this route and fall through to static serving.
@router.get("/{book_id:int}", response_model=BookResponse)
async def get_book(book_id: int):
    """Get a book by ID."""
    if not is_valid_book_id(book_id):
        logger.debug("Rejecting out-of-range book id %s", book_id)
        raise HTTPException(status_code=404, detail="Not Found")
    return book_to_response(make_placeholder_book(book_id))
