from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import BookRecord
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


def to_book(record: BookRecord) -> Book:
    """Convert a store record to the GraphQL Book type."""
    from ..types.book import Book as BookType

    return BookType(id=record.id, name=record.name, author_id=record.author_id)


# Query resolvers
async def resolve_book_by_id(info: strawberry.Info, id: int | None) -> Book | None:
    """Resolve a single book. A missing id resolves to None rather than an error."""
    record = get_store_from_info(info).find_book(id)
    if record is None:
        logger.debug("Book not found", book_id=id)
        return None
    return to_book(record)


async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book in insertion order."""
    return [to_book(record) for record in get_store_from_info(info).list_books()]


# Field resolvers
async def resolve_book_author(book: Book, info: strawberry.Info) -> Author | None:
    """Resolve the author referenced by book.author_id."""
    from .author import to_author

    store = get_store_from_info(info)
    author = store.author_of(BookRecord(id=book.id, name=book.name, author_id=book.author_id))
    if author is None:
        logger.debug("Book references unknown author", book_id=book.id, author_id=book.author_id)
        return None
    return to_author(author)


# Mutation resolvers
async def add_book(info: strawberry.Info, name: str, author_id: int) -> Book:
    """Append a new book and return it."""
    record = get_store_from_info(info).add_book(name=name, author_id=author_id)
    return to_book(record)
