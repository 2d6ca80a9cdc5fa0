from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import AuthorRecord
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


def to_author(record: AuthorRecord) -> Author:
    """Convert a store record to the GraphQL Author type."""
    from ..types.author import Author as AuthorType

    return AuthorType(id=record.id, name=record.name)


# Query resolvers
async def resolve_author_by_id(info: strawberry.Info, id: int | None) -> Author | None:
    """Resolve a single author. A missing id resolves to None rather than an error."""
    record = get_store_from_info(info).find_author(id)
    if record is None:
        logger.debug("Author not found", author_id=id)
        return None
    return to_author(record)


async def resolve_authors(info: strawberry.Info) -> list[Author]:
    return [to_author(record) for record in get_store_from_info(info).list_authors()]


# Field resolvers
async def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    """Resolve all books whose author_id matches this author, in insertion order."""
    from .book import to_book

    store = get_store_from_info(info)
    record = AuthorRecord(id=author.id, name=author.name)
    return [to_book(book) for book in store.books_by(record)]


# Mutation resolvers
async def add_author(info: strawberry.Info, name: str) -> Author:
    """Append a new author and return it."""
    record = get_store_from_info(info).add_author(name=name)
    return to_author(record)
