"""
Root GraphQL query definitions
"""

import strawberry

from ..types.author import Author
from ..types.book import Book


def _given(value: int | None) -> int | None:
    """Treat an omitted id argument as null."""
    return None if value is strawberry.UNSET else value


@strawberry.type(description="Root Query")
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Single Book")
    async def book(
        self, info: strawberry.Info, id: int | None = strawberry.UNSET
    ) -> Book | None:
        """Get a book by ID."""
        from ..resolvers.book import resolve_book_by_id

        return await resolve_book_by_id(info, _given(id))

    @strawberry.field(description="List of Books")
    async def books(self, info: strawberry.Info) -> list[Book | None] | None:
        """Get all books."""
        from ..resolvers.book import resolve_books

        return await resolve_books(info)

    @strawberry.field(description="Single Author")
    async def author(
        self, info: strawberry.Info, id: int | None = strawberry.UNSET
    ) -> Author | None:
        """Get an author by ID."""
        from ..resolvers.author import resolve_author_by_id

        return await resolve_author_by_id(info, _given(id))

    @strawberry.field(description="List of Authors")
    async def authors(self, info: strawberry.Info) -> list[Author | None] | None:
        """Get all authors."""
        from ..resolvers.author import resolve_authors

        return await resolve_authors(info)
