"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .author import Author


@strawberry.type(description="Book written by an author")
class Book:
    """Book type for GraphQL API."""

    id: int
    name: str
    author_id: int

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """Get the author of this book."""
        from ..resolvers.book import resolve_book_author

        return await resolve_book_author(self, info)
