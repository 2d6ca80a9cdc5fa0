"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.author import Author
from ..types.book import Book


@strawberry.type(description="Root Mutation")
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addBook", description="Add a book")
    async def add_book(self, info: strawberry.Info, name: str, author_id: int) -> Book | None:
        """Add a book. The author id is not checked against existing authors."""
        from ..resolvers.book import add_book

        return await add_book(info, name, author_id)

    @strawberry.mutation(name="addAuthor", description="Add an author")
    async def add_author(self, info: strawberry.Info, name: str) -> Author | None:
        """Add an author."""
        from ..resolvers.author import add_author

        return await add_author(info, name)
