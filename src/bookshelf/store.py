"""
In-memory record store for authors and books.

Both collections are seeded at construction and live only for the lifetime of
the process. Lookups are linear scans in insertion order; new records are
appended with an id of ``len(collection) + 1``. Nothing is ever updated or
removed, so derived ids stay unique.
"""

from __future__ import annotations

from dataclasses import dataclass

from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class AuthorRecord:
    id: int
    name: str


@dataclass
class BookRecord:
    id: int
    name: str
    author_id: int


SEED_AUTHORS: tuple[tuple[int, str], ...] = (
    (1, "J. K. Rowling"),
    (2, "J. R. R. Tolkien"),
    (3, "Brent Weeks"),
)

SEED_BOOKS: tuple[tuple[int, str, int], ...] = (
    (1, "Harry Potter and the Chamber of Secrets", 1),
    (2, "Harry Potter and the Prisoner of Azkaban", 1),
    (3, "Harry Potter and the Goblet of Fire", 1),
    (4, "The Fellowship of the Ring", 2),
    (5, "The Two Towers", 2),
    (6, "The Return of the King", 2),
    (7, "The Way of Shadows", 3),
    (8, "Beyond the Shadows", 3),
)


class BookStore:
    """Authors and books held in process memory."""

    def __init__(self) -> None:
        self._authors: list[AuthorRecord] = []
        self._books: list[BookRecord] = []
        self.reset()

    def reset(self) -> None:
        """Discard every added record and restore the seed data."""
        self._authors = [AuthorRecord(*row) for row in SEED_AUTHORS]
        self._books = [BookRecord(*row) for row in SEED_BOOKS]

    # Books
    def find_book(self, id: int | None) -> BookRecord | None:
        return next((book for book in self._books if book.id == id), None)

    def list_books(self) -> list[BookRecord]:
        return list(self._books)

    def books_by(self, author: AuthorRecord) -> list[BookRecord]:
        """All books whose author_id matches the author's id."""
        return [book for book in self._books if book.author_id == author.id]

    def add_book(self, name: str, author_id: int) -> BookRecord:
        """Append a book. The author is not required to exist."""
        book = BookRecord(id=len(self._books) + 1, name=name, author_id=author_id)
        self._books.append(book)
        logger.info("Book added", book_id=book.id, author_id=author_id)
        return book

    # Authors
    def find_author(self, id: int | None) -> AuthorRecord | None:
        return next((author for author in self._authors if author.id == id), None)

    def list_authors(self) -> list[AuthorRecord]:
        return list(self._authors)

    def author_of(self, book: BookRecord) -> AuthorRecord | None:
        """The author referenced by a book, or None for a dangling author_id."""
        return self.find_author(book.author_id)

    def add_author(self, name: str) -> AuthorRecord:
        author = AuthorRecord(id=len(self._authors) + 1, name=name)
        self._authors.append(author)
        logger.info("Author added", author_id=author.id)
        return author

    def counts(self) -> dict[str, int]:
        return {"authors": len(self._authors), "books": len(self._books)}


# Process-wide store shared by the resolvers
store = BookStore()


def get_store() -> BookStore:
    """Get the process-wide store."""
    return store
