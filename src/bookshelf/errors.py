"""
Exception types raised by the Bookshelf API
"""


class BookshelfError(Exception):
    """Base exception for Bookshelf errors."""


class SchemaValidationError(BookshelfError):
    """Raised when the GraphQL schema fails validation at startup."""

    def __init__(self, stage: str, messages: list[str]):
        self.stage = stage
        self.messages = messages
        super().__init__(f"GraphQL {stage} failed: {'; '.join(messages)}")
