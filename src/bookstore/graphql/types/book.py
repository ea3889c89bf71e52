"""
Book GraphQL type definitions
"""

import strawberry

from ...store.filters import select
from ...store.models import BookRecord


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: strawberry.ID
    title: str
    author: str

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(id=strawberry.ID(record.id), title=record.title, author=record.author)


@strawberry.input
class BookFilter:
    """Exact-match filter; omitted fields match anything."""

    id: strawberry.ID | None = None
    title: str | None = None
    author: str | None = None


@strawberry.input
class BookPatch:
    """Field-level overwrite; omitted fields are left unchanged."""

    title: str | None = None
    author: str | None = None


def filter_records(records: list[BookRecord], filter: BookFilter | None) -> list[Book]:
    """Narrow an affected record set and convert it to GraphQL books."""
    return [Book.from_record(record) for record in select(records, filter)]


@strawberry.type
class AddBookPayload:
    """Books created by addBook."""

    records: strawberry.Private[list[BookRecord]]

    @strawberry.field
    async def book(self, filter: BookFilter | None = None) -> list[Book]:
        """Created books, optionally narrowed by a further filter."""
        return filter_records(self.records, filter)


@strawberry.type
class UpdateBookPayload:
    """Books changed by updateBook."""

    records: strawberry.Private[list[BookRecord]]

    @strawberry.field
    async def book(self, filter: BookFilter | None = None) -> list[Book]:
        """Updated books, optionally narrowed by a further filter."""
        return filter_records(self.records, filter)


@strawberry.type
class DeleteBookPayload:
    """Books removed by deleteBook."""

    records: strawberry.Private[list[BookRecord]]

    @strawberry.field
    async def book(self, filter: BookFilter | None = None) -> list[Book]:
        """Deleted books, optionally narrowed by a further filter."""
        return filter_records(self.records, filter)
