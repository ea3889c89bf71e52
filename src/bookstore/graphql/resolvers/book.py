from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import BookStore
from ..types.book import AddBookPayload, Book, BookFilter, DeleteBookPayload, UpdateBookPayload

if TYPE_CHECKING:
    from ..mutations.root import AddBookInput, UpdateBookInput

logger = get_logger(__name__)


def get_book_store(info: strawberry.Info) -> BookStore:
    """Return the store bound to the current request context."""
    store = info.context.get("book_store")
    if store is None:
        raise RuntimeError("Book store is not configured for this request")
    return store


# Query resolvers
async def resolve_query_book(info: strawberry.Info, filter: BookFilter | None) -> list[Book]:
    """Books matching the filter, in collection order."""
    store = get_book_store(info)
    return [Book.from_record(record) for record in store.query(filter)]


async def resolve_get_book(info: strawberry.Info, id: str) -> Book:
    """
    Resolve a single book by its ID.

    Raises NotFoundError, which is reported to the client as a user input error.
    """
    store = get_book_store(info)
    return Book.from_record(store.get(id))


async def resolve_books(info: strawberry.Info) -> list[Book]:
    """The whole collection."""
    store = get_book_store(info)
    return [Book.from_record(record) for record in store.all()]


# Mutation resolvers
async def add_book(
    info: strawberry.Info, input: AddBookInput | Sequence[AddBookInput]
) -> AddBookPayload:
    """Create books from one input or a list of inputs."""
    store = get_book_store(info)
    created = store.add(input)
    logger.debug("addBook resolved", count=len(created))
    return AddBookPayload(records=created)


async def update_book(info: strawberry.Info, input: UpdateBookInput) -> UpdateBookPayload:
    """Apply a patch to every book matched by the input filter."""
    store = get_book_store(info)
    updated = store.update(input.filter, input.values)
    logger.debug("updateBook resolved", count=len(updated))
    return UpdateBookPayload(records=updated)


async def delete_book(info: strawberry.Info, filter: BookFilter | None) -> DeleteBookPayload:
    """Remove every book matched by the filter."""
    store = get_book_store(info)
    removed = store.delete(filter)
    logger.debug("deleteBook resolved", count=len(removed))
    return DeleteBookPayload(records=removed)
