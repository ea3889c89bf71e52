"""
In-memory book collection
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping, Sequence
from typing import Any
from uuid import uuid4

from pydantic import ValidationError

from ..errors import InvalidInputError, NotFoundError
from ..logging import get_logger
from .filters import normalize_patch, select
from .models import BookRecord

logger = get_logger(__name__)


def generate_book_id() -> str:
    """Generate a new opaque book identifier."""
    return uuid4().hex


NEW_BOOK_FIELDS = ("title", "author")


def _field(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _invalid(e: ValidationError, context: str) -> InvalidInputError:
    field = e.errors()[0]["loc"][0]
    return InvalidInputError(f"{context}: {field} must be a non-empty string")


class BookStore:
    """
    Ordered, process-local collection of books.

    All reads and writes go through the methods below and are serialized by a
    re-entrant lock, so concurrent mutations never interleave. Methods return
    the affected records; the internal list is never handed out.
    """

    def __init__(self, records: Iterable[BookRecord] | None = None) -> None:
        self._lock = threading.RLock()
        self._books: list[BookRecord] = []
        if records is not None:
            self.reset(records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def all(self) -> list[BookRecord]:
        """Snapshot of the whole collection."""
        with self._lock:
            return list(self._books)

    def reset(self, records: Iterable[BookRecord]) -> None:
        """Replace the collection contents."""
        records = list(records)
        ids = [record.id for record in records]
        if len(set(ids)) != len(ids):
            raise InvalidInputError("Book IDs must be unique")
        with self._lock:
            self._books = records

    def query(self, filter: Any = None) -> list[BookRecord]:
        """Books matching the filter; all books when the filter is empty."""
        with self._lock:
            return select(self._books, filter)

    def get(self, id: str) -> BookRecord:
        """Book with the given ID.

        Raises:
            NotFoundError: If no book has that ID
        """
        with self._lock:
            for record in self._books:
                if record.id == id:
                    return record
        logger.info("Book not found", book_id=id)
        raise NotFoundError()

    def add(self, inputs: Any) -> list[BookRecord]:
        """Create one book per input and append them in input order.

        Accepts a single ``{title, author}`` input or a sequence of them.
        Returns only the newly created books.
        """
        if isinstance(inputs, Mapping) or not isinstance(inputs, Sequence):
            inputs = [inputs]

        with self._lock:
            existing = {record.id for record in self._books}
            created: list[BookRecord] = []
            for item in inputs:
                if isinstance(item, Mapping):
                    unknown = sorted(set(item) - set(NEW_BOOK_FIELDS))
                    if unknown:
                        raise InvalidInputError(
                            f"Unknown book input field(s): {', '.join(unknown)}"
                        )
                book_id = generate_book_id()
                while book_id in existing:
                    book_id = generate_book_id()
                try:
                    record = BookRecord(
                        id=book_id,
                        title=_field(item, "title"),
                        author=_field(item, "author"),
                    )
                except ValidationError as e:
                    raise _invalid(e, "Invalid book input") from e
                existing.add(book_id)
                created.append(record)

            self._books.extend(created)

        logger.info("Books added", count=len(created), book_ids=[b.id for b in created])
        return created

    def update(self, filter: Any, values: Any) -> list[BookRecord]:
        """Overwrite the given fields on every matching book, in place.

        Fields absent from ``values`` keep their current value.
        """
        patch = normalize_patch(values)

        with self._lock:
            matched = {record.id for record in select(self._books, filter)}
            replacements: dict[int, BookRecord] = {}
            for index, record in enumerate(self._books):
                if record.id not in matched:
                    continue
                try:
                    replacements[index] = BookRecord.model_validate(
                        {**record.model_dump(), **patch}
                    )
                except ValidationError as e:
                    raise _invalid(e, "Invalid book patch") from e

            # Nothing is written until every replacement validated
            for index, replacement in replacements.items():
                self._books[index] = replacement
            updated = list(replacements.values())

        logger.info(
            "Books updated",
            count=len(updated),
            book_ids=[b.id for b in updated],
            fields=sorted(patch),
        )
        return updated

    def delete(self, filter: Any = None) -> list[BookRecord]:
        """Remove every matching book and return the removed ones."""
        with self._lock:
            removed = select(self._books, filter)
            removed_ids = {record.id for record in removed}
            self._books = [record for record in self._books if record.id not in removed_ids]

        logger.info("Books deleted", count=len(removed), book_ids=sorted(removed_ids))
        return removed
