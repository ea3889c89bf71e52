"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.book import (
    AddBookPayload,
    BookFilter,
    BookPatch,
    DeleteBookPayload,
    UpdateBookPayload,
)


# Input types for mutations
@strawberry.input
class AddBookInput:
    """Input for creating a new book."""

    title: str
    author: str


@strawberry.input
class UpdateBookInput:
    """Input for updating the books matched by a filter."""

    values: BookPatch
    filter: BookFilter | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addBook")
    async def add_book(self, info: strawberry.Info, input: list[AddBookInput]) -> AddBookPayload:
        """Add one or more books."""
        from ..resolvers.book import add_book

        return await add_book(info, input)

    @strawberry.mutation(name="updateBook")
    async def update_book(
        self, info: strawberry.Info, input: UpdateBookInput
    ) -> UpdateBookPayload:
        """Update the books matched by a filter."""
        from ..resolvers.book import update_book

        return await update_book(info, input)

    @strawberry.mutation(name="deleteBook")
    async def delete_book(
        self, info: strawberry.Info, filter: BookFilter | None = None
    ) -> DeleteBookPayload:
        """Delete the books matched by a filter."""
        from ..resolvers.book import delete_book

        return await delete_book(info, filter)
