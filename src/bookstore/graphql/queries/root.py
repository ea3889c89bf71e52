"""
Root GraphQL query definitions
"""

import strawberry

from ..types.book import Book, BookFilter


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def query_book(
        self, info: strawberry.Info, filter: BookFilter | None = None
    ) -> list[Book]:
        """Get books matching a filter; all books when no filter is given."""
        from ..resolvers.book import resolve_query_book

        return await resolve_query_book(info, filter)

    @strawberry.field
    async def get_book(self, info: strawberry.Info, id: strawberry.ID) -> Book:
        """Get a book by ID."""
        from ..resolvers.book import resolve_get_book

        return await resolve_get_book(info, id)

    @strawberry.field(deprecation_reason="Use queryBook")
    async def books(self, info: strawberry.Info) -> list[Book]:
        """Get every book."""
        from ..resolvers.book import resolve_books

        return await resolve_books(info)
