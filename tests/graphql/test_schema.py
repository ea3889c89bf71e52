"""
Tests for the GraphQL schema definition
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from bookstore.graphql.schema import create_graphql_router, schema, validate_schema
from bookstore.store import BookStore


def test_schema_validates():
    validate_schema()


def test_schema_exposes_book_operations():
    sdl = schema.as_str()

    assert "queryBook(filter: BookFilter = null): [Book!]!" in sdl
    assert "getBook(id: ID!): Book!" in sdl
    assert "addBook(input: [AddBookInput!]!): AddBookPayload!" in sdl
    assert "updateBook(input: UpdateBookInput!): UpdateBookPayload!" in sdl
    assert "deleteBook(filter: BookFilter = null): DeleteBookPayload!" in sdl


def test_payloads_expose_filterable_book_field():
    sdl = schema.as_str()

    for payload in ("AddBookPayload", "UpdateBookPayload", "DeleteBookPayload"):
        block = sdl.split(f"type {payload} {{", 1)[1].split("}", 1)[0]
        assert "book(filter: BookFilter = null): [Book!]!" in block
        # The affected record set stays server-side
        assert "records" not in block


def test_books_query_is_deprecated():
    assert 'books: [Book!]! @deprecated(reason: "Use queryBook")' in schema.as_str()


@pytest.mark.asyncio
@pytest.mark.parametrize("graphiql", [True, False])
async def test_router_console_toggle(graphiql):
    app = FastAPI()
    app.include_router(create_graphql_router(BookStore(), graphiql=graphiql))

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/graphql", headers={"Accept": "text/html"})

    served = "text/html" in response.headers.get("content-type", "")
    assert served is graphiql
