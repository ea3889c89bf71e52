"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, get_request_id, set_request_context

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"
REQUEST_ID_HEADER = "X-Request-ID"

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def sanitize_query_params(params: dict[str, Any], path: str) -> dict[str, Any]:
    """Redact GraphQL documents and variables carried in the query string."""
    sanitized = dict(params)
    if path == GRAPHQL_PATH:
        for key in ("query", "variables", "extensions"):
            if key in sanitized:
                sanitized[key] = "[REDACTED]"
    return sanitized


def operation_from_document(operation_name: Any, query: Any) -> str | None:
    """Derive a loggable operation name from a GraphQL request payload.

    Explicit ``operationName`` wins; otherwise the first named operation in the
    document is used, with mutations prefixed by ``mutation:``.
    """
    if isinstance(operation_name, str) and operation_name:
        return operation_name

    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = _OPERATION_RE.search(query)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        params = request.query_params
        return operation_from_document(params.get("operationName"), params.get("query"))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
            if not isinstance(data, dict):
                return None
            return operation_from_document(data.get("operationName"), data.get("query"))
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError):
            return None

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""

        graphql_operation = await extract_graphql_operation_name(request)
        set_request_context(
            request_id=request.headers.get(REQUEST_ID_HEADER),
            operation=graphql_operation,
        )

        try:
            sanitized_params = None
            if request.query_params:
                sanitized_params = sanitize_query_params(
                    dict(request.query_params), request.url.path
                )

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=sanitized_params,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )

            request_id = get_request_id()
            if request_id:
                response.headers[REQUEST_ID_HEADER] = request_id
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
