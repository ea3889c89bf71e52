"""
Main FastAPI application for the Bookstore backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import BookStore, seed_records

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Bookstore API...", books=len(app.state.book_store))

    yield

    logger.info("Shutting down Bookstore API...")


def create_book_store(config: Settings) -> BookStore:
    """Create the application's book store, seeded unless disabled."""
    records = seed_records() if config.seed_books else []
    store = BookStore(records)
    logger.info("Book store initialized", seeded=config.seed_books, books=len(store))
    return store


def create_app(config: Settings | None = None, book_store: BookStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or settings
    configure_logging(debug=config.debug, log_level=config.log_level)

    app = FastAPI(
        title="Bookstore API",
        description="In-memory book collection served over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=config.debug,
    )
    app.state.book_store = book_store if book_store is not None else create_book_store(config)

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(app.state.book_store, graphiql=config.graphiql)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Fail fast: the server should not start with a broken schema
        raise

    return app


# Create the main application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
