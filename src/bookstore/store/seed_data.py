"""
Seed records loaded into a fresh store at application start.
"""

from .models import BookRecord

SEED_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(id="abc", title="The Awakening", author="Kate Chopin"),
    BookRecord(id="zxy", title="City of Glass", author="Paul Auster"),
)


def seed_records() -> list[BookRecord]:
    """Return the seed collection as a new list."""
    return list(SEED_BOOKS)
