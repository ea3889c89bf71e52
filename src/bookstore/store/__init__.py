"""
In-memory book storage
"""

from .books import BookStore, generate_book_id
from .models import BookRecord
from .seed_data import seed_records

__all__ = ["BookRecord", "BookStore", "generate_book_id", "seed_records"]
