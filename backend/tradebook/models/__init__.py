"""SQLAlchemy ORM models."""

from tradebook.models.book import Book
from tradebook.models.instrument import Instrument
from tradebook.models.trade import Trade
from tradebook.models.position import Position

__all__ = [
    "Book",
    "Instrument",
    "Trade",
    "Position",
]
