"""Demo dataset: books, instruments, trades and the stored position aggregate.

Positions are loaded exactly as listed; they are the store's aggregate and
are not recomputed from the trades here.
"""

import logging

from sqlalchemy import insert
from sqlalchemy.orm import Session

from tradebook.models.book import Book
from tradebook.models.instrument import Instrument
from tradebook.models.position import Position
from tradebook.models.trade import Trade

logger = logging.getLogger(__name__)

BOOKS = [
    {"id": 1, "display_name": "US Eq Flow"},
    {"id": 2, "display_name": "EU Eq Flow"},
    {"id": 3, "display_name": "APAC Eq Flow"},
    {"id": 4, "display_name": "Client Alpha Fund"},
    {"id": 5, "display_name": "US Eq Prop"},
    {"id": 6, "display_name": "Client Beta Capital"},
]

INSTRUMENTS = [
    {"id": 1, "name": "AAPL"},
    {"id": 2, "name": "MSFT"},
    {"id": 3, "name": "TSLA"},
    {"id": 4, "name": "AMZN"},
    {"id": 5, "name": "GOOGL"},
    {"id": 6, "name": "NFLX"},
    {"id": 7, "name": "NVDA"},
    {"id": 8, "name": "IBM"},
]

# (id, book_a, book_b, instrument_id, quantity)
TRADES = [
    (1, 1, 4, 3, 10),
    (2, 1, 4, 3, -3),
    (3, 1, 4, 1, 25),
    (4, 1, 4, 1, -25),
    (5, 1, 4, 2, 100),
    (6, 1, 4, 2, -40),
    (7, 1, 4, 4, 20),
    (8, 2, 4, 4, 80),
    (9, 5, 6, 5, 15),
    (10, 5, 6, 5, -15),
    (11, 5, 4, 8, 200),
    (12, 5, 6, 8, 50),
    (13, 5, 3, 8, 50),
]

# (book_id, instrument_id, quantity), in storage order
POSITIONS = [
    (5, 8, 300),
    (6, 8, -50),
    (4, 8, -200),
    (1, 3, 7),
    (4, 3, -7),
    (1, 1, 0),
    (4, 1, 0),
    (1, 2, 60),
    (4, 2, -60),
    (1, 4, 20),
    (4, 4, -100),
    (2, 4, 80),
    (5, 5, 0),
    (6, 5, 0),
]


def load_demo_data(db: Session) -> bool:
    """Insert the demo dataset if the book table is empty.

    Returns True when rows were inserted.
    """
    if db.query(Book.id).first() is not None:
        logger.info("Store already populated, skipping demo data")
        return False

    db.execute(insert(Book), BOOKS)
    db.execute(insert(Instrument), INSTRUMENTS)
    db.execute(
        insert(Trade),
        [
            {"id": i, "book_a": a, "book_b": b, "instrument_id": inst, "quantity": qty}
            for i, a, b, inst, qty in TRADES
        ],
    )
    db.execute(
        insert(Position),
        [
            {"book_id": book_id, "instrument_id": inst, "quantity": qty}
            for book_id, inst, qty in POSITIONS
        ],
    )
    db.commit()
    logger.info(
        "Loaded demo data: %d books, %d instruments, %d trades, %d positions",
        len(BOOKS), len(INSTRUMENTS), len(TRADES), len(POSITIONS),
    )
    return True
