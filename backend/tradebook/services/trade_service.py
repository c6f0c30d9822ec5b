"""Trade query service — trades behind a (book, security) position.

For ``book="US Eq Flow"`` and ``security="TSLA"`` this runs the equivalent of:

    SELECT trade_book.display_name, i.name, t.quantity, t.id,
           client_book.display_name
    FROM trade t
    JOIN book trade_book ON trade_book.id = t.book_a
    JOIN book client_book ON client_book.id = t.book_b
    JOIN instrument i ON i.id = t.instrument_id
    WHERE trade_book.display_name = 'US Eq Flow'
      AND i.name = 'TSLA'
    ORDER BY t.id
"""

import logging

from sqlalchemy.orm import Session, aliased

from tradebook.models.book import Book
from tradebook.models.instrument import Instrument
from tradebook.models.trade import Trade
from tradebook.schemas.trade import TradeRow

logger = logging.getLogger(__name__)


def trades_for_position(db: Session, book: str, security: str) -> list[TradeRow]:
    """Get the trades booked by ``book`` in ``security``.

    Both names are matched exactly (case-sensitive). An unknown book or
    security is not an error; it simply yields no rows.
    """
    if not book or not security:
        raise ValueError("book and security are required")

    trade_book = aliased(Book, name="trade_book")
    client_book = aliased(Book, name="client_book")

    rows = (
        db.query(
            trade_book.display_name,
            Instrument.name,
            Trade.quantity,
            Trade.id,
            client_book.display_name,
        )
        .select_from(Trade)
        .join(trade_book, Trade.book_a == trade_book.id)
        .join(client_book, Trade.book_b == client_book.id)
        .join(Instrument, Trade.instrument_id == Instrument.id)
        .filter(trade_book.display_name == book, Instrument.name == security)
        .order_by(Trade.id)
        .all()
    )
    logger.debug("Found %d trades for book=%r security=%r", len(rows), book, security)
    return [tuple(row) for row in rows]
