"""Trade model — a single transaction between two books in one instrument."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer
from sqlalchemy.orm import relationship

from tradebook.database import Base


class Trade(Base):
    __tablename__ = "trade"

    id = Column(Integer, primary_key=True)
    book_a = Column(Integer, ForeignKey("book.id"), nullable=False)
    book_b = Column(Integer, ForeignKey("book.id"), nullable=False)
    instrument_id = Column(Integer, ForeignKey("instrument.id"), nullable=False)
    quantity = Column(Integer, nullable=False)  # signed: positive = book_a buys

    __table_args__ = (
        CheckConstraint("book_a <> book_b", name="ck_trade_distinct_books"),
    )

    # Relationships
    trade_book = relationship("Book", foreign_keys=[book_a])
    client_book = relationship("Book", foreign_keys=[book_b])
    instrument = relationship("Instrument")
