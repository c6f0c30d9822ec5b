"""Position model — net quantity per (book, instrument), maintained by the store."""

from sqlalchemy import Column, ForeignKey, Integer

from tradebook.database import Base


class Position(Base):
    __tablename__ = "position"

    book_id = Column(Integer, ForeignKey("book.id"), primary_key=True)
    instrument_id = Column(Integer, ForeignKey("instrument.id"), primary_key=True)
    quantity = Column(Integer, nullable=False, default=0)
