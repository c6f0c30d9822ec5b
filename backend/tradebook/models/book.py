"""Book model — a trading book or counterparty account."""

from sqlalchemy import Column, Integer, String

from tradebook.database import Base


class Book(Base):
    __tablename__ = "book"

    id = Column(Integer, primary_key=True)
    display_name = Column(String(255), nullable=False, unique=True)
