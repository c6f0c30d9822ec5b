"""Instrument model."""

from sqlalchemy import Column, Integer, String

from tradebook.database import Base


class Instrument(Base):
    __tablename__ = "instrument"

    id = Column(Integer, primary_key=True)
    name = Column(String(64), nullable=False, unique=True)
