"""Position reader: returns the stored position aggregate as-is."""

import logging

from sqlalchemy.orm import Session

from tradebook.models.position import Position

logger = logging.getLogger(__name__)


def list_positions(db: Session) -> list[Position]:
    """Get every position row in storage order."""
    positions = db.query(Position).all()
    logger.debug("Loaded %d positions", len(positions))
    return positions
