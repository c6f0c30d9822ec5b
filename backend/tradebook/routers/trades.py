"""Trades router."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tradebook.database import get_db
from tradebook.schemas.trade import TradeRow
from tradebook.services import trade_service

router = APIRouter(tags=["trades"])


@router.get("/tradesForPosition", response_model=list[TradeRow])
def trades_for_position(
    book: str = Query(..., min_length=1, description="Display name of the booking book"),
    security: str = Query(..., min_length=1, description="Instrument name, e.g. TSLA"),
    db: Session = Depends(get_db),
):
    """Get the trades for a given position (book/instrument).

    e.g. ``/tradesForPosition?book=US%20Eq%20Flow&security=TSLA``
    """
    return trade_service.trades_for_position(db, book, security)
