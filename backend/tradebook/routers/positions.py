"""Positions router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tradebook.database import get_db
from tradebook.schemas.position import PositionResponse
from tradebook.services import position_service

router = APIRouter(tags=["positions"])


@router.get("/listPositions", response_model=list[PositionResponse])
def list_positions(db: Session = Depends(get_db)):
    """List every stored position."""
    return position_service.list_positions(db)
