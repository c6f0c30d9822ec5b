"""Service info and health endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tradebook import __version__
from tradebook.database import get_db

router = APIRouter(tags=["health"])


@router.get("/")
def root():
    return {
        "name": "Tradebook API",
        "version": __version__,
        "docs": "/docs",
    }


@router.get("/health")
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        raise HTTPException(
            status_code=503,
            detail={"status": "error", "database": "unavailable"},
        )
    return {"status": "ok", "database": "ok"}
