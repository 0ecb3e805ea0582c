from typing import Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from database.db import SessionLocal
from database.store import RemunerationStore


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> RemunerationStore:
    return RemunerationStore(db)
