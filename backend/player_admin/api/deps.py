from __future__ import annotations

from collections.abc import Generator
import logging
import math

from fastapi import Depends
from sqlalchemy.orm import Session

from player_admin.db.session import SessionLocal
from player_admin.errors import BadRequestError
from player_admin.services.player import PlayerService

logger = logging.getLogger(__name__)

MAX_PLAYER_ID = 2**63 - 1


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_player_service(db: Session = Depends(get_db)) -> PlayerService:
    return PlayerService(db)


def _bad_id(message: str) -> BadRequestError:
    logger.error(message)
    return BadRequestError(message)


def parse_player_id(id: str) -> int:
    """Turn the ``{id}`` path segment into a positive integer id.

    Anything that is not a whole, positive number is a client error (400),
    never a lookup miss.
    """
    raw = id.strip()
    try:
        value = int(raw)
    except ValueError:
        try:
            number = float(raw)
        except ValueError:
            raise _bad_id(f"{id}: id must be integer!")
        if not math.isfinite(number) or not number.is_integer():
            raise _bad_id(f"{id}: id must be integer!")
        value = int(number)

    if value <= 0:
        raise _bad_id(f"{id}: id must be positive!")
    if value > MAX_PLAYER_ID:
        raise _bad_id(f"{id}: id is out of range!")
    return value
