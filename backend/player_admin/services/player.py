"""Player use cases: validation, derived fields and transaction boundaries."""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from player_admin.db.session import unit_of_work
from player_admin.errors import BadRequestError, NotFoundError
from player_admin.models.enums import PlayerOrder
from player_admin.models.player import Player
from player_admin.repositories.player import PlayerRepository
from player_admin.schemas import PlayerIn
from player_admin.services.filters import PlayerFilter
from player_admin.services.leveling import apply_derived_fields
from player_admin.services.validation import is_valid

logger = logging.getLogger(__name__)

MERGE_FIELDS = ("name", "title", "race", "profession", "birthday", "banned", "experience")


def merge_player(source: PlayerIn, dest: Player) -> Player:
    """Copy every non-null field of ``source`` onto ``dest``."""
    for field in MERGE_FIELDS:
        value = getattr(source, field)
        if value is not None:
            setattr(dest, field, value)
    return dest


class PlayerService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = PlayerRepository(db)

    def list(
        self,
        filters: PlayerFilter,
        order: PlayerOrder = PlayerOrder.ID,
        page_number: int = 0,
        page_size: int = 3,
    ) -> Sequence[Player]:
        return self.repo.query(filters.predicate(), order, page_number, page_size)

    def count(self, filters: PlayerFilter) -> int:
        return self.repo.count(filters.predicate())

    def get(self, player_id: int) -> Player:
        player = self.repo.get_by_id(player_id)
        if player is None:
            raise self._not_found(player_id)
        return player

    def create(self, candidate: PlayerIn) -> Player:
        if not is_valid(candidate, require_all_fields=True):
            raise self._invalid(candidate)

        player = merge_player(candidate, Player())
        with unit_of_work(self.db):
            apply_derived_fields(player)
            self.repo.create(player)

        self.db.refresh(player)
        logger.info("Created player %d (level %d)", player.id, player.level)
        return player

    def update(self, player_id: int, candidate: PlayerIn) -> Player:
        # Lock, validate, merge and save as one transaction so a concurrent
        # delete or update of the same row cannot interleave.
        with unit_of_work(self.db):
            player = self.repo.get_for_update(player_id)
            if player is None:
                raise self._not_found(player_id)

            if not is_valid(candidate, require_all_fields=False):
                raise self._invalid(candidate)

            merge_player(candidate, player)
            apply_derived_fields(player)
            self.repo.update(player)

        self.db.refresh(player)
        logger.info("Updated player %d", player.id)
        return player

    def delete(self, player_id: int) -> None:
        with unit_of_work(self.db):
            player = self.repo.get_for_update(player_id)
            if player is None:
                raise self._not_found(player_id)
            self.repo.delete(player)

        logger.info("Deleted player %d", player_id)

    @staticmethod
    def _not_found(player_id: int) -> NotFoundError:
        message = f"Player {player_id} not found"
        logger.warning(message)
        return NotFoundError(message)

    @staticmethod
    def _invalid(candidate: PlayerIn) -> BadRequestError:
        message = f"Error validating player: {candidate!r}"
        logger.error(message)
        return BadRequestError(message)
