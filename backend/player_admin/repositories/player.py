"""Player repository for data access."""

from collections.abc import Sequence

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.orm import Session

from player_admin.models.enums import PlayerOrder
from player_admin.models.player import Player

SORT_COLUMNS = {
    PlayerOrder.ID: Player.id,
    PlayerOrder.NAME: Player.name,
    PlayerOrder.EXPERIENCE: Player.experience,
    PlayerOrder.BIRTHDAY: Player.birthday,
    PlayerOrder.LEVEL: Player.level,
}


class PlayerRepository:
    """Pure data access for Player rows; callers own the transaction."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, player_id: int) -> Player | None:
        return self.session.get(Player, player_id)

    def get_for_update(self, player_id: int) -> Player | None:
        """Load a player and lock its row until the surrounding transaction ends."""
        stmt = select(Player).where(Player.id == player_id).with_for_update()
        return self.session.execute(stmt).scalars().one_or_none()

    def create(self, player: Player) -> Player:
        self.session.add(player)
        self.session.flush()
        return player

    def update(self, player: Player) -> Player:
        self.session.add(player)
        self.session.flush()
        return player

    def delete(self, player: Player) -> None:
        self.session.delete(player)
        self.session.flush()

    def query(
        self,
        predicate: ColumnElement[bool],
        order: PlayerOrder = PlayerOrder.ID,
        page_number: int = 0,
        page_size: int = 3,
    ) -> Sequence[Player]:
        """Return one ascending page of players matching ``predicate``."""
        sort_column = SORT_COLUMNS[order]
        stmt = (
            select(Player)
            .where(predicate)
            .order_by(sort_column.asc(), Player.id.asc())
            .offset(page_number * page_size)
            .limit(page_size)
        )
        return self.session.execute(stmt).scalars().all()

    def count(self, predicate: ColumnElement[bool]) -> int:
        stmt = select(func.count()).select_from(Player).where(predicate)
        return self.session.execute(stmt).scalar_one()
