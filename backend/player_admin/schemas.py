from datetime import datetime

from pydantic import BaseModel, field_validator

from player_admin.core.timestamps import from_epoch_ms, to_epoch_ms
from player_admin.models.enums import Profession, Race
from player_admin.models.player import Player


class PlayerIn(BaseModel):
    """Create/update body. Every field is optional here; ``is_valid`` decides
    which ones a given operation needs. ``id`` and the level fields are
    server-owned and ignored if sent."""

    name: str | None = None
    title: str | None = None
    race: Race | None = None
    profession: Profession | None = None
    birthday: datetime | None = None
    banned: bool | None = None
    experience: int | None = None

    @field_validator("birthday", mode="before")
    @classmethod
    def parse_epoch_ms(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return from_epoch_ms(int(value))
            except OverflowError:
                raise ValueError(f"timestamp {value} is not a finite number")
        return value

    @field_validator("birthday")
    @classmethod
    def drop_timezone(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            return value.replace(tzinfo=None) - value.utcoffset()
        return value


class PlayerOut(BaseModel):
    id: int
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: int | None
    banned: bool
    experience: int
    level: int
    untilNextLevel: int

    @classmethod
    def from_player(cls, player: Player) -> "PlayerOut":
        return cls(
            id=player.id,
            name=player.name,
            title=player.title,
            race=player.race,
            profession=player.profession,
            birthday=to_epoch_ms(player.birthday) if player.birthday is not None else None,
            banned=player.banned,
            experience=player.experience,
            level=player.level,
            untilNextLevel=player.until_next_level,
        )
