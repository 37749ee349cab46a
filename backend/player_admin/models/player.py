from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from player_admin.db.base import Base
from player_admin.models.enums import Profession, Race

NAME_MAX_LENGTH = 12
TITLE_MAX_LENGTH = 30


class Player(Base):
    __tablename__ = "players"
    # Never hand out the id of a deleted row again (SQLite reuses max(rowid)+1 otherwise).
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    race: Mapped[Race] = mapped_column(
        Enum(Race, native_enum=False, length=16), nullable=False
    )
    profession: Mapped[Profession] = mapped_column(
        Enum(Profession, native_enum=False, length=16), nullable=False
    )

    experience: Mapped[int] = mapped_column(Integer, nullable=False)

    # Derived from experience on every write (see services.leveling).
    level: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    until_next_level: Mapped[int] = mapped_column(Integer, nullable=False)

    # Naive UTC.
    birthday: Mapped[datetime | None] = mapped_column(DateTime)
    banned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return (
            f"Player(id={self.id!r}, name={self.name!r}, title={self.title!r}, "
            f"race={self.race}, profession={self.profession}, experience={self.experience}, "
            f"level={self.level}, until_next_level={self.until_next_level}, "
            f"birthday={self.birthday}, banned={self.banned})"
        )
