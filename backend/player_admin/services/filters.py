"""Query-string filters for the player list and count endpoints.

Each optional parameter becomes one criterion; the criteria are AND-ed into a
single SQLAlchemy clause. No parameters means "every player".
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from fastapi import Query
from sqlalchemy import ColumnElement, and_, true

from player_admin.core.timestamps import clamp_epoch_ms
from player_admin.models.enums import Profession, Race
from player_admin.models.player import Player

# Bounds of the 32- and 64-bit integers query values are bound as.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1


@dataclass(frozen=True)
class NameContains:
    text: str


@dataclass(frozen=True)
class TitleContains:
    text: str


@dataclass(frozen=True)
class RaceIs:
    race: Race


@dataclass(frozen=True)
class ProfessionIs:
    profession: Profession


@dataclass(frozen=True)
class BornAfter:
    when: datetime


@dataclass(frozen=True)
class BornBefore:
    when: datetime


@dataclass(frozen=True)
class BannedIs:
    banned: bool


@dataclass(frozen=True)
class MinExperience:
    value: int


@dataclass(frozen=True)
class MaxExperience:
    value: int


@dataclass(frozen=True)
class MinLevel:
    value: int


@dataclass(frozen=True)
class MaxLevel:
    value: int


Criterion = (
    NameContains
    | TitleContains
    | RaceIs
    | ProfessionIs
    | BornAfter
    | BornBefore
    | BannedIs
    | MinExperience
    | MaxExperience
    | MinLevel
    | MaxLevel
)


def _contains(text: str) -> str:
    return f"%{text}%"


def criterion_clause(criterion: Criterion) -> ColumnElement[bool]:
    if isinstance(criterion, NameContains):
        return Player.name.like(_contains(criterion.text))
    if isinstance(criterion, TitleContains):
        return Player.title.like(_contains(criterion.text))
    if isinstance(criterion, RaceIs):
        return Player.race == criterion.race
    if isinstance(criterion, ProfessionIs):
        return Player.profession == criterion.profession
    if isinstance(criterion, BornAfter):
        return Player.birthday >= criterion.when
    if isinstance(criterion, BornBefore):
        return Player.birthday <= criterion.when
    if isinstance(criterion, BannedIs):
        return Player.banned == criterion.banned
    if isinstance(criterion, MinExperience):
        return Player.experience >= criterion.value
    if isinstance(criterion, MaxExperience):
        return Player.experience <= criterion.value
    if isinstance(criterion, MinLevel):
        return Player.level >= criterion.value
    if isinstance(criterion, MaxLevel):
        return Player.level <= criterion.value
    raise TypeError(f"Unknown filter criterion: {criterion!r}")


def compose(criteria: Iterable[Criterion]) -> ColumnElement[bool]:
    clauses = [criterion_clause(c) for c in criteria]
    if not clauses:
        return true()
    return and_(*clauses)


@dataclass
class PlayerFilter:
    name: str | None = None
    title: str | None = None
    race: Race | None = None
    profession: Profession | None = None
    after: int | None = None
    before: int | None = None
    banned: bool | None = None
    min_experience: int | None = None
    max_experience: int | None = None
    min_level: int | None = None
    max_level: int | None = None

    def criteria(self) -> list[Criterion]:
        out: list[Criterion] = []
        if self.name is not None:
            out.append(NameContains(self.name))
        if self.title is not None:
            out.append(TitleContains(self.title))
        if self.race is not None:
            out.append(RaceIs(self.race))
        if self.profession is not None:
            out.append(ProfessionIs(self.profession))
        if self.after is not None:
            out.append(BornAfter(clamp_epoch_ms(self.after)))
        if self.before is not None:
            out.append(BornBefore(clamp_epoch_ms(self.before)))
        if self.banned is not None:
            out.append(BannedIs(self.banned))
        if self.min_experience is not None:
            out.append(MinExperience(self.min_experience))
        if self.max_experience is not None:
            out.append(MaxExperience(self.max_experience))
        if self.min_level is not None:
            out.append(MinLevel(self.min_level))
        if self.max_level is not None:
            out.append(MaxLevel(self.max_level))
        return out

    def predicate(self) -> ColumnElement[bool]:
        return compose(self.criteria())


def player_filter(
    name: str | None = None,
    title: str | None = None,
    race: Race | None = None,
    profession: Profession | None = None,
    after: int | None = Query(default=None, ge=LONG_MIN, le=LONG_MAX),
    before: int | None = Query(default=None, ge=LONG_MIN, le=LONG_MAX),
    banned: bool | None = None,
    min_experience: int | None = Query(default=None, ge=INT_MIN, le=INT_MAX, alias="minExperience"),
    max_experience: int | None = Query(default=None, ge=INT_MIN, le=INT_MAX, alias="maxExperience"),
    min_level: int | None = Query(default=None, ge=INT_MIN, le=INT_MAX, alias="minLevel"),
    max_level: int | None = Query(default=None, ge=INT_MIN, le=INT_MAX, alias="maxLevel"),
) -> PlayerFilter:
    return PlayerFilter(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after,
        before=before,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )
