from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from player_admin.api.deps import get_db
from player_admin.core.timestamps import to_epoch_ms
from player_admin.db.base import Base
import player_admin.models.player  # noqa: F401
from player_admin.main import app


def ms(year: int, month: int = 1, day: int = 1) -> int:
    return to_epoch_ms(datetime(year, month, day))


ROSTER = [
    # name, title, race, profession, experience (level), birthday, banned
    ("Ragnar", "Storm Jarl", "HUMAN", "WARRIOR", 5000, ms(2005, 6, 1), False),  # 9
    ("Elrond", "Lord of Rivendell", "ELF", "SORCERER", 1500, ms(2001), False),  # 5
    ("Gimli", "Axe Bearer", "DWARF", "WARRIOR", 300, ms(2010), True),  # 2
    ("Thrall", "Warchief", "ORC", "WARLOCK", 1600, ms(2020), False),  # 5
    ("Bilbo", "Ring Bearer", "HOBBIT", "ROGUE", 0, ms(2015, 3, 1), True),  # 0
]


@pytest.fixture()
def client():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        for name, title, race, profession, experience, birthday, banned in ROSTER:
            r = c.post(
                "/rest/players",
                json={
                    "name": name,
                    "title": title,
                    "race": race,
                    "profession": profession,
                    "experience": experience,
                    "birthday": birthday,
                    "banned": banned,
                },
            )
            assert r.status_code == 200, r.text
        yield c
    app.dependency_overrides.clear()


def names(client, **params) -> list[str]:
    params.setdefault("pageSize", 100)
    resp = client.get("/rest/players", params=params)
    assert resp.status_code == 200, resp.text
    return [p["name"] for p in resp.json()]


def count(client, **params) -> int:
    resp = client.get("/rest/players/count", params=params)
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_default_page_is_first_three_by_id(client):
    resp = client.get("/rest/players")
    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()] == ["Ragnar", "Elrond", "Gimli"]


def test_paging(client):
    assert names(client, pageNumber=1, pageSize=3) == ["Thrall", "Bilbo"]
    assert names(client, pageNumber=2, pageSize=2) == ["Bilbo"]
    assert names(client, pageNumber=5, pageSize=3) == []


def test_count_without_filters_is_total(client):
    assert count(client) == len(ROSTER)
    # Paging parameters do not affect the count.
    assert count(client, pageSize=1) == len(ROSTER)


@pytest.mark.parametrize(
    "order,expected",
    [
        ("ID", ["Ragnar", "Elrond", "Gimli", "Thrall", "Bilbo"]),
        ("NAME", ["Bilbo", "Elrond", "Gimli", "Ragnar", "Thrall"]),
        ("EXPERIENCE", ["Bilbo", "Gimli", "Elrond", "Thrall", "Ragnar"]),
        ("BIRTHDAY", ["Elrond", "Ragnar", "Gimli", "Bilbo", "Thrall"]),
        ("LEVEL", ["Bilbo", "Gimli", "Elrond", "Thrall", "Ragnar"]),
    ],
)
def test_order(client, order, expected):
    assert names(client, order=order) == expected


@pytest.mark.parametrize(
    "params,expected",
    [
        ({"name": "r"}, ["Ragnar", "Elrond", "Thrall"]),
        ({"title": "Bearer"}, ["Gimli", "Bilbo"]),
        ({"race": "ORC"}, ["Thrall"]),
        ({"profession": "WARRIOR"}, ["Ragnar", "Gimli"]),
        ({"banned": "true"}, ["Gimli", "Bilbo"]),
        ({"banned": "false"}, ["Ragnar", "Elrond", "Thrall"]),
        ({"minExperience": 1000, "maxExperience": 2000}, ["Elrond", "Thrall"]),
        ({"minExperience": 1500, "maxExperience": 1500}, ["Elrond"]),
        ({"minLevel": 5, "maxLevel": 5}, ["Elrond", "Thrall"]),
        ({"minLevel": 6}, ["Ragnar"]),
        ({"after": ms(2006), "before": ms(2016)}, ["Gimli", "Bilbo"]),
        ({"after": ms(2010), "before": ms(2010)}, ["Gimli"]),
        ({"profession": "WARRIOR", "banned": "true"}, ["Gimli"]),
        ({"race": "ELF", "minLevel": 6}, []),
    ],
)
def test_filters(client, params, expected):
    assert names(client, **params) == expected
    assert count(client, **params) == len(expected)


def test_filters_combine_with_paging(client):
    assert names(client, minLevel=2, order="LEVEL", pageSize=2) == ["Gimli", "Elrond"]
    assert names(client, minLevel=2, order="LEVEL", pageNumber=1, pageSize=2) == ["Thrall", "Ragnar"]


def test_level_filter_follows_updates(client):
    bilbo = client.get("/rest/players", params={"name": "Bilbo"}).json()[0]
    client.post(f"/rest/players/{bilbo['id']}", json={"experience": 1500})

    assert names(client, minLevel=5, maxLevel=5) == ["Elrond", "Thrall", "Bilbo"]


@pytest.mark.parametrize(
    "params",
    [
        {"race": "ALIEN"},
        {"profession": "BARD"},
        {"order": "COLOR"},
        {"minLevel": "high"},
        {"pageNumber": -1},
        {"pageSize": 0},
        {"after": "yesterday"},
    ],
)
def test_malformed_query_is_bad_request(client, params):
    resp = client.get("/rest/players", params=params)
    assert resp.status_code == 400


def test_birthday_bounds_past_calendar_range_saturate(client):
    far_future = 400_000_000_000_000
    assert names(client, after=far_future) == []
    assert count(client, after=far_future) == 0
    assert names(client, before=far_future) == [p[0] for p in ROSTER]
    assert count(client, after=-far_future) == len(ROSTER)


@pytest.mark.parametrize(
    "params",
    [
        {"pageSize": 10**20},
        {"pageNumber": 2**31},
        {"minExperience": 10**20},
        {"maxExperience": 2**31},
        {"minLevel": -(2**31) - 1},
        {"maxLevel": 10**20},
        {"after": 2**63},
        {"before": -(2**63) - 1},
    ],
)
def test_out_of_range_numbers_are_bad_request(client, params):
    assert client.get("/rest/players", params=params).status_code == 400
    if "pageSize" not in params and "pageNumber" not in params:
        assert client.get("/rest/players/count", params=params).status_code == 400


def test_largest_page_is_accepted(client):
    assert names(client, pageNumber=2**31 - 1, pageSize=2**31 - 1) == []
