"""add players table

Revision ID: 4e1d7a2b9c30
Revises:
Create Date: 2026-10-19 10:12:44.218305

"""
from alembic import op
import sqlalchemy as sa



# revision identifiers, used by Alembic.
revision = '4e1d7a2b9c30'
down_revision = None
branch_labels = None
depends_on = None

RACES = ("HUMAN", "DWARF", "ELF", "GIANT", "ORC", "TROLL", "HOBBIT")
PROFESSIONS = ("WARRIOR", "ROGUE", "SORCERER", "CLERIC", "PALADIN", "NAZGUL", "WARLOCK", "DRUID")


def upgrade() -> None:
    op.create_table(
        "players",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=12), nullable=False),
        sa.Column("title", sa.String(length=30), nullable=False),
        sa.Column(
            "race",
            sa.Enum(*RACES, name="race", native_enum=False, length=16),
            nullable=False,
        ),
        sa.Column(
            "profession",
            sa.Enum(*PROFESSIONS, name="profession", native_enum=False, length=16),
            nullable=False,
        ),
        sa.Column("experience", sa.Integer(), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False),
        sa.Column("until_next_level", sa.Integer(), nullable=False),
        sa.Column("birthday", sa.DateTime(), nullable=True),
        sa.Column("banned", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f("ix_players_level"), "players", ["level"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_players_level"), table_name="players")
    op.drop_table("players")
