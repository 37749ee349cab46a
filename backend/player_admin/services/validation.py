import logging

from player_admin.models.player import NAME_MAX_LENGTH, TITLE_MAX_LENGTH
from player_admin.schemas import PlayerIn

logger = logging.getLogger(__name__)

MIN_EXPERIENCE = 0
MAX_EXPERIENCE = 10_000_000
MIN_BIRTH_YEAR = 2000
MAX_BIRTH_YEAR = 3000

REQUIRED_FIELDS = ("name", "title", "race", "profession", "banned", "experience")


def is_valid(candidate: PlayerIn, require_all_fields: bool = True) -> bool:
    """Check a create (``require_all_fields``) or partial-update payload.

    Absent fields are only an error when creating; every present field must
    satisfy its own range rule either way.
    """
    if require_all_fields:
        missing = [f for f in REQUIRED_FIELDS if getattr(candidate, f) is None]
        if missing:
            logger.debug("missing required fields: %s", ", ".join(missing))
            return False

    name = candidate.name
    if name is not None and not 1 <= len(name) <= NAME_MAX_LENGTH:
        logger.debug("name length %d outside 1..%d", len(name), NAME_MAX_LENGTH)
        return False

    title = candidate.title
    if title is not None and len(title) > TITLE_MAX_LENGTH:
        logger.debug("title length %d exceeds %d", len(title), TITLE_MAX_LENGTH)
        return False

    birthday = candidate.birthday
    if birthday is not None and not MIN_BIRTH_YEAR <= birthday.year <= MAX_BIRTH_YEAR:
        logger.debug("birthday year %d outside %d..%d", birthday.year, MIN_BIRTH_YEAR, MAX_BIRTH_YEAR)
        return False

    experience = candidate.experience
    if experience is not None and not MIN_EXPERIENCE <= experience <= MAX_EXPERIENCE:
        logger.debug("experience %d outside %d..%d", experience, MIN_EXPERIENCE, MAX_EXPERIENCE)
        return False

    return True
