import logging

from fastapi import APIRouter, Depends, Query, Response

from player_admin.api.deps import get_player_service, parse_player_id
from player_admin.models.enums import PlayerOrder
from player_admin.schemas import PlayerIn, PlayerOut
from player_admin.services.filters import INT_MAX, PlayerFilter, player_filter
from player_admin.services.player import PlayerService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/players", response_model=list[PlayerOut])
def list_players(
    filters: PlayerFilter = Depends(player_filter),
    order: PlayerOrder = PlayerOrder.ID,
    page_number: int = Query(default=0, ge=0, le=INT_MAX, alias="pageNumber"),
    page_size: int = Query(default=3, ge=1, le=INT_MAX, alias="pageSize"),
    service: PlayerService = Depends(get_player_service),
):
    logger.debug(
        "list_players: %s order=%s pageNumber=%d pageSize=%d",
        filters, order.value, page_number, page_size,
    )
    players = service.list(filters, order, page_number, page_size)
    return [PlayerOut.from_player(p) for p in players]


@router.get("/players/count", response_model=int)
def count_players(
    filters: PlayerFilter = Depends(player_filter),
    service: PlayerService = Depends(get_player_service),
):
    logger.debug("count_players: %s", filters)
    return service.count(filters)


@router.post("/players", response_model=PlayerOut)
def create_player(
    payload: PlayerIn,
    service: PlayerService = Depends(get_player_service),
):
    logger.debug("create_player: %r", payload)
    return PlayerOut.from_player(service.create(payload))


@router.get("/players/{id}", response_model=PlayerOut)
def get_player(
    player_id: int = Depends(parse_player_id),
    service: PlayerService = Depends(get_player_service),
):
    logger.debug("get_player: %d", player_id)
    return PlayerOut.from_player(service.get(player_id))


@router.post("/players/{id}", response_model=PlayerOut)
def update_player(
    payload: PlayerIn,
    player_id: int = Depends(parse_player_id),
    service: PlayerService = Depends(get_player_service),
):
    logger.debug("update_player: %d %r", player_id, payload)
    return PlayerOut.from_player(service.update(player_id, payload))


@router.delete("/players/{id}", response_class=Response)
def delete_player(
    player_id: int = Depends(parse_player_id),
    service: PlayerService = Depends(get_player_service),
):
    logger.debug("delete_player: %d", player_id)
    service.delete(player_id)
    return Response(status_code=200)
