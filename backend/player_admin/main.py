import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from player_admin.api.v1.health import router as health_router
from player_admin.api.v1.players import router as players_router
from player_admin.core.logging import configure_logging
from player_admin.core.settings import settings
from player_admin.errors import PlayerAdminError

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PlayerAdminError)
async def handle_player_admin_error(_request: Request, exc: PlayerAdminError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Malformed bodies and query values are reported as 400.
@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.error("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_errors(exc)})


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


app.include_router(
    health_router,
    prefix=settings.API_PREFIX,
    tags=["Health"],
)
app.include_router(
    players_router,
    prefix=settings.API_PREFIX,
    tags=["Players"],
)
