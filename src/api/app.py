"""FastAPI application: routes + translating domain exceptions into HTTP status codes."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.routes import router
from src.core.exceptions import (
    GameError,
    GameNotFoundError,
    InvalidRequestError,
    StaleGameError,
)
from src.core.logger import get_logger

logger = get_logger(__name__)

# Starlette renamed its 422 constant (UNPROCESSABLE_ENTITY -> UNPROCESSABLE_CONTENT), the number is stable
HTTP_422_UNPROCESSABLE = 422

# Most specific first: the first matching class decides the status code
ERROR_STATUS_CODES: list[tuple[type[GameError], int]] = [
    (GameNotFoundError, status.HTTP_404_NOT_FOUND),
    (StaleGameError, status.HTTP_409_CONFLICT),
    (InvalidRequestError, HTTP_422_UNPROCESSABLE),
    (GameError, status.HTTP_400_BAD_REQUEST),
]


def status_code_for(error: GameError) -> int:
    return next(
        code for error_type, code in ERROR_STATUS_CODES if isinstance(error, error_type)
    )


async def handle_game_error(request: Request, exc: Exception) -> JSONResponse:
    # for the type checker: only registered for GameError
    assert isinstance(exc, GameError)
    status_code = status_code_for(exc)
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(title="Simple Chess")
    app.include_router(router)
    app.add_exception_handler(GameError, handle_game_error)
    return app
