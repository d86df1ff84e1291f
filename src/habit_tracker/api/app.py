"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from habit_tracker.api.users import router as users_router
from habit_tracker.app_logging import configure_logging
from habit_tracker.containers import AppContainer
from habit_tracker.domain.errors import (
    EntryNotFoundError,
    EntryValidationError,
    HabitNotFoundError,
    HabitTrackerError,
    InvalidUsernameError,
    SettingsValidationError,
)

_UNPROCESSABLE = 422

_STATUS_BY_ERROR: dict[type[HabitTrackerError], int] = {
    EntryValidationError: _UNPROCESSABLE,
    SettingsValidationError: _UNPROCESSABLE,
    InvalidUsernameError: _UNPROCESSABLE,
    EntryNotFoundError: status.HTTP_404_NOT_FOUND,
    HabitNotFoundError: status.HTTP_404_NOT_FOUND,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(users_router)

    @app.exception_handler(HabitTrackerError)
    async def handle_domain_error(
        request: Request, exc: HabitTrackerError
    ) -> JSONResponse:
        status_code = _STATUS_BY_ERROR.get(
            type(exc), status.HTTP_400_BAD_REQUEST
        )
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
