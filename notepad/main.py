"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from notepad.config import get_log_level

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logging.basicConfig(level=get_log_level(), format=_LOG_FORMAT, datefmt="%H:%M:%S")

# Apply the same format to Uvicorn's loggers so they also show timestamps.
for _uvicorn_logger in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    _log = logging.getLogger(_uvicorn_logger)
    _log.handlers.clear()
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%H:%M:%S"))
    _log.addHandler(_handler)
    _log.propagate = False

from fastapi import FastAPI, Request  # noqa: E402
from fastapi.exceptions import RequestValidationError  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402

from notepad import __version__  # noqa: E402
from notepad.api import notes  # noqa: E402
from notepad.schemas.note import ErrorResponse  # noqa: E402
from notepad.services.notes import ConflictingIdError, NoteStore, NotFoundError  # noqa: E402

logger = logging.getLogger(__name__)


def _error(status_code: int, error: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, detail=detail).model_dump(),
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else str(err.get("msg", "invalid")))
    return "; ".join(parts)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(400, "validation_error", _describe_validation_errors(exc))


async def _not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error(404, "not_found", str(exc))


async def _conflicting_id_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error(422, "conflicting_id", str(exc))


async def _global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(500, "internal_error", str(exc))


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Notepad API %s starting with %d notes", __version__, len(app.state.store))
    yield
    logger.info("Notepad API shutting down; discarding %d notes", len(app.state.store))


def create_app(store: NoteStore | None = None) -> FastAPI:
    """Build the application around *store* (a fresh empty one by default)."""
    app = FastAPI(
        title="Notepad API Documentation",
        version=__version__,
        lifespan=_lifespan,
    )
    app.state.store = store if store is not None else NoteStore()

    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(ConflictingIdError, _conflicting_id_handler)
    app.add_exception_handler(Exception, _global_exception_handler)

    app.include_router(notes.router, prefix="/notes", tags=["notes"])
    return app


app = create_app()
