from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import Settings, load_settings
from app.routes import ask, health
from app.services.openai_client import ChatCompleter, OpenAIChatCompleter
from app.services.tutor import Tutor
from app.utils.error_handler import invalid_body_handler, log_exceptions
from app.utils.logger import logger


def create_app(
    settings: Optional[Settings] = None,
    completer: Optional[ChatCompleter] = None,
) -> FastAPI:
    settings = settings or load_settings()
    completer = completer or OpenAIChatCompleter(settings)

    # -------------------------------------------------------------------
    # FastAPI application
    # -------------------------------------------------------------------
    app = FastAPI(
        title="Grammar Tutor API",
        version="0.1.0",
    )

    app.state.settings = settings
    app.state.tutor = Tutor(settings, completer)

    # -------------------------------------------------------------------
    # Error handling
    # -------------------------------------------------------------------
    app.middleware("http")(log_exceptions)
    app.add_exception_handler(RequestValidationError, invalid_body_handler)

    # -------------------------------------------------------------------
    # CORS settings
    # -------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------
    app.include_router(ask.router,    tags=["Ask"])
    app.include_router(health.router, tags=["Health"])

    # -------------------------------------------------------------------
    # Static chat page, last so it never shadows the API
    # -------------------------------------------------------------------
    if settings.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(settings.public_dir), html=True), name="public")
    else:
        logger.warning(f"[STATIC] Public directory not found: {settings.public_dir}")

    logger.info("Backend app created")
    return app


if __name__ == "__main__":
    from app.server import main

    main()
