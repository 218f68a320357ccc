from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.utils.logger import logger


async def log_exceptions(request: Request, call_next):
    try:
        return await call_next(request)

    except Exception:
        logger.error(f"=== GLOBAL ERROR === path={request.url.path}", exc_info=True)

        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"}
        )


async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"[HTTP] Invalid body on {request.url.path}: {exc.errors()}")

    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body"}
    )
