"""FastAPI application entry point."""

import uvicorn
from ddtrace import patch
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from media_transcriber.dependencies import get_config
from media_transcriber.logging import setup_logging
from media_transcriber.response_models import ErrorResponse
from media_transcriber.routes import transcribe_router

logger = setup_logging()

_config = get_config()

if _config.tracing.enabled:
    patch(fastapi=True, requests=True)

app = FastAPI(title="Media Transcriber")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(_config.server.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(transcribe_router)


@app.exception_handler(HTTPException)
async def handle_http_error(request: Request, exc: HTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "Request failed",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(
        "Invalid request body",
        extra={"path": request.url.path, "errors": str(exc.errors())},
    )
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Invalid request body").model_dump(),
    )


def main():
    """Starts the HTTP server."""
    logger.info(
        "Server starting",
        extra={"host": _config.server.host, "port": _config.server.port},
    )
    uvicorn.run(app, host=_config.server.host, port=_config.server.port)


if __name__ == "__main__":
    main()
