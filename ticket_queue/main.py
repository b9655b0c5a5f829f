import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings
from .errors import QueueError
from .routes import api_router

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="ticket_queue")

app.include_router(api_router)
# Older clients call the same endpoints under /api.
app.include_router(api_router, prefix="/api", include_in_schema=False)


@app.exception_handler(QueueError)
async def queue_error_handler(request: Request, exc: QueueError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": _describe_errors(exc)})


@app.get("/health", tags=["health"])
def health_check() -> dict:
    return {"status": "ok"}


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


def _describe_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request"
