from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


def error_body(code: str, message: str, fields: dict) -> dict:
    return {
        "success": False,
        "error": {"code": code, "message": message, "fields": fields},
    }


async def handle_client_error(request: Request, exc: ClientError):
    error = exc.base_error
    logger.warning(f"Client error: {error.code} on {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(error.code, error.message, error.fields),
    )


async def handle_server_error(request: Request, exc: ServerError):
    error = exc.base_error
    logger.error(f"Server error: {error.code} on {request.url.path}")
    # Only retryable failures expose their message
    message = (
        error.message
        if exc.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        else "Internal server error"
    )
    return JSONResponse(
        status_code=exc.status_code, content=error_body(error.code, message, {})
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    fields = {}
    for err in exc.errors():
        # loc is (source, name, ...), e.g. ("path", "reset_id")
        name = str(err["loc"][1]) if len(err["loc"]) > 1 else str(err["loc"][0])
        fields.setdefault(name, []).append(err["msg"])
    logger.warning(f"Client error: VALIDATION_ERROR on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content=error_body("VALIDATION_ERROR", "Invalid request", fields),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    from src.depends import engine, notification_service

    # Let queued emails finish before the loop goes away
    await notification_service.drain()
    await engine.dispose()


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Practice Questions Auth", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import auth, health_check, user

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(user.router, tags=["User"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    return app
