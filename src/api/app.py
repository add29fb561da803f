from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from .error import ClientError, ServerError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
import logging

logger = logging.getLogger(__name__)

_NON_FIELD_LOCATIONS = ("body", "path", "query", "header", "cookie")


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(
        status_code=exc.status_code, content={"error": error_dict}, headers=exc.headers
    )


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in _NON_FIELD_LOCATIONS]
        field = ".".join(loc) if loc else str(err.get("loc", ("body",))[0])
        errors.append({"field": field, "message": err.get("msg", "Invalid value")})

    logger.warning(f"Validation error on {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {"code": "VALIDATION_ERROR", "message": "Request validation failed"},
            "errors": errors,
        },
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error_dict = {"code": "NOT_FOUND", "message": "Not Found"}
    else:
        error_dict = {"code": "HTTP_ERROR", "message": str(exc.detail)}
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error_dict},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}},
    )


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not ApplicationConfig.JWT_SECRET:
        logger.critical("JWT_SECRET is not set; refusing to start")
        raise RuntimeError("JWT_SECRET must be configured")

    from src.depends import engine

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        yield
        await engine.dispose()

    app = FastAPI(title="Blog Service API", version="0.1.0", lifespan=lifespan)

    # Immutable for the process lifetime; handed to routes through src.depends
    app.state.token_service = TokenService(
        secret=ApplicationConfig.JWT_SECRET,
        ttl=ApplicationConfig.JWT_TTL_SECONDS,
        algorithm=ApplicationConfig.JWT_ALGORITHM,
    )
    app.state.password_hasher = PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        from src.api.middleware.request_logging import RequestLoggingMiddleware

        app.add_middleware(RequestLoggingMiddleware)

    from src.api.routes import comment, health_check, post, user

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, tags=["Health"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(post.router, prefix=prefix, tags=["Post"])
    app.include_router(comment.router, prefix=prefix, tags=["Comment"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
