from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from libs.result import Error
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)

ADMIN_PREFIX = "/nysc/admin"


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error on {request.url.path}: {exc.base_error.code} - {exc.base_error.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.base_error.to_payload())


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(
        f"Server error on {request.url.path}: {exc.base_error.code} - "
        f"{exc.base_error.message} ({exc.base_error.reason})"
    )
    return JSONResponse(status_code=exc.status_code, content=exc.base_error.to_payload())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Malformed request bodies share the VALIDATION_ERROR shape of use case errors"""
    errors = jsonable_encoder(exc.errors())
    message = "The given data was invalid"
    if errors:
        field = ".".join(str(part) for part in errors[0].get("loc", [])[1:])
        message = f"{field}: {errors[0].get('msg')}" if field else errors[0].get("msg", message)
    content = Error(code="VALIDATION_ERROR", message=message).to_payload()
    content["errors"] = errors
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=content)


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="NYSC Admin API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import (
        health_check,
        exports,
        admin_users,
        students,
        dashboard,
        submissions,
        settings,
    )

    admin_prefix = f"{ApplicationConfig.API_PREFIX}{ADMIN_PREFIX}"

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(exports.router, prefix=admin_prefix, tags=["Exports"])
    app.include_router(admin_users.router, prefix=admin_prefix, tags=["Admin Users"])
    app.include_router(students.router, prefix=admin_prefix, tags=["Students"])
    app.include_router(dashboard.router, prefix=admin_prefix, tags=["Dashboard"])
    app.include_router(submissions.router, prefix=admin_prefix, tags=["Submissions"])
    app.include_router(settings.router, prefix=admin_prefix, tags=["Settings"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    return app
