from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import logging

from .accounts import AccountService
from .auth import PasswordHasher, TokenService
from .config import Settings, get_settings
from .db import Database
from .deps import AuthGate
from .errors import AuthError, ServiceError, ValidationError
from .inventory import InventoryService
from .routes import accounts, health, products
from .utils.event_logger import configure_logging

logger = logging.getLogger(__name__)

# Body validation failures are reported with the message of the route's own error
_VALIDATION_MESSAGES = {
    "/products": "Invalid product data",
    "/register": "Invalid registration data",
}


def _validation_message(path: str) -> str:
    for prefix, message in _VALIDATION_MESSAGES.items():
        if path.startswith(prefix):
            return message
    return ValidationError.message


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected request body on {request.method} {request.url.path}: {len(exc.errors())} error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": _validation_message(request.url.path)},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application and every service it uses from one settings object.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    database = Database(settings)
    hasher = PasswordHasher(scheme=settings.PASSWORD_SCHEME, rounds=settings.PASSWORD_ROUNDS)
    tokens = TokenService(
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )
    account_service = AccountService(hasher, tokens)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        """Initialize database on startup"""
        database.init_db()
        yield
        database.dispose()

    app = FastAPI(
        title="Inventory Service",
        description="Product inventory with account registration and bearer-token auth",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.token_service = tokens
    app.state.account_service = account_service
    app.state.inventory_service = InventoryService()
    app.state.auth_gate = AuthGate(tokens, account_service)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(accounts.router)
    app.include_router(products.router)
    app.include_router(health.router)

    logger.info("Inventory service app initialized")
    return app


app = create_app()


def run() -> None:
    """Serve the module-level app on the configured host and port."""
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
