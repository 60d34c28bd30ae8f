import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from security_service.config import settings
from security_service.errors import SecurityError
from security_service.middleware.error_handler import ErrorHandlerMiddleware, security_error_handler
from security_service.routers import health, otp, passwords

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("security-service")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Security service starting on %s:%s (storage=%s, messaging=%s)",
        settings.host, settings.port, settings.storage_backend, settings.messaging_provider,
    )
    yield
    logger.info("Security service shutting down")


app = FastAPI(
    title="Security Service",
    version="0.1.0",
    description="One-time passcodes and password verification",
    lifespan=lifespan,
)

app.add_exception_handler(SecurityError, security_error_handler)

# Middleware (order matters: outermost = first to run)
app.add_middleware(ErrorHandlerMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(health.router)
app.include_router(otp.router)
app.include_router(passwords.router)
