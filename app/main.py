"""
app/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Registers API routes (SMS) and exception handlers
- No business logic should be written here
- Manages application lifecycle (startup/shutdown)
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from datetime import datetime
import time

from app.core.config import settings, validate_settings, describe_twilio_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.services.sms_service import sms_service
from app.api import sms

# Initialize logging first
setup_logging()
logger = get_logger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Startup
    logger.info("🚀 Starting TAARA backend...")

    try:
        logger.info("Validating configuration...")
        validate_settings()
        logger.info("✅ Configuration validated")

        twilio_status = describe_twilio_settings()
        logger.info(
            "🔧 Twilio Configuration Status: "
            f"account_sid={twilio_status['account_sid']}, "
            f"auth_token={twilio_status['auth_token']}, "
            f"phone_number={twilio_status['phone_number']}, "
            f"mode={twilio_status['mode']}"
        )

        if not sms_service.enabled:
            logger.warning("⚠️ Twilio not configured, SMS will be logged instead of sent")

        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Port: {settings.PORT}")

    except Exception as e:
        logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
        raise

    yield  # Application runs here

    # Shutdown
    logger.info("🛑 Shutting down TAARA backend...")


app = FastAPI(
    title="TAARA Pet Adoption API",
    description="SMS notifications for the TAARA pet adoption dashboard",
    version=APP_VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.is_development else None,  # Disable docs in production
    redoc_url="/redoc" if settings.is_development else None,
)

# CORS Middleware (admin dashboard)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request logging / timing middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request and add a processing time header."""
    start_time = time.time()
    logger.info(f"{request.method} {request.url.path}")

    response = await call_next(request)

    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    # Bulk sends pause between messages, so only flag really slow requests
    if process_time > 5.0:
        logger.warning(
            f"Slow request detected: {request.method} {request.url.path}",
            extra={"process_time": process_time}
        )

    return response


add_exception_handlers(app)

app.include_router(sms.router, prefix="/api/sms", tags=["SMS"])


# Root endpoint
@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - basic info and endpoint listing."""
    return {
        "message": "TAARA Pet Adoption API",
        "version": APP_VERSION,
        "endpoints": {
            "health": "/api/health",
            "sms": {
                "adoptionRequest": "POST /api/sms/adoption-request",
                "adoptionApproval": "POST /api/sms/adoption-approval",
                "adoptionRejection": "POST /api/sms/adoption-rejection",
                "donationConfirmation": "POST /api/sms/donation-confirmation",
                "sendGeneral": "POST /api/sms/send",
                "validatePhone": "POST /api/sms/validate-phone"
            }
        }
    }


# Health check endpoint
@app.get("/api/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.
    twilioConfigured only reflects the account credentials; the sender
    number is checked separately when the SMS service picks its mode.
    """
    return {
        "success": True,
        "message": "Server is running",
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "twilioConfigured": bool(settings.TWILIO_ACCOUNT_SID and settings.TWILIO_AUTH_TOKEN)
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )
