"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Builds the process-wide
FirebasePlatform handle (app.state.platform) and telemetry; no business
logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.firebase import init_firebase_platform

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    A platform already placed on app.state (tests) is kept and not closed.
    """
    settings = get_settings()

    # ---- Startup ----
    owns_platform = getattr(app.state, "platform", None) is None
    if owns_platform:
        app.state.platform = init_firebase_platform(settings)
        if app.state.platform is None:
            logger.warning(
                "Firebase not configured: callable and trigger endpoints will fail "
                "until FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH is set"
            )

    telemetry = None
    if settings.telemetry_enabled:
        from app.shared.telemetry import TelemetryConfig

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        telemetry.instrument_fastapi(app)

    yield

    # ---- Shutdown ----
    platform = getattr(app.state, "platform", None)
    if owns_platform and platform is not None:
        await platform.aclose()
        app.state.platform = None
        logger.info("Firebase HTTP client closed")

    if telemetry is not None:
        telemetry.shutdown()
        logger.info("Telemetry shutdown complete")
