"""
Bookkeeper — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from bookkeeper.config import get_settings
from bookkeeper.logging_config import setup_logging
from bookkeeper.api.health import router as health_router
from bookkeeper.api.balances import router as balances_router
from bookkeeper.api.chart import router as chart_router

settings = get_settings()
setup_logging()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Double-entry bookkeeping: balances, ledgers and statements",
)

# Register routers
app.include_router(health_router)
app.include_router(balances_router)
app.include_router(chart_router)
