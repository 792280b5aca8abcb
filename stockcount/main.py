# stockcount/main.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stockcount import __version__
from stockcount.core.config import AppSettings, get_settings
from stockcount.core.logging import setup_logging
from stockcount.http_problem_handlers import register_exception_handlers
from stockcount.obs.metrics import PrometheusMiddleware
from stockcount.router_mount import mount_routers
from stockcount.seed import load_seed
from stockcount.services.stock_count_store import StockCountStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[AppSettings] = None,
    *,
    store: Optional[StockCountStore] = None,
) -> FastAPI:
    """
    Build a FastAPI app around its own StockCountStore.

    `store` overrides seeding (tests pass their own); otherwise the store is
    seeded according to settings.SEED_ON_STARTUP.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Stock Count Service",
        version=__version__,
        debug=settings.DEBUG,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.store = store if store is not None else load_seed(
        with_stock_counts=settings.SEED_ON_STARTUP
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.METRICS_ENABLED:
        app.add_middleware(PrometheusMiddleware)

    register_exception_handlers(app)
    mount_routers(app, enable_metrics=settings.METRICS_ENABLED)

    @app.get("/", include_in_schema=False)
    async def root():
        return {"name": app.title, "version": app.version}

    @app.get("/ping", include_in_schema=False)
    async def ping():
        return {"status": "ok"}

    @app.get("/healthz", include_in_schema=False)
    async def healthz():
        return {"status": "ok"}

    logger.info(
        "app created: env=%s stock_counts=%d metrics=%s",
        settings.ENV,
        len(app.state.store),
        settings.METRICS_ENABLED,
    )
    return app


_settings = get_settings()
setup_logging(_settings.LOG_LEVEL)
app = create_app(_settings)
