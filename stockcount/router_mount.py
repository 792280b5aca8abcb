# stockcount/router_mount.py
from __future__ import annotations

from fastapi import FastAPI


def mount_routers(app: FastAPI, *, enable_metrics: bool) -> None:
    from stockcount.api.routers.reference import router as reference_router
    from stockcount.api.routers.stock_count import router as stock_count_router

    app.include_router(stock_count_router)
    app.include_router(reference_router)

    if enable_metrics:
        from stockcount.metrics import router as metrics_router

        app.include_router(metrics_router)
