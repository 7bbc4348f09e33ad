from fastapi import FastAPI

from .products import router as products_router
from .reports import router as reports_router
from .rules import router as rules_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(rules_router)
    app.include_router(products_router)
    app.include_router(reports_router)
