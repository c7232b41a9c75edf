"""
FastAPI application for the stock service.

Usage:
    stock serve
    # or
    uvicorn stock.infrastructure.api.app:app --reload --port 8000
"""
from fastapi import FastAPI

from stock.infrastructure.api.product_routes import router as products_router
from stock.infrastructure.logger import configure_logging


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="Stock API")
    app.include_router(products_router)

    @app.get("/")
    def root():
        return {"message": "Stock API running"}

    return app


app = create_app()
