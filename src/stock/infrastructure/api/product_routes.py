"""
HTTP routes for the Product resource, mounted under ``/api/product``.

Create, update and delete answer with an ``Envelope``; a domain error is
reported in that envelope with ``success=False`` and a status code that
matches the error. The other routes raise ``HTTPException``.
"""
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse

from stock.application.add_product import AddProductHandler
from stock.application.adjust_stock import (
    DecreaseStockHandler,
    IncreaseStockHandler,
    ShowStockHandler,
)
from stock.application.delete_product import DeleteProductHandler
from stock.application.list_products import ListProductsHandler
from stock.application.search_products import SearchProductsHandler
from stock.application.show_prices import ShowEmployeePriceHandler, ShowPublicPriceHandler
from stock.application.show_product import ShowProductHandler
from stock.application.update_product import UpdateProductHandler
from stock.domain.exceptions import (
    DomainException,
    DuplicateNameError,
    EntityNotFoundError,
)
from stock.domain.repository.product_repository import ProductRepository
from stock.domain.repository.product_type_repository import ProductTypeRepository
from stock.domain.repository.provider_repository import ProviderRepository
from stock.infrastructure.api.dependencies import (
    get_currency,
    get_product_repository,
    get_product_type_repository,
    get_provider_repository,
)
from stock.infrastructure.api.schemas import (
    Envelope,
    GenericResult,
    ProductIn,
    ProductOut,
    ProductSearchIn,
    ProductUpdate,
)
from stock.infrastructure.logger import get_logger

logger = get_logger("api.products")

router = APIRouter(prefix="/api/product", tags=["product"])


def status_for(exc: DomainException) -> int:
    """HTTP status code for a domain error; any other rule violation is 422."""
    if isinstance(exc, EntityNotFoundError):
        return 404
    if isinstance(exc, DuplicateNameError):
        return 409
    return 422


def _failure(exc: DomainException, data=None) -> JSONResponse:
    envelope = Envelope(success=False, message=str(exc), data=data)
    return JSONResponse(status_code=status_for(exc), content=envelope.model_dump(mode="json"))


def _http_error(exc: DomainException) -> HTTPException:
    return HTTPException(status_code=status_for(exc), detail=str(exc))


# ── CRUD ─────────────────────────────────────────────────────────────────────


@router.get("", response_model=List[ProductOut])
def list_products(repo: ProductRepository = Depends(get_product_repository)):
    try:
        dtos = ListProductsHandler(repo).handle()
    except Exception:
        logger.exception("Failed to list products")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return [ProductOut.from_dto(dto) for dto in dtos]


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, repo: ProductRepository = Depends(get_product_repository)):
    try:
        dto = ShowProductHandler(repo).handle(product_id)
    except DomainException as exc:
        raise _http_error(exc)
    return ProductOut.from_dto(dto)


@router.post("", response_model=Envelope)
def create_product(
    body: ProductIn,
    repo: ProductRepository = Depends(get_product_repository),
    type_repo: ProductTypeRepository = Depends(get_product_type_repository),
    provider_repo: ProviderRepository = Depends(get_provider_repository),
    currency: str = Depends(get_currency),
):
    handler = AddProductHandler(repo, type_repo, provider_repo, currency=currency)
    try:
        dto = handler.handle(body.to_spec())
    except DomainException as exc:
        logger.info("Product not created: %s", exc)
        return _failure(exc)
    return Envelope(success=True, data=ProductOut.from_dto(dto))


@router.put("/{product_id}", response_model=Envelope)
def update_product(
    product_id: str,
    body: ProductUpdate,
    repo: ProductRepository = Depends(get_product_repository),
    type_repo: ProductTypeRepository = Depends(get_product_type_repository),
    provider_repo: ProviderRepository = Depends(get_provider_repository),
):
    handler = UpdateProductHandler(repo, type_repo, provider_repo)
    try:
        dto = handler.handle(product_id, body.to_changes())
    except DomainException as exc:
        logger.info("Product %s not updated: %s", product_id, exc)
        return _failure(exc, data=product_id)
    return Envelope(success=True, message="Product updated", data=ProductOut.from_dto(dto))


@router.post("/search", response_model=List[ProductOut])
def search_products(body: ProductSearchIn, repo: ProductRepository = Depends(get_product_repository)):
    dtos = SearchProductsHandler(repo).handle(body.to_criteria())
    return [ProductOut.from_dto(dto) for dto in dtos]


@router.delete("/{product_id}", response_model=Envelope)
def delete_product(product_id: str, repo: ProductRepository = Depends(get_product_repository)):
    try:
        DeleteProductHandler(repo).handle(product_id)
    except DomainException as exc:
        logger.info("Product %s not deleted: %s", product_id, exc)
        return _failure(exc, data=product_id)
    return Envelope(success=True, data=product_id)


# ── Stock ────────────────────────────────────────────────────────────────────


@router.get("/stock/{product_id}", response_model=GenericResult[int])
def get_stock(product_id: str, repo: ProductRepository = Depends(get_product_repository)):
    try:
        return GenericResult[int](result=ShowStockHandler(repo).handle(product_id))
    except DomainException as exc:
        raise _http_error(exc)


@router.put("/stock/descontar/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def decrease_stock(
    product_id: str,
    value: int = Body(...),
    repo: ProductRepository = Depends(get_product_repository),
):
    try:
        DecreaseStockHandler(repo).handle(product_id, value)
    except DomainException as exc:
        raise _http_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/stock/sumar/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def increase_stock(
    product_id: str,
    value: int = Body(...),
    repo: ProductRepository = Depends(get_product_repository),
):
    try:
        IncreaseStockHandler(repo).handle(product_id, value)
    except DomainException as exc:
        raise _http_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── Prices ───────────────────────────────────────────────────────────────────


@router.get("/precioVenta/{product_id}", response_model=GenericResult[Decimal])
def get_public_price(product_id: str, repo: ProductRepository = Depends(get_product_repository)):
    try:
        return GenericResult[Decimal](result=ShowPublicPriceHandler(repo).handle(product_id))
    except DomainException as exc:
        raise _http_error(exc)


@router.get("/precioVentaEmpleado/{product_id}", response_model=GenericResult[Decimal])
def get_employee_price(product_id: str, repo: ProductRepository = Depends(get_product_repository)):
    try:
        return GenericResult[Decimal](result=ShowEmployeePriceHandler(repo).handle(product_id))
    except DomainException as exc:
        raise _http_error(exc)
