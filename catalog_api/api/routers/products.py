# catalog_api/api/routers/products.py
from fastapi import APIRouter, Body, Depends, Query, Request

from catalog_api.domain.schemas import Product, ProductDetails, ProductId
from catalog_api.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(request: Request) -> ProductService:
    return ProductService(
        store=request.app.state.catalog,
        empty_result_policy=request.app.state.profile.empty_result_policy,
    )


@router.post("", response_model=ProductId, status_code=201)
def create_product(
    details: ProductDetails | None = Body(None),
    svc: ProductService = Depends(get_service),
):
    """
    Validates the proposal and stores it.
    Returns only the assigned id, validation failures become 400.
    """
    return svc.create_product(details or ProductDetails())


@router.get("", response_model=list[Product], response_model_exclude_none=True)
def list_products(
    product_type: str | None = Query(None, alias="type"),
    svc: ProductService = Depends(get_service),
):
    return svc.list_products(product_type)


@router.get("/{product_id}", response_model=Product, response_model_exclude_none=True)
def get_product(product_id: int, svc: ProductService = Depends(get_service)):
    return svc.get_product(product_id)
