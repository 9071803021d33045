from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from app.constants.dashboard import SORTABLE_FIELDS, SortDirection
from app.schemas.products import (
    DashboardState,
    InteractionRequest,
    MutationResponse,
    ProductFilters,
    ProductListResponse,
    ProductRequest,
    ProductRow,
    ProductSummary,
    VisibilityRequest,
)
from app.services.product_filters import apply_view, summarize_products
from app.services.refresh_coordinator import RefreshCoordinator
from app.utils.formatters import (
    format_currency,
    format_date,
    format_number,
    stock_status_color,
    stock_status_label,
)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_coordinator(request: Request) -> RefreshCoordinator:
    coordinator = getattr(request.app.state, "coordinator", None)
    if coordinator is None or coordinator.disposed:
        raise HTTPException(status_code=503, detail="Dashboard is not running")
    return coordinator


def get_filters(
        search_name: str = "",
        min_stock_quantity: Optional[int] = None,
        max_stock_quantity: Optional[int] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        min_sold_count: Optional[int] = None,
        max_sold_count: Optional[int] = None,
        min_sold_sum: Optional[float] = None,
        max_sold_sum: Optional[float] = None) -> ProductFilters:
    return ProductFilters(
        search_name=search_name,
        min_stock_quantity=min_stock_quantity,
        max_stock_quantity=max_stock_quantity,
        min_price=min_price,
        max_price=max_price,
        min_sold_count=min_sold_count,
        max_sold_count=max_sold_count,
        min_sold_sum=min_sold_sum,
        max_sold_sum=max_sold_sum,
    )


@router.get("/state", response_model=DashboardState)
def read_state(coordinator: RefreshCoordinator = Depends(get_coordinator)):
    return coordinator.state


@router.get("/products", response_model=ProductListResponse)
def list_products(
        filters: ProductFilters = Depends(get_filters),
        sort_field: Optional[str] = Query("created_at"),
        sort_direction: str = Query(SortDirection.DESC),
        coordinator: RefreshCoordinator = Depends(get_coordinator)):
    """Current product list, filtered and sorted locally. Never fetches."""
    if sort_field is not None and sort_field not in SORTABLE_FIELDS:
        raise HTTPException(status_code=400,
                            detail=f"Cannot sort by '{sort_field}'")
    if sort_direction not in (SortDirection.ASC, SortDirection.DESC):
        raise HTTPException(status_code=400,
                            detail=f"Unknown sort direction '{sort_direction}'")
    products = coordinator.products
    shown = apply_view(products, filters, sort_field, sort_direction)
    rows = [
        ProductRow(
            id=p.id,
            name=p.name,
            price=p.price,
            stock_quantity=p.stock_quantity,
            created_at=p.created_at,
            sold_count=p.sold_count,
            sold_sum=p.sold_sum,
            price_display=format_currency(p.price),
            sold_count_display=format_number(p.sold_count),
            sold_sum_display=format_currency(p.sold_sum),
            created_at_display=format_date(p.created_at),
            stock_status=stock_status_label(p.stock_quantity),
            stock_status_color=stock_status_color(p.stock_quantity),
        )
        for p in shown
    ]
    return ProductListResponse(
        rows=rows,
        total=len(products),
        shown=len(rows),
        filters_active=filters.is_active(),
    )


@router.get("/summary", response_model=ProductSummary)
def read_summary(coordinator: RefreshCoordinator = Depends(get_coordinator)):
    return summarize_products(coordinator.products)


@router.post("/refresh", response_model=DashboardState)
async def manual_refresh(
        coordinator: RefreshCoordinator = Depends(get_coordinator)):
    await coordinator.manual_refresh()
    return coordinator.state


@router.post("/products", response_model=MutationResponse)
async def create_product(
        body: ProductRequest,
        coordinator: RefreshCoordinator = Depends(get_coordinator)):
    ok = await coordinator.create(body)
    return MutationResponse(success=ok, state=coordinator.state)


@router.put("/products/{product_id}", response_model=MutationResponse)
async def update_product(
        product_id: str,
        body: ProductRequest,
        coordinator: RefreshCoordinator = Depends(get_coordinator)):
    ok = await coordinator.update(product_id, body)
    return MutationResponse(success=ok, state=coordinator.state)


@router.delete("/products/{product_id}", response_model=MutationResponse)
async def delete_product(
        product_id: str,
        coordinator: RefreshCoordinator = Depends(get_coordinator)):
    ok = await coordinator.delete(product_id)
    return MutationResponse(success=ok, state=coordinator.state)


@router.post("/polling/toggle", response_model=DashboardState)
async def toggle_polling(
        coordinator: RefreshCoordinator = Depends(get_coordinator)):
    coordinator.toggle_polling()
    return coordinator.state


@router.put("/interaction", response_model=DashboardState)
async def set_interaction(
        body: InteractionRequest,
        coordinator: RefreshCoordinator = Depends(get_coordinator)):
    coordinator.set_user_interacting(body.interacting)
    return coordinator.state


@router.put("/visibility", response_model=DashboardState)
async def set_visibility(
        body: VisibilityRequest,
        coordinator: RefreshCoordinator = Depends(get_coordinator)):
    coordinator.set_visible(body.visible)
    return coordinator.state


@router.delete("/error", response_model=DashboardState)
async def clear_error(
        coordinator: RefreshCoordinator = Depends(get_coordinator)):
    coordinator.clear_error()
    return coordinator.state
