from fastapi import APIRouter, Depends, Form, Query, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import get_db
from .catalog import Catalog, get_catalog
from .repository import MAX_DB_INT
from .schemas import OrderCreate, OrderFormView, OrderPage, OrderStatusView, SuccessView
from .service import OrderService

router = APIRouter()
public_router = APIRouter()  # For any public endpoints (e.g. health check)

@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "order", "status": "running"}


def _to_int(value: str) -> int:
    # Form numbers that do not parse or fit an Integer column degrade to 0
    try:
        number = int(value.strip())
    except ValueError:
        return 0
    if not -MAX_DB_INT - 1 <= number <= MAX_DB_INT:
        return 0
    return number


@router.get("/", response_model=OrderFormView)
@router.get("/orderForm", response_model=OrderFormView)
async def show_form(catalog: Catalog = Depends(get_catalog)):
    return OrderFormView(pizza_names=catalog.names(), pizzas=catalog.entries())


@router.post("/submitOrder")
async def submit_order(
    customer_name: str = Form(..., alias="customerName"),
    email: str = Form(...),
    phone: str = Form(...),
    pizza_id: str = Form(..., alias="pizzaId"),
    quantity: str = Form(...),
    db: AsyncSession = Depends(get_db),
    catalog: Catalog = Depends(get_catalog),
):
    order = OrderCreate(
        customer_name=customer_name,
        email=email,
        phone=phone,
        pizza_id=_to_int(pizza_id),
        quantity=_to_int(quantity),
    )
    await OrderService.place_order(db, catalog, order)
    return RedirectResponse(url="/success", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/success", response_model=SuccessView)
async def success_page():
    return SuccessView()


@router.get("/orders", response_model=OrderPage)
async def view_orders(
    page: int = Query(default=0),
    size: int = Query(default=10),
    db: AsyncSession = Depends(get_db),
):
    return await OrderService.view_orders(db, page, size)


@router.get("/orderStatus/{order_id}", response_model=OrderStatusView)
async def check_order_status(order_id: int, db: AsyncSession = Depends(get_db)):
    return await OrderService.check_order_status(db, order_id)
