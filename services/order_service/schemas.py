from typing import Dict, List, Optional

from pydantic import BaseModel

from services.customer_service.schemas import CustomerResponse
from .catalog import CatalogEntry
from .models import OrderStatus

class OrderCreate(BaseModel):
    customer_name: str
    email: str
    phone: str
    pizza_id: int
    quantity: int # Not range-checked; zero or negative quantities are stored as given

class OrderResponse(BaseModel):
    id: int
    customer: CustomerResponse
    pizza_id: int
    pizza_name: Optional[str]
    quantity: int
    total_price: float
    status: OrderStatus

    class Config:
        from_attributes = True

class OrderPage(BaseModel):
    orders: List[OrderResponse]
    current_page: int
    page_size: int
    total_pages: int
    total_items: int
    has_next_page: bool
    has_previous_page: bool

class OrderStatusView(BaseModel):
    order: Optional[OrderResponse] = None
    error: Optional[str] = None

class OrderFormView(BaseModel):
    pizza_names: Dict[int, str]
    pizzas: List[CatalogEntry]

class SuccessView(BaseModel):
    message: str = "Order placed successfully!"
