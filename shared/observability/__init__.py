from .setup import setup_observability
from .metrics import (
    pizza_orders_placed_total,
    pizza_customers_created_total,
    pizza_order_total_price
)
