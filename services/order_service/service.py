import math

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from services.customer_service.service import CustomerService
from shared.observability import pizza_order_total_price, pizza_orders_placed_total

from .catalog import Catalog
from .models import Order, OrderStatus
from .repository import MAX_DB_INT, MAX_ROW_OFFSET, OrderRepository
from .schemas import OrderCreate, OrderPage, OrderResponse, OrderStatusView

logger = structlog.get_logger(__name__)

NOT_FOUND_MESSAGE = "Order not found with ID: {order_id}"


class OrderService:
    @staticmethod
    async def place_order(db: AsyncSession, catalog: Catalog, data: OrderCreate):
        # 1-3. Find-or-create the customer by email (committed on its own)
        customer, _ = await CustomerService.upsert_by_email(
            db, data.customer_name, data.email, data.phone
        )

        # 4-5. Snapshot name and price; unknown ids give no name and a zero total
        pizza_name = catalog.name_of(data.pizza_id)
        total = data.quantity * catalog.unit_price_of(data.pizza_id)

        # 6. Persist the order
        order = Order(
            customer=customer,
            pizza_id=data.pizza_id,
            pizza_name=pizza_name,
            quantity=data.quantity,
            total_price=total,
            status=OrderStatus.PENDING
        )
        order = await OrderRepository.create_order(db, order)

        pizza_orders_placed_total.labels(pizza=pizza_name or "unknown").inc()
        pizza_order_total_price.observe(total)
        logger.info(
            "order_placed",
            order_id=order.id,
            customer_id=customer.id,
            pizza_id=data.pizza_id,
            quantity=data.quantity,
            total_price=total,
        )
        return order

    @staticmethod
    async def view_orders(db: AsyncSession, page: int = 0, size: int = 10) -> OrderPage:
        """
        One page of orders in id order plus the paging flags.

        Negative pages, non-positive sizes and pages too far out to address
        are not rejected; they yield an empty page.
        """
        total_items = await OrderRepository.count_orders(db)

        offset = page * size
        if size > 0 and 0 <= offset <= MAX_ROW_OFFSET:
            orders = await OrderRepository.list_orders(
                db, offset=offset, limit=min(size, MAX_ROW_OFFSET)
            )
        else:
            orders = []

        total_pages = math.ceil(total_items / size) if size > 0 else 0
        has_next = size > 0 and (page + 1) * size < total_items

        return OrderPage(
            orders=[OrderResponse.model_validate(o) for o in orders],
            current_page=page,
            page_size=size,
            total_pages=total_pages,
            total_items=total_items,
            has_next_page=has_next,
            has_previous_page=page > 0,
        )

    @staticmethod
    async def check_order_status(db: AsyncSession, order_id: int) -> OrderStatusView:
        order = None
        if -MAX_DB_INT - 1 <= order_id <= MAX_DB_INT:
            order = await OrderRepository.get_order(db, order_id)
        if not order:
            logger.info("order_not_found", order_id=order_id)
            return OrderStatusView(error=NOT_FOUND_MESSAGE.format(order_id=order_id))
        return OrderStatusView(order=OrderResponse.model_validate(order))
