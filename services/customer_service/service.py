"""
Customer Directory upsert keyed by email.

The read and the write are two separate round trips with no lock between
them, so two first-time orders racing on the same email can both insert.
The email column carries no unique constraint and lookups take the oldest
matching row.
"""
from typing import Tuple

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.observability import pizza_customers_created_total

from .models import Customer
from .repository import CustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:

    @staticmethod
    async def upsert_by_email(
        db: AsyncSession, name: str, email: str, phone: str
    ) -> Tuple[Customer, bool]:
        """Returns the stored customer and whether it was newly created."""
        customer = await CustomerRepository.get_by_email(db, email)

        if customer:
            customer.name = name
            customer.phone = phone
            customer = await CustomerRepository.update(db, customer)
            logger.debug("customer_updated", customer_id=customer.id)
            return customer, False

        customer = Customer(name=name, email=email, phone=phone)
        customer = await CustomerRepository.create(db, customer)
        pizza_customers_created_total.inc()
        logger.info("customer_created", customer_id=customer.id)
        return customer, True
