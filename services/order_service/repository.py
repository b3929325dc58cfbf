from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, select
from .models import Order

# Integer columns are 32-bit on Postgres; OFFSET and LIMIT are 64-bit
MAX_DB_INT = 2**31 - 1
MAX_ROW_OFFSET = 2**63 - 1

class OrderRepository:
    @staticmethod
    async def create_order(db: AsyncSession, order: Order):
        db.add(order)
        await db.commit()
        await db.refresh(order)
        return order

    @staticmethod
    async def get_order(db: AsyncSession, order_id: int):
        result = await db.execute(select(Order).where(Order.id == order_id))
        return result.scalars().first()

    @staticmethod
    async def list_orders(db: AsyncSession, offset: int, limit: int):
        result = await db.execute(
            select(Order).order_by(Order.id).offset(offset).limit(limit)
        )
        return result.scalars().all()

    @staticmethod
    async def count_orders(db: AsyncSession) -> int:
        result = await db.execute(select(func.count()).select_from(Order))
        return result.scalar_one()
