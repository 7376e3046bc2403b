"""
Shared query helpers for tests.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.accounts.models import Account
from app.modules.transactions.models import Transaction


async def fetch_balance(session: AsyncSession, account_id: int) -> int:
    """Balance as stored, bypassing the identity map"""
    result = await session.execute(
        select(Account.balance).where(Account.id == account_id)
    )
    return result.scalar_one()


async def fetch_transactions(session: AsyncSession, account_id: int):
    """All transaction rows of an account in insertion order"""
    result = await session.execute(
        select(Transaction)
        .where(Transaction.account_id == account_id)
        .order_by(Transaction.id)
    )
    return result.scalars().all()
