from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select
from datetime import datetime, timezone
import logging

from app.core.database import utcnow
from app.core.exceptions import AccountNotFoundError, StoreError
from app.modules.accounts.models import Account, account_id_in_range
from app.modules.accounts import schemas
from app.modules.transactions.models import Transaction

logger = logging.getLogger(__name__)

STATEMENT_TRANSACTION_LIMIT = 10


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix"""
    if value.tzinfo is None:
        # SQLite hands back naive UTC
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class StatementService:
    """Read-only account statements"""

    @staticmethod
    async def get_statement(db: AsyncSession, account_id: int) -> schemas.StatementResponse:
        """
        Current balance and the last movements of an account.

        No lock is taken; the statement reflects a recently committed state and
        is dated with the store clock at read time.
        """
        if not account_id_in_range(account_id):
            raise AccountNotFoundError(account_id)

        try:
            result = await db.execute(
                select(Account.balance, Account.credit_limit, utcnow())
                .where(Account.id == account_id)
            )
            account = result.one_or_none()

            if account is None:
                raise AccountNotFoundError(account_id)

            result = await db.execute(
                select(Transaction)
                .where(Transaction.account_id == account_id)
                .order_by(Transaction.created_at.desc(), Transaction.id.desc())
                .limit(STATEMENT_TRANSACTION_LIMIT)
            )
            transactions = result.scalars().all()
        except SQLAlchemyError as exc:
            logger.exception("Store failure reading statement for account %s", account_id)
            raise StoreError() from exc

        balance, credit_limit, read_at = account
        return schemas.StatementResponse(
            saldo=schemas.StatementBalance(
                total=balance,
                data_extrato=format_timestamp(read_at),
                limite=credit_limit
            ),
            ultimas_transacoes=[
                schemas.StatementTransaction(
                    valor=abs(txn.amount),
                    tipo=txn.transaction_type,
                    descricao=txn.details,
                    realizada_em=format_timestamp(txn.created_at)
                )
                for txn in transactions
            ]
        )
