from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select, update, Select
from typing import Any, Optional
import logging

from app.core.exceptions import (
    AccountNotFoundError, InvariantViolationError, StoreError, TransactionValidationError
)
from app.modules.accounts.models import Account, BALANCE_MAX, account_id_in_range
from app.modules.transactions.models import Transaction, TransactionType
from app.modules.transactions.schemas import TransactionResult

logger = logging.getLogger(__name__)

DESCRIPTION_MAX_LENGTH = 10


def within_credit_limit(candidate_balance: int, credit_limit: int) -> bool:
    """True when the balance does not go below the negated credit limit"""
    return candidate_balance + credit_limit >= 0


class TransactionService:
    """Posts credits and debits against a single account"""

    @staticmethod
    def signed_amount(amount: Any, kind: Any, description: Optional[str]) -> int:
        """
        Validate a posting request and return the amount signed by its kind.

        Raises TransactionValidationError without touching the store.
        """
        if not isinstance(description, str) or not description:
            raise TransactionValidationError("descricao must be provided")
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise TransactionValidationError(
                f"descricao must be at most {DESCRIPTION_MAX_LENGTH} characters"
            )

        try:
            kind = TransactionType(kind)
        except ValueError:
            raise TransactionValidationError("tipo must be 'c' or 'd'")

        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise TransactionValidationError("valor must be a positive integer")
        if amount > BALANCE_MAX:
            raise TransactionValidationError(f"valor must be at most {BALANCE_MAX}")

        return amount if kind == TransactionType.CREDIT else -amount

    @staticmethod
    def locked_account_query(account_id: int) -> Select:
        """Read of one account row holding an exclusive lock until commit"""
        return (
            select(Account.balance, Account.credit_limit)
            .where(Account.id == account_id)
            .with_for_update()
        )

    @staticmethod
    async def post_transaction(
        db: AsyncSession,
        account_id: int,
        amount: Any,
        kind: Any,
        description: Optional[str]
    ) -> TransactionResult:
        """
        Apply a credit or debit to an account.

        The account row is locked for the whole read-check-write sequence, so
        concurrent posts to the same account commit one after another while
        posts to other accounts are not blocked. Nothing is written unless the
        new balance stays within the credit limit.
        """
        value = TransactionService.signed_amount(amount, kind, description)

        if not account_id_in_range(account_id):
            raise AccountNotFoundError(account_id)

        try:
            result = await db.execute(TransactionService.locked_account_query(account_id))
            row = result.one_or_none()

            if row is None:
                await db.rollback()
                raise AccountNotFoundError(account_id)

            balance, credit_limit = row
            candidate = balance + value
            if candidate > BALANCE_MAX:
                await db.rollback()
                raise TransactionValidationError("valor would overflow the balance")

            if not within_credit_limit(candidate, credit_limit):
                await db.rollback()
                logger.info(
                    "Rejected %s of %s on account %s: balance %s, limit %s",
                    kind, amount, account_id, balance, credit_limit
                )
                raise InvariantViolationError()

            await db.execute(
                update(Account)
                .where(Account.id == account_id)
                .values(balance=candidate)
                .execution_options(synchronize_session=False)
            )
            db.add(Transaction(
                account_id=account_id,
                amount=value,
                transaction_type=TransactionType(kind).value,
                details=description
            ))
            await db.commit()
        except SQLAlchemyError as exc:
            logger.exception("Store failure posting to account %s", account_id)
            try:
                await db.rollback()
            except SQLAlchemyError:
                logger.warning("Rollback failed for account %s", account_id, exc_info=True)
            raise StoreError() from exc

        logger.info("Posted %s on account %s, balance %s", value, account_id, candidate)
        return TransactionResult(saldo=candidate, limite=credit_limit)
