from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.modules.transactions.schemas import TransactionCreate, TransactionResult
from app.modules.transactions.services import TransactionService

router = APIRouter(prefix="/clientes", tags=["transactions"])


@router.post("/{account_id}/transacoes", response_model=TransactionResult)
async def create_transaction(
    account_id: int,
    txn: TransactionCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Post a credit ("c") or debit ("d") to an account.

    - 422 if the body is invalid or the debit exceeds the credit limit
    - 404 if the account does not exist
    """
    return await TransactionService.post_transaction(
        db, account_id, txn.valor, txn.tipo, txn.descricao
    )
