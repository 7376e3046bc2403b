from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.modules.accounts import schemas, services

router = APIRouter(prefix="/clientes", tags=["accounts"])


@router.get("/{account_id}/extrato", response_model=schemas.StatementResponse)
async def get_statement(
    account_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Get account statement.

    - Current balance and credit limit
    - Up to the 10 most recent transactions, newest first
    """
    return await services.StatementService.get_statement(db, account_id)
