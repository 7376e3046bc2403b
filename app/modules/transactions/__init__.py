# Transaction module
from app.modules.transactions.models import Transaction, TransactionType
from app.modules.transactions.services import TransactionService, within_credit_limit
from app.modules.transactions.router import router

__all__ = [
    "Transaction", "TransactionType",
    "TransactionService", "within_credit_limit", "router"
]
