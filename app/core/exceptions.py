"""
Error taxonomy for the ledger.

Every failure a service can report is a ``LedgerError`` subclass carrying the
HTTP status it maps to. ``main.py`` turns them into responses in one place.
"""
from typing import Optional


class LedgerError(Exception):
    """Base class for ledger failures"""
    status_code: int = 500
    detail: str = "Internal error"

    def __init__(self, detail: Optional[str] = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class TransactionValidationError(LedgerError):
    """Raised when a transaction request is malformed"""
    status_code = 422
    detail = "Invalid transaction"


class AccountNotFoundError(LedgerError):
    """Raised when an account id is missing from the store"""
    status_code = 404
    detail = "Account not found"

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(f"Account {account_id} not found")


class InvariantViolationError(LedgerError):
    """Raised when a post would take the balance below the credit limit"""
    status_code = 422
    detail = "Insufficient credit limit"


class StoreError(LedgerError):
    """Raised when the store fails to lock, read or write"""
    status_code = 500
    detail = "Storage failure"
