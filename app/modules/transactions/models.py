from sqlalchemy import Column, Integer, BigInteger, String, ForeignKey, DateTime, Index
from app.core.database import Base, utcnow
import enum


class TransactionType(str, enum.Enum):
    """Direction of a balance movement"""
    CREDIT = "c"
    DEBIT = "d"


class Transaction(Base):
    """Append-only record of a posted movement"""
    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_account_id_created_at", "account_id", "created_at"),
    )
    __mapper_args__ = {"eager_defaults": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    # Signed: debits are stored negated
    amount = Column(BigInteger, nullable=False)
    transaction_type = Column(String(1), nullable=False)
    details = Column(String(10), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=utcnow(), nullable=False)

    def __repr__(self):
        return f"<Transaction(account_id={self.account_id}, amount={self.amount}, type={self.transaction_type})>"
