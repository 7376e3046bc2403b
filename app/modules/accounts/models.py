from sqlalchemy import Column, Integer, BigInteger, CheckConstraint
from app.core.database import Base

# Range of the INTEGER id column; ids outside it cannot exist
ACCOUNT_ID_MIN = -2**31
ACCOUNT_ID_MAX = 2**31 - 1

# Range of the BIGINT balance column
BALANCE_MAX = 2**63 - 1


class Account(Base):
    """Ledger account; rows are provisioned out of band"""
    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint("credit_limit >= 0", name="ck_accounts_credit_limit_non_negative"),
        CheckConstraint("balance + credit_limit >= 0", name="ck_accounts_within_credit_limit"),
    )

    id = Column(Integer, primary_key=True, autoincrement=False)
    balance = Column(BigInteger, default=0, nullable=False)
    credit_limit = Column(BigInteger, default=0, nullable=False)

    def __repr__(self):
        return f"<Account(id={self.id}, balance={self.balance}, credit_limit={self.credit_limit})>"


def account_id_in_range(account_id: int) -> bool:
    """Whether account_id fits the accounts.id column"""
    return ACCOUNT_ID_MIN <= account_id <= ACCOUNT_ID_MAX
