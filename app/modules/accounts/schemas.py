from pydantic import BaseModel
from typing import List


class StatementBalance(BaseModel):
    """Balance block of a statement"""
    total: int
    data_extrato: str
    limite: int


class StatementTransaction(BaseModel):
    """One movement as shown on a statement"""
    valor: int
    tipo: str
    descricao: str
    realizada_em: str


class StatementResponse(BaseModel):
    """Account statement: balance and most recent movements"""
    saldo: StatementBalance
    ultimas_transacoes: List[StatementTransaction]
