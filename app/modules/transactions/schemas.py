from pydantic import BaseModel, StrictInt
from typing import Optional


class TransactionCreate(BaseModel):
    """Body of POST /clientes/{id}/transacoes.

    Only wire types are checked here; business rules live in the service so
    they hold for every caller.
    """
    valor: StrictInt
    tipo: str
    descricao: Optional[str] = None


class TransactionResult(BaseModel):
    """Balance after a committed post"""
    limite: int
    saldo: int
