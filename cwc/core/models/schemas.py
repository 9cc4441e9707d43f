# cwc/core/models/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Literal

class ImmutableModel(BaseModel):
    """
    Clase base que fuerza la inmutabilidad (frozen=True).
    Garantiza que el estado del objeto no sea modificado después de crearse.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='ignore'
    )

# --- SELECCIÓN DE BILLETERA (PERSISTENCIA) ---

class WalletDescriptor(ImmutableModel):
    """
    Representación persistida de la última billetera conectada.
    Se guarda como JSON bajo la clave 'cardanoWallet'.
    Los campos extra (set_additional_wallet_data) se conservan.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='allow')

    name: str
    icon: str = ""
    api_version: str = Field("", alias="apiVersion")
    key: str

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

# --- INDEXADOR (Blockfrost /accounts) ---

class StakeRegistrationRecord(ImmutableModel):
    tx_hash: str
    action: Literal["registered", "deregistered"]

class AccountHistoryRecord(ImmutableModel):
    active_epoch: int
    amount: str = Field(..., description="Lovelace como string decimal")
    pool_id: str
