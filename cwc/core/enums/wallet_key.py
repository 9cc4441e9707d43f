# cwc/core/enums/wallet_key.py

from enum import Enum, unique
from typing import List

@unique
class WalletKey(str, Enum):
    """
    Identificadores CIP-30 de los proveedores soportados.
    El valor es la clave bajo la que el proveedor se inyecta en window.cardano.
    """
    NAMI = "nami"
    ETERNL = "eternl"
    GEROWALLET = "gerowallet"
    FLINT = "flint"
    YOROI = "yoroi"
    NUFI = "nufi"
    TYPHON = "typhoncip30"
    BEGIN = "begin"
    EXODUS = "exodus"

    @classmethod
    def supported(cls) -> List[str]:
        """Lista ordenada de claves soportadas (se muestra al usuario)."""
        return [member.value for member in cls]

    @classmethod
    def is_supported(cls, wallet_key: str) -> bool:
        return wallet_key in cls.supported()
