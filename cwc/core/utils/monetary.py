# cwc/core/utils/monetary.py
import logging
from decimal import Decimal, getcontext
from typing import Union
from cwc.core.config.protocol_constants import ProtocolConstants

# Precisión suficiente para el suministro máximo (45e15 Lovelace) sin redondeo
getcontext().prec = 28

# Tipado de entrada
LovelaceInput = Union[int, str]

logger = logging.getLogger(__name__)

class Monetary:
    """
    Conversión Lovelace -> ADA.
    La conversión a ADA es solo informativa: nunca se usa para construir transacciones.
    """

    @staticmethod
    def to_ada(amount_lovelace: LovelaceInput) -> Decimal:
        try:
            # 1. Normalización segura de entrada
            value: int = 0

            if isinstance(amount_lovelace, bool):
                raise TypeError("bool no es un monto válido")
            if isinstance(amount_lovelace, int):
                value = amount_lovelace
            elif isinstance(amount_lovelace, str): # pyright: ignore[reportUnnecessaryIsInstance]
                value = int(amount_lovelace)
            else:
                raise TypeError(f"Tipo no soportado: {type(amount_lovelace)}")

            # 2. El ledger no tiene saldos negativos
            if value < 0:
                raise ValueError("Lovelace negativos.")

            # 3. Conversión exacta: $\frac{\text{value}}{10^6}$
            return Decimal(value) / Decimal(ProtocolConstants.LOVELACE_PER_ADA)

        except (TypeError, ValueError):
            logger.exception(f"Error procesando Lovelace para visualización: {amount_lovelace}")
            raise ValueError("Monto en Lovelace corrupto.")
