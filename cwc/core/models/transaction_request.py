# cwc/core/models/transaction_request.py

from dataclasses import dataclass
from typing import Dict, Any, Optional

def _validate_lovelace(amount: str) -> None:
    # Enteros sin signo en formato decimal (nada de floats)
    if not isinstance(amount, str) or not amount.isdigit():
        raise ValueError(f"lovelace_amount debe ser un entero decimal no negativo. Recibido: {amount!r}")


@dataclass(frozen=True)
class OutputSpec:
    address: str
    lovelace_amount: str

    def __post_init__(self) -> None:
        if not self.address:
            raise ValueError("La dirección del output está vacía.")
        _validate_lovelace(self.lovelace_amount)

    @property
    def lovelace(self) -> int:
        return int(self.lovelace_amount)


@dataclass(frozen=True)
class ChangeOutputSpec(OutputSpec):
    change_address: str = ""

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.change_address:
            raise ValueError("change_address es obligatorio en el output de pago.")


@dataclass(frozen=True)
class BuildTransactionInput:
    payment_details: ChangeOutputSpec
    fee_details: Optional[OutputSpec] = None

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'BuildTransactionInput':
        """
        Reconstruye desde el formato camelCase:
        {"paymentDetails": {address, lovelaceAmount, changeAddress}, "feeDetails": {...}}
        """
        payment = data["paymentDetails"]
        fee = data.get("feeDetails")

        return BuildTransactionInput(
            payment_details=ChangeOutputSpec(
                address=payment["address"],
                lovelace_amount=str(payment["lovelaceAmount"]),
                change_address=payment["changeAddress"],
            ),
            fee_details=OutputSpec(
                address=fee["address"],
                lovelace_amount=str(fee["lovelaceAmount"]),
            ) if fee else None,
        )


@dataclass(frozen=True)
class BuiltTransaction:
    """Transacción sin firmar. No se persiste."""
    tx_hash: str
    tx: str

    def to_dict(self) -> Dict[str, str]:
        return {"txHash": self.tx_hash, "tx": self.tx}


@dataclass(frozen=True)
class Paginate:
    """Cursor de paginación CIP-30 (se reenvía tal cual al proveedor)."""
    page: int
    limit: int

    def __post_init__(self) -> None:
        if self.page < 0 or self.limit <= 0:
            raise ValueError("Paginación inválida (page >= 0, limit > 0).")

    def to_dict(self) -> Dict[str, int]:
        return {"page": self.page, "limit": self.limit}
