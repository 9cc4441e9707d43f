# cwc/core/models/utxo.py

from dataclasses import dataclass, field
from typing import Dict, Any, Mapping, Optional, Tuple, Union

# --- NOMBRE DE ACTIVO (Unión etiquetada) ---

@dataclass(frozen=True)
class TextAssetName:
    """Nombre de activo que es UTF-8 válido."""
    value: str

@dataclass(frozen=True)
class RawAssetName:
    """Nombre de activo con bytes no decodificables como texto."""
    raw: bytes

AssetName = Union[TextAssetName, RawAssetName]

def asset_name_from_bytes(raw: bytes) -> AssetName:
    try:
        return TextAssetName(raw.decode("utf-8"))
    except UnicodeDecodeError:
        return RawAssetName(raw)


@dataclass(frozen=True)
class Asset:
    """
    Un activo nativo dentro de un UTXO.
    Conserva su policy_id, así la lista plana no pierde la agrupación por política.
    """
    policy_id: str
    name_hex: str
    asset_name: AssetName

    @property
    def name(self) -> str:
        """Texto best-effort (los bytes inválidos se reemplazan, nunca se rechazan)."""
        if isinstance(self.asset_name, TextAssetName):
            return self.asset_name.value
        return self.asset_name.raw.decode("utf-8", errors="replace")

    @property
    def is_text(self) -> bool:
        return isinstance(self.asset_name, TextAssetName)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "policyId": self.policy_id,
            "name": self.name,
            "hex": self.name_hex,
        }


@dataclass(frozen=True)
class Utxo:
    """
    UTXO legible. lovelace_amount es un string decimal: los montos pueden
    superar el rango entero seguro de un float.
    """
    tx_id: str
    tx_index: int
    lovelace_amount: str
    assets: Tuple[Asset, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.tx_index < 0:
            raise ValueError("El índice de output no puede ser negativo.")
        if not self.lovelace_amount.isdigit():
            raise ValueError(f"Monto Lovelace inválido: {self.lovelace_amount!r}")

    @property
    def reference(self) -> str:
        """Identificador único: <tx_id>#<tx_index>"""
        return f"{self.tx_id}#{self.tx_index}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "txId": self.tx_id,
            "txIndx": self.tx_index,
            "lovelaceAmount": self.lovelace_amount,
            "assets": [asset.to_dict() for asset in self.assets],
        }

    def __repr__(self) -> str:
        return f"<Utxo {self.tx_id[:8]}...#{self.tx_index} lovelace={self.lovelace_amount} assets={len(self.assets)}>"


@dataclass(frozen=True)
class UnspentOutputRecord:
    """
    Objeto de ledger estructurado que devuelve el motor de serialización
    al decodificar un UTXO hex (TransactionUnspentOutput).

    multiasset: policy_id(bytes) -> {asset_name(bytes) -> cantidad}.
    El orden de inserción es el orden nativo del bundle.
    """
    tx_id: bytes
    index: int
    address: str
    coin: int
    multiasset: Optional[Mapping[bytes, Mapping[bytes, int]]] = None
