# cwc/core/config/protocol_params.py

import os
from typing import Dict, Any

class ProtocolParams:
    """
    Perfil de parámetros del Ledger usado por el constructor de transacciones.
    Los valores por defecto corresponden a la época objetivo; cada despliegue
    puede sobrescribirlos (Env Vars o JSON) sin tocar código.
    """

    def __init__(self) -> None:
        # Fórmula lineal de comisión: fee = min_fee_a * size + min_fee_b
        self._min_fee_a: int = int(os.getenv("CWC_MIN_FEE_A", 44))
        self._min_fee_b: int = int(os.getenv("CWC_MIN_FEE_B", 155381))

        # Depósitos (Lovelace)
        self._pool_deposit: int = int(os.getenv("CWC_POOL_DEPOSIT", 500_000_000))
        self._key_deposit: int = int(os.getenv("CWC_KEY_DEPOSIT", 2_000_000))

        # Mínimo UTXO
        self._coins_per_utxo_word: int = int(os.getenv("CWC_COINS_PER_UTXO_WORD", 34482))

        # Techos de tamaño
        self._max_value_size: int = int(os.getenv("CWC_MAX_VALUE_SIZE", 5000))
        self._max_tx_size: int = int(os.getenv("CWC_MAX_TX_SIZE", 16384))

        self._prefer_pure_change: bool = os.getenv("CWC_PREFER_PURE_CHANGE", "True").lower() == "true"

    # --- Getters ---
    @property
    def min_fee_a(self) -> int: return self._min_fee_a
    @property
    def min_fee_b(self) -> int: return self._min_fee_b
    @property
    def pool_deposit(self) -> int: return self._pool_deposit
    @property
    def key_deposit(self) -> int: return self._key_deposit
    @property
    def coins_per_utxo_word(self) -> int: return self._coins_per_utxo_word
    @property
    def max_value_size(self) -> int: return self._max_value_size
    @property
    def max_tx_size(self) -> int: return self._max_tx_size
    @property
    def prefer_pure_change(self) -> bool: return self._prefer_pure_change

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        """
        Inyecta configuración externa (JSON) respetando el encapsulamiento.
        Acepta tanto nombres snake_case como camelCase (minFeeA...).
        """
        if not data: return

        linear_fee = data.get("linearFee", {})
        if "minFeeA" in linear_fee: self._min_fee_a = int(linear_fee["minFeeA"])
        if "minFeeB" in linear_fee: self._min_fee_b = int(linear_fee["minFeeB"])

        if "min_fee_a" in data: self._min_fee_a = int(data["min_fee_a"])
        if "min_fee_b" in data: self._min_fee_b = int(data["min_fee_b"])

        if "pool_deposit" in data: self._pool_deposit = int(data["pool_deposit"])
        elif "poolDeposit" in data: self._pool_deposit = int(data["poolDeposit"])

        if "key_deposit" in data: self._key_deposit = int(data["key_deposit"])
        elif "keyDeposit" in data: self._key_deposit = int(data["keyDeposit"])

        if "coins_per_utxo_word" in data: self._coins_per_utxo_word = int(data["coins_per_utxo_word"])
        elif "coinsPerUtxoWord" in data: self._coins_per_utxo_word = int(data["coinsPerUtxoWord"])

        if "max_value_size" in data: self._max_value_size = int(data["max_value_size"])
        elif "maxValSize" in data: self._max_value_size = int(data["maxValSize"])

        if "max_tx_size" in data: self._max_tx_size = int(data["max_tx_size"])
        elif "maxTxSize" in data: self._max_tx_size = int(data["maxTxSize"])

        if "prefer_pure_change" in data:
            self._prefer_pure_change = bool(data["prefer_pure_change"])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min_fee_a": self._min_fee_a,
            "min_fee_b": self._min_fee_b,
            "pool_deposit": self._pool_deposit,
            "key_deposit": self._key_deposit,
            "coins_per_utxo_word": self._coins_per_utxo_word,
            "max_value_size": self._max_value_size,
            "max_tx_size": self._max_tx_size,
            "prefer_pure_change": self._prefer_pure_change,
        }

    def __repr__(self) -> str:
        return f"<ProtocolParams feeA={self._min_fee_a} feeB={self._min_fee_b} maxTx={self._max_tx_size}>"
