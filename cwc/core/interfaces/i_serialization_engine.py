# cwc/core/interfaces/i_serialization_engine.py

from abc import ABC, abstractmethod
from typing import Any, Sequence

from cwc.core.config.protocol_params import ProtocolParams
from cwc.core.models.utxo import UnspentOutputRecord

class ITransactionBuilder(ABC):
    """
    Constructor de transacciones del motor externo.
    La selección de inputs, el cálculo de fees y el cambio son responsabilidad del motor.
    """

    @abstractmethod
    def add_output(self, address_bech32: str, lovelace: int) -> None:
        """Decodifica la dirección bech32 y agrega un output de solo-ADA."""
        pass

    @abstractmethod
    def add_inputs_from(self, utxo_hexes: Sequence[str], strategy: int) -> None:
        """Registra el pool de UTXOs candidatos y selecciona con la estrategia indicada."""
        pass

    @abstractmethod
    def add_change_if_needed(self, change_address_bech32: str) -> bool:
        """
        Agrega un output de cambio si el residuo supera el mínimo UTXO.
        Si no, el residuo se absorbe en la comisión. Retorna True si agregó cambio.
        """
        pass

    @abstractmethod
    def build(self) -> Any:
        """Finaliza y devuelve el TransactionBody."""
        pass


class ISerializationEngine(ABC):
    """
    [Caja Negra de Serialización]
    Codec binario (CBOR) y hashing de primitivas del ledger.
    Este sistema nunca firma ni valida: solo decodifica, ensambla y codifica.
    """

    # --- Decodificación ---

    @abstractmethod
    def decode_unspent_output(self, utxo_hex: str) -> UnspentOutputRecord:
        pass

    @abstractmethod
    def address_to_bech32(self, address_hex: str) -> str:
        """Address.from_bytes(hex).to_bech32()"""
        pass

    @abstractmethod
    def value_coin(self, value_hex: str) -> str:
        """Value.from_bytes(hex).coin() como string decimal."""
        pass

    # --- Construcción ---

    @abstractmethod
    def new_transaction_builder(self, params: ProtocolParams) -> ITransactionBuilder:
        pass

    @abstractmethod
    def hash_transaction(self, body: Any) -> str:
        """Hash canónico del body (hex)."""
        pass

    @abstractmethod
    def encode_transaction(self, body: Any, witness_set: Any) -> str:
        """Transaction(body, witness_set) codificada en hex."""
        pass

    @abstractmethod
    def transaction_body(self, tx_hex: str) -> Any:
        """Decodifica una transacción y devuelve su body."""
        pass

    # --- Testigos ---

    @abstractmethod
    def empty_witness_set(self) -> Any:
        pass

    @abstractmethod
    def decode_witness_set(self, witness_set_hex: str) -> Any:
        pass

    @abstractmethod
    def vkey_witnesses(self, witness_set: Any) -> Any:
        """Solo los testigos de clave de verificación (vkeys) del set."""
        pass

    @abstractmethod
    def witness_set_with_vkeys(self, vkeys: Any) -> Any:
        """Set nuevo que contiene únicamente los vkeys indicados."""
        pass
